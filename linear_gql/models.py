#!/usr/bin/env python3
"""
Data models for the Linear GraphQL client.

Request templates and the aggregate results returned by compound
operations. Everything here is request-scoped; nothing is persisted.
"""

from dataclasses import dataclass, asdict, field
from typing import Any, Dict, List


@dataclass(frozen=True)
class RequestTemplate:
    """A named GraphQL document"""
    name: str
    body: str


@dataclass
class UpdateFailure:
    """One identifier that a bulk update could not confirm"""
    issue_id: str
    reason: str

    def to_dict(self) -> Dict:
        return asdict(self)


@dataclass
class BulkUpdateResult:
    """Outcome of updating several issues one at a time"""
    success: bool = True
    issues: List[Dict[str, Any]] = field(default_factory=list)
    failures: List[UpdateFailure] = field(default_factory=list)

    @property
    def failed_ids(self) -> List[str]:
        return [failure.issue_id for failure in self.failures]

    def to_dict(self) -> Dict:
        """Convert to the issueUpdate response shape"""
        return {
            "issueUpdate": {
                "success": self.success,
                "issues": self.issues,
            }
        }


@dataclass
class ProjectWithIssuesResult:
    """Outcome of creating a project and its issues"""
    project_create: Dict[str, Any]
    issue_batch_create: Dict[str, Any]

    @property
    def success(self) -> bool:
        return bool(
            self.project_create.get("success")
            and self.issue_batch_create.get("success")
        )

    @property
    def project_id(self) -> str:
        return self.project_create["project"]["id"]

    def to_dict(self) -> Dict:
        """Convert to the combined projectCreate/issueBatchCreate shape"""
        return {
            "projectCreate": self.project_create,
            "issueBatchCreate": self.issue_batch_create,
        }
