#!/usr/bin/env python3
"""
Compound operations for the Linear GraphQL client.

This module coordinates several gateway calls into one caller-visible
action: batch issue creation, sequential bulk update, and project
creation followed by issue creation bound to the new project.
"""

import logging
from typing import Any, Callable, Dict, List, Optional

from .errors import OperationFailure
from .gateway import ExecutionGateway
from .models import BulkUpdateResult, ProjectWithIssuesResult, UpdateFailure
from .templates import TemplateStore


class BatchIssueCreator:
    """Creates a list of issues with one batch mutation"""

    def __init__(self, gateway: ExecutionGateway, templates: TemplateStore):
        self.gateway = gateway
        self.template = templates.get("create-batch-issues")

    async def create_batch(self, issues: List[Dict[str, Any]]) -> Dict[str, Any]:
        """Submit all issues as one operation; success is what the API reports"""
        return await self.gateway.execute(self.template, {"input": {"issues": issues}})


class BulkUpdateOrchestrator:
    """Applies one update to many issues, one issue at a time

    The API has no multi-ID update, so each identifier gets its own
    ``issueUpdate`` call, strictly in input order. A failing identifier is
    recorded and the loop moves on; it never stops the remaining updates.
    """

    def __init__(self, gateway: ExecutionGateway, templates: TemplateStore):
        self.gateway = gateway
        self.template = templates.get("update-issue")

    async def update_many(
        self,
        ids: List[str],
        input: Dict[str, Any],
        on_failure: Optional[Callable[[UpdateFailure], None]] = None
    ) -> BulkUpdateResult:
        result = BulkUpdateResult()

        for issue_id in ids:
            try:
                response = await self.gateway.execute(self.template, {"id": issue_id, "input": input})
                issue = self._updated_issue(response)
            except Exception as e:
                self._record_failure(result, UpdateFailure(issue_id, str(e)), on_failure)
                continue

            if issue is None:
                self._record_failure(
                    result,
                    UpdateFailure(issue_id, "issueUpdate reported unsuccessful"),
                    on_failure
                )
            else:
                result.issues.append(issue)

        if result.failures:
            logging.warning(f"Updated {len(result.issues)} of {len(ids)} issues; failed: {result.failed_ids}")
        else:
            logging.info(f"Updated {len(result.issues)} issues")
        return result

    @staticmethod
    def _updated_issue(response: Dict[str, Any]) -> Optional[Dict[str, Any]]:
        """Return the updated issue, or None if the update was not confirmed"""
        if not isinstance(response, dict):
            raise OperationFailure(f"Unexpected issueUpdate response: {response!r}")
        issue_update = response.get("issueUpdate") or {}
        if not isinstance(issue_update, dict):
            raise OperationFailure(f"Unexpected issueUpdate response: {issue_update!r}")
        issue = issue_update.get("issue")
        if issue_update.get("success") and issue:
            return issue
        return None

    def _record_failure(
        self,
        result: BulkUpdateResult,
        failure: UpdateFailure,
        on_failure: Optional[Callable[[UpdateFailure], None]]
    ):
        logging.warning(f"Failed to update issue {failure.issue_id}: {failure.reason}")
        result.success = False
        result.failures.append(failure)
        if on_failure is not None:
            try:
                on_failure(failure)
            except Exception as e:
                logging.error(f"on_failure callback raised for issue {failure.issue_id}: {e}")


class ProjectIssueCreator:
    """Creates a project, then a batch of issues inside it"""

    def __init__(
        self,
        gateway: ExecutionGateway,
        templates: TemplateStore,
        batch_creator: Optional[BatchIssueCreator] = None
    ):
        self.gateway = gateway
        self.template = templates.get("create-project")
        self.batch_creator = batch_creator or BatchIssueCreator(gateway, templates)

    async def create_project_with_issues(
        self,
        project: Dict[str, Any],
        issues: List[Dict[str, Any]]
    ) -> ProjectWithIssuesResult:
        """Create the project and its issues

        Raises OperationFailure if either step reports failure. A project
        whose issues could not be created is left in place.
        """
        project_result = await self.gateway.execute(self.template, {"input": project})
        project_create = project_result.get("projectCreate") if isinstance(project_result, dict) else None
        project_id = self._created_project_id(project_create)
        if project_id is None:
            logging.error(f"Project creation unsuccessful: {project.get('name')}")
            raise OperationFailure("Failed to create project")

        logging.info(f"Created project {project_id}; creating {len(issues)} issues")

        issues_with_project = [{**issue, "projectId": project_id} for issue in issues]
        issues_result = await self.batch_creator.create_batch(issues_with_project)
        issue_batch_create = issues_result.get("issueBatchCreate") or {}
        if not issue_batch_create.get("success"):
            # TODO: decide whether to delete the project when its issues fail
            logging.error(f"Issue batch creation unsuccessful for project {project_id}")
            raise OperationFailure("Failed to create issues")

        return ProjectWithIssuesResult(
            project_create=project_create,
            issue_batch_create=issue_batch_create
        )

    @staticmethod
    def _created_project_id(project_create: Any) -> Optional[str]:
        if not isinstance(project_create, dict) or not project_create.get("success"):
            return None
        created = project_create.get("project")
        if not isinstance(created, dict):
            return None
        return created.get("id") or None
