#!/usr/bin/env python3
"""
Linear GraphQL client.

This module exposes every operation the client supports: simple
operations that map one-to-one onto a request template, and the compound
operations implemented in the orchestrator module.
"""

from typing import Any, Callable, Dict, List, Optional

import aiohttp

from .config import Config
from .gateway import ExecutionGateway
from .models import BulkUpdateResult, ProjectWithIssuesResult, UpdateFailure
from .orchestrator import BatchIssueCreator, BulkUpdateOrchestrator, ProjectIssueCreator
from .templates import TEMPLATE_NAMES, TemplateStore
from .transport import GraphQLTransport


class LinearGraphQLClient:
    """Typed entry point for Linear GraphQL operations"""

    def __init__(self, gateway: ExecutionGateway, templates: TemplateStore):
        self.gateway = gateway
        self.templates = templates.require(TEMPLATE_NAMES)
        self.batch_creator = BatchIssueCreator(gateway, templates)
        self.bulk_updater = BulkUpdateOrchestrator(gateway, templates)
        self.project_creator = ProjectIssueCreator(gateway, templates, self.batch_creator)

    @classmethod
    def from_config(
        cls,
        config: Config,
        session: Optional[aiohttp.ClientSession] = None
    ) -> "LinearGraphQLClient":
        """Build a client, its transport and its template store from config"""
        if config.templates_path:
            templates = TemplateStore.from_directory(config.templates_path)
        else:
            templates = TemplateStore.default()
        transport = GraphQLTransport(
            config.api_key,
            api_url=config.api_url,
            timeout_seconds=config.timeout_seconds,
            session=session
        )
        return cls(ExecutionGateway(transport, templates), templates)

    async def _run(self, name: str, variables: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        return await self.gateway.execute(self.templates[name], variables)

    # Issues

    async def create_issue(self, input: Dict[str, Any]) -> Dict[str, Any]:
        """Create a single issue"""
        return await self._run("create-issue", {"input": input})

    async def create_issues(self, issues: List[Dict[str, Any]]) -> Dict[str, Any]:
        """Create multiple issues in one batch"""
        return await self.batch_creator.create_batch(issues)

    async def create_batch_issues(self, issues: List[Dict[str, Any]]) -> Dict[str, Any]:
        return await self.batch_creator.create_batch(issues)

    async def update_issue(self, id: str, input: Dict[str, Any]) -> Dict[str, Any]:
        """Update a single issue"""
        return await self._run("update-issue", {"id": id, "input": input})

    async def update_issues(
        self,
        ids: List[str],
        input: Dict[str, Any],
        on_failure: Optional[Callable[[UpdateFailure], None]] = None
    ) -> BulkUpdateResult:
        """Apply the same update to several issues, continuing past failures"""
        return await self.bulk_updater.update_many(ids, input, on_failure)

    async def search_issues(
        self,
        filter: Optional[Dict[str, Any]] = None,
        first: int = 50,
        after: Optional[str] = None,
        order_by: str = "updatedAt"
    ) -> Dict[str, Any]:
        """Search issues with pagination"""
        return await self._run("search-issues", {
            "filter": filter,
            "first": first,
            "after": after,
            "orderBy": order_by
        })

    async def delete_issue(self, id: str) -> Dict[str, Any]:
        return await self._run("delete-issues", {"ids": [id]})

    async def delete_issues(self, ids: List[str]) -> Dict[str, Any]:
        return await self._run("delete-issues", {"ids": ids})

    async def create_issue_labels(self, labels: List[Dict[str, Any]]) -> Dict[str, Any]:
        """Create multiple labels"""
        return await self._run("create-labels", {"labels": labels})

    # Projects

    async def create_project(self, input: Dict[str, Any]) -> Dict[str, Any]:
        return await self._run("create-project", {"input": input})

    async def create_project_with_issues(
        self,
        project: Dict[str, Any],
        issues: List[Dict[str, Any]]
    ) -> ProjectWithIssuesResult:
        """Create a project, then create the given issues inside it"""
        return await self.project_creator.create_project_with_issues(project, issues)

    async def get_project(self, id: str) -> Dict[str, Any]:
        return await self._run("get-project", {"id": id})

    async def search_projects(self, filter: Dict[str, Any]) -> Dict[str, Any]:
        """Search projects, e.g. ``{"name": {"eq": "Roadmap"}}``"""
        return await self._run("search-projects", {"filter": filter})

    # Teams and users

    async def get_teams(self) -> Dict[str, Any]:
        """Get teams with their states and labels"""
        return await self._run("get-teams")

    async def get_current_user(self) -> Dict[str, Any]:
        return await self._run("get-user")
