#!/usr/bin/env python3
"""
Linear GraphQL client package.

A typed request/response layer over the Linear GraphQL API with uniform
error handling, plus compound operations (batch creation, sequential bulk
update, project creation with issues) that aggregate partial outcomes.
"""

__version__ = "1.0.0"

from .errors import GraphQLResponseError, OperationFailure, TransportError
from .models import BulkUpdateResult, ProjectWithIssuesResult, RequestTemplate, UpdateFailure
from .templates import TEMPLATE_NAMES, TemplateStore
from .transport import GraphQLTransport
from .gateway import ExecutionGateway
from .orchestrator import BatchIssueCreator, BulkUpdateOrchestrator, ProjectIssueCreator
from .config import Config
from .client import LinearGraphQLClient

__all__ = [
    # Errors
    "OperationFailure",
    "TransportError",
    "GraphQLResponseError",

    # Models
    "RequestTemplate",
    "UpdateFailure",
    "BulkUpdateResult",
    "ProjectWithIssuesResult",

    # Core components
    "TEMPLATE_NAMES",
    "TemplateStore",
    "GraphQLTransport",
    "ExecutionGateway",
    "BatchIssueCreator",
    "BulkUpdateOrchestrator",
    "ProjectIssueCreator",
    "Config",
    "LinearGraphQLClient",
]
