#!/usr/bin/env python3
"""
Error types for the Linear GraphQL client.

Transport-level problems are raised as TransportError (or its
GraphQLResponseError subclass); the execution gateway and the compound
operations surface everything to callers as OperationFailure.
"""

from typing import Any, Dict, List, Optional


class OperationFailure(Exception):
    """A GraphQL operation, simple or compound, did not succeed"""


class TransportError(Exception):
    """The network round trip failed or returned an unusable response"""

    def __init__(self, message: str, status: Optional[int] = None):
        super().__init__(message)
        self.status = status


class GraphQLResponseError(TransportError):
    """The API answered but reported GraphQL errors"""

    def __init__(self, errors: List[Dict[str, Any]], status: Optional[int] = None):
        self.errors = errors
        messages = [error.get("message", "Unknown GraphQL error") for error in errors]
        super().__init__("; ".join(messages), status)
