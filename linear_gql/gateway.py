#!/usr/bin/env python3
"""
Execution gateway for the Linear GraphQL client.

Every operation goes through ExecutionGateway.execute: one template, one
round trip, and either the response data or a single OperationFailure.
"""

import logging
from typing import Any, Dict, Optional, Union

from .errors import OperationFailure
from .models import RequestTemplate
from .templates import TemplateStore
from .transport import GraphQLTransport


FAILURE_PREFIX = "GraphQL operation failed"


class ExecutionGateway:
    """Sends GraphQL operations and normalizes their failures"""

    def __init__(self, transport: GraphQLTransport, templates: TemplateStore):
        self.transport = transport
        self.templates = templates

    async def execute(
        self,
        template: Union[RequestTemplate, str],
        variables: Optional[Dict[str, Any]] = None
    ) -> Dict[str, Any]:
        """Run one operation and return its response data

        ``template`` may be a RequestTemplate or the name of one in the store.
        The shape of the returned data is not checked beyond being present.
        """
        if isinstance(template, str):
            template = self.templates.get(template)

        logging.debug(f"Executing {template.name}")
        try:
            response = await self.transport.send(template.body, variables)
        except Exception as e:
            logging.error(f"{template.name} failed: {e}")
            raise OperationFailure(f"{FAILURE_PREFIX}: {e}") from e

        data = response.get("data") if isinstance(response, dict) else None
        if data is None:
            logging.error(f"{template.name} returned no data")
            raise OperationFailure(f"{FAILURE_PREFIX}: response contained no data")
        return data
