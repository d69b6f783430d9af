#!/usr/bin/env python3
"""
HTTP transport for the Linear GraphQL API.

This module performs the single network round trip behind every
operation: it posts a GraphQL document and its variables, and turns
HTTP, decoding and GraphQL-reported errors into TransportError.
"""

import asyncio
import logging
from typing import Any, Dict, Optional

import aiohttp

from .errors import GraphQLResponseError, TransportError


LINEAR_API_URL = "https://api.linear.app/graphql"


class GraphQLTransport:
    """aiohttp-based GraphQL transport"""

    def __init__(
        self,
        api_key: str,
        api_url: str = LINEAR_API_URL,
        timeout_seconds: float = 30,
        session: Optional[aiohttp.ClientSession] = None
    ):
        self.api_key = api_key
        self.api_url = api_url
        self.timeout = aiohttp.ClientTimeout(total=timeout_seconds)
        self.session = session
        self.headers = {
            "Authorization": api_key,
            "Content-Type": "application/json",
            "Accept": "application/json"
        }

    async def send(self, body: str, variables: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        """Post a GraphQL document and return the decoded response payload"""
        payload: Dict[str, Any] = {"query": body}
        if variables is not None:
            payload["variables"] = variables

        if self.session is not None:
            return await self._post(self.session, payload)

        async with aiohttp.ClientSession(timeout=self.timeout) as session:
            return await self._post(session, payload)

    async def _post(self, session: aiohttp.ClientSession, payload: Dict[str, Any]) -> Dict[str, Any]:
        try:
            async with session.post(
                self.api_url,
                headers=self.headers,
                json=payload,
                timeout=self.timeout
            ) as resp:
                if not 200 <= resp.status < 300:
                    text = await resp.text()
                    raise TransportError(f"Linear API error: {resp.status} {text}", resp.status)
                try:
                    result = await resp.json()
                except (aiohttp.ContentTypeError, ValueError) as e:
                    raise TransportError(f"Malformed GraphQL response: {e}", resp.status) from e
                status = resp.status
        except aiohttp.ClientError as e:
            raise TransportError(f"Request to {self.api_url} failed: {e}") from e
        except asyncio.TimeoutError as e:
            raise TransportError(f"Request to {self.api_url} timed out") from e

        if not isinstance(result, dict):
            raise TransportError("Malformed GraphQL response: expected a JSON object", status)

        errors = result.get("errors")
        if errors:
            logging.debug(f"GraphQL errors from {self.api_url}: {errors}")
            raise GraphQLResponseError(errors, status)

        return result
