"""Shared fixtures for the Linear GraphQL client tests"""

import os
import sys
from unittest.mock import AsyncMock, MagicMock

import pytest

# Add parent directory to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from linear_gql import ExecutionGateway, TemplateStore


@pytest.fixture
def templates():
    """The request templates bundled with the package"""
    return TemplateStore.default()


@pytest.fixture
def mock_transport():
    """A transport whose send() answers with an empty data payload"""
    transport = MagicMock()
    transport.send = AsyncMock(return_value={"data": {}})
    return transport


@pytest.fixture
def gateway(mock_transport, templates):
    return ExecutionGateway(mock_transport, templates)
