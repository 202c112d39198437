"""Global test configuration.

Shared fixtures: a MagicMock client facade whose per-kind services can be
stubbed like the remote SDK, and a factory for bus messages.
"""

from unittest.mock import MagicMock

import pytest

from cloudlink.infrastructure.message import Message


@pytest.fixture
def client():
    facade = MagicMock()
    facade.port_service = MagicMock()
    facade.subnet_service = MagicMock()
    facade.network_service = MagicMock()
    facade.router_service = MagicMock()
    facade.keypair_service = MagicMock()
    facade.ports.return_value = facade.port_service
    facade.subnets.return_value = facade.subnet_service
    facade.networks.return_value = facade.network_service
    facade.routers.return_value = facade.router_service
    facade.keypairs.return_value = facade.keypair_service
    return facade


@pytest.fixture
def make_message():
    def _make(body=None, **headers):
        return Message(headers=headers, body=body)

    return _make
