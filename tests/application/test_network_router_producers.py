"""Tests for NetworkProducer and RouterProducer."""

import pytest

from cloudlink.application.producers.network_producer import NetworkProducer
from cloudlink.application.producers.router_producer import RouterProducer
from cloudlink.domain.entities.network import Network
from cloudlink.domain.entities.router import Router
from cloudlink.domain.value_objects.action_response import ActionResponse


class TestNetworkProducer:
    def test_create_binds_provider_headers(self, client, make_message):
        client.network_service.create.side_effect = lambda net: net.with_id("net-1")
        msg = make_message(
            operation="create",
            name="ext",
            tenantId="t1",
            networkType="vlan",
            physicalNetwork="physnet1",
            segmentId="101",
            isShared="true",
            isRouterExternal=True,
            adminStateUp=False,
        )

        NetworkProducer(client).process(msg)

        network = msg.body()
        assert msg.fault is False
        assert network == Network(
            id="net-1",
            name="ext",
            tenant_id="t1",
            admin_state_up=False,
            network_type="vlan",
            physical_network="physnet1",
            segment_id=101,
            shared=True,
            router_external=True,
        )

    def test_create_requires_name(self, client, make_message):
        msg = make_message(operation="create", tenantId="t1")

        NetworkProducer(client).process(msg)

        assert msg.fault is True
        assert msg.body() == "missing header name for create on network"

    def test_invalid_boolean_header_faults(self, client, make_message):
        msg = make_message(operation="create", name="n", isShared="maybe")

        NetworkProducer(client).process(msg)

        assert msg.fault is True
        assert msg.body() == "header isShared has invalid type str for network"

    def test_get_prefers_network_id(self, client, make_message):
        client.network_service.get.return_value = Network(id="n1", name="n")
        msg = make_message(operation="get", networkId="n1", ID="other")

        NetworkProducer(client).process(msg)

        client.network_service.get.assert_called_once_with("n1")

    def test_update_not_supported(self, client, make_message):
        msg = make_message(body=Network(id="n1"), operation="update")

        NetworkProducer(client).process(msg)

        assert msg.body() == "operation update not supported for network"


class TestRouterProducer:
    def test_create(self, client, make_message):
        client.router_service.create.side_effect = lambda router: router.with_id("r-1")
        msg = make_message(operation="create", name="edge", adminStateUp="false")

        RouterProducer(client).process(msg)

        assert msg.body() == Router(id="r-1", name="edge", admin_state_up=False)

    def test_update(self, client, make_message):
        router = Router(id="r-1", name="renamed")
        client.router_service.update.return_value = router
        msg = make_message(body=router, operation="update")

        RouterProducer(client).process(msg)

        client.router_service.update.assert_called_once_with(router)
        assert msg.body() is router

    def test_update_returning_no_id_faults(self, client, make_message):
        client.router_service.update.return_value = None
        msg = make_message(body=Router(id="r-1"), operation="update")

        RouterProducer(client).process(msg)

        assert msg.fault is True
        assert msg.body() == "update returned no ID"

    def test_delete_prefers_router_id(self, client, make_message):
        client.router_service.delete.return_value = ActionResponse.action_success()
        msg = make_message(operation="delete", routerId="r-1", ID="other")

        RouterProducer(client).process(msg)

        client.router_service.delete.assert_called_once_with("r-1")
        assert msg.fault is False
