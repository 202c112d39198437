"""
Tests for the in-memory OpenStack client adapter.

Coverage strategy
-----------------
  1. The client and its services satisfy the port Protocols.
  2. create assigns a server-side id and defaults.
  3. Ports and subnets require an existing network.
  4. get/list/update/delete behave like the remote API, including 404s.
  5. Keypairs are generated or imported and addressed by name.
"""

import pytest

from cloudlink.domain.entities.network import Network
from cloudlink.domain.entities.port import Port
from cloudlink.domain.entities.router import Router
from cloudlink.domain.entities.subnet import Subnet
from cloudlink.domain.ports.cloud_client_port import (
    CloudClientPort,
    KeypairServicePort,
    ResourceServicePort,
    UpdatableServicePort,
)
from cloudlink.domain.value_objects.ip_version import IPVersion
from cloudlink.infrastructure.adapters.openstack_adapter import (
    InMemoryOpenStackClient,
    OpenStackResponseError,
)


@pytest.fixture
def cloud():
    return InMemoryOpenStackClient(region="RegionTest", project="proj-1", user_id="alice")


@pytest.fixture
def network(cloud):
    return cloud.networks().create(Network(name="private"))


class TestProtocolConformance:
    def test_client(self, cloud):
        assert isinstance(cloud, CloudClientPort)

    def test_services(self, cloud):
        assert isinstance(cloud.ports(), UpdatableServicePort)
        assert isinstance(cloud.subnets(), ResourceServicePort)
        assert isinstance(cloud.keypairs(), KeypairServicePort)


class TestNetworks:
    def test_create_assigns_id_and_defaults(self, network):
        assert network.id
        assert network.status == "ACTIVE"
        assert network.admin_state_up is True
        assert network.tenant_id == "proj-1"

    def test_get_and_list(self, cloud, network):
        assert cloud.networks().get(network.id) == network
        assert cloud.networks().list() == [network]

    def test_get_unknown_returns_none(self, cloud):
        assert cloud.networks().get("missing") is None

    def test_delete(self, cloud, network):
        assert cloud.networks().delete(network.id).success
        assert cloud.networks().list() == []

    def test_delete_unknown_fails_with_404(self, cloud):
        response = cloud.networks().delete("missing")
        assert not response.success
        assert response.code == 404
        assert "missing" in response.message


class TestPorts:
    def test_create_on_existing_network(self, cloud, network):
        port = cloud.ports().create(Port(name="p", network_id=network.id))
        assert port.id
        assert port.mac_address.startswith("fa:16:3e:")
        assert port.status == "DOWN"

    def test_keeps_supplied_mac(self, cloud, network):
        port = cloud.ports().create(Port(network_id=network.id, mac_address="mac"))
        assert port.mac_address == "mac"

    def test_create_without_network_rejected(self, cloud):
        with pytest.raises(OpenStackResponseError) as excinfo:
            cloud.ports().create(Port(name="p"))
        assert excinfo.value.status_code == 400

    def test_create_on_unknown_network_rejected(self, cloud):
        with pytest.raises(OpenStackResponseError, match="could not be found"):
            cloud.ports().create(Port(network_id="nope"))

    def test_update(self, cloud, network):
        port = cloud.ports().create(Port(name="p", network_id=network.id))
        updated = cloud.ports().update(Port(id=port.id, name="p", device_id="dev"))
        assert cloud.ports().get(port.id) == updated

    def test_update_unknown_raises(self, cloud):
        with pytest.raises(OpenStackResponseError):
            cloud.ports().update(Port(id="nope"))


class TestSubnetsAndRouters:
    def test_subnet_defaults_to_v4(self, cloud, network):
        subnet = cloud.subnets().create(Subnet(name="s", network_id=network.id))
        assert subnet.ip_version is IPVersion.V4

    def test_router(self, cloud):
        router = cloud.routers().create(Router(name="r"))
        assert router.id
        assert router.admin_state_up is True


class TestKeypairs:
    def test_generated_keypair_has_private_key_once(self, cloud):
        keypair = cloud.keypairs().create("kp")
        assert keypair.private_key
        assert keypair.public_key.startswith("ssh-rsa ")
        assert keypair.fingerprint.count(":") == 15
        assert keypair.user_id == "alice"
        assert cloud.keypairs().get("kp").private_key is None

    def test_imported_keypair(self, cloud):
        keypair = cloud.keypairs().create("kp", "ssh-rsa AAAA user@host")
        assert keypair.public_key == "ssh-rsa AAAA user@host"
        assert keypair.private_key is None

    def test_duplicate_name_conflicts(self, cloud):
        cloud.keypairs().create("kp")
        with pytest.raises(OpenStackResponseError) as excinfo:
            cloud.keypairs().create("kp")
        assert excinfo.value.status_code == 409

    def test_delete(self, cloud):
        cloud.keypairs().create("kp")
        assert cloud.keypairs().delete("kp").success
        assert not cloud.keypairs().delete("kp").success
