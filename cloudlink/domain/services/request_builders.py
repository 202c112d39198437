"""
Request Builder Registry

Architectural Intent:
- One hand-written function per resource kind turning a header map into a
  typed request object
- Each function lists the headers it consumes and the setter each one feeds;
  headers outside that list are ignored
- Builders are pure: no I/O, no message mutation

Design Decisions:
- Optional headers that are absent are simply not set on the builder, so the
  remote API sees exactly what the caller supplied
- Presence and type are the only validation; a required header that is present but
  empty is forwarded and left for the remote API to reject
- Keypair has no entry: keypair create is a (name, public_key) call, not a
  resource build
"""

from typing import Any, Callable, Mapping, Optional

from cloudlink.domain import constants
from cloudlink.domain.entities.network import Network
from cloudlink.domain.entities.port import Port
from cloudlink.domain.entities.router import Router
from cloudlink.domain.entities.subnet import Subnet
from cloudlink.domain.exceptions import HeaderTypeError, MissingHeaderError
from cloudlink.domain.value_objects.ip_version import IPVersion
from cloudlink.domain.value_objects.operation import Operation
from cloudlink.domain.value_objects.resource_kind import ResourceKind

RequestBuilder = Callable[[Mapping[str, Any]], Any]

_TRUE = ("true", "1", "yes")
_FALSE = ("false", "0", "no")


def _string(
    headers: Mapping[str, Any],
    name: str,
    kind: ResourceKind,
    required: bool = False,
) -> Optional[str]:
    if name not in headers:
        if required:
            raise MissingHeaderError(name, Operation.CREATE, kind)
        return None
    value = headers[name]
    if value is None or isinstance(value, str):
        return value
    raise HeaderTypeError(name, value, kind)


def _boolean(headers: Mapping[str, Any], name: str, kind: ResourceKind) -> Optional[bool]:
    value = headers.get(name)
    if value is None or isinstance(value, bool):
        return value
    if isinstance(value, str):
        text = value.strip().lower()
        if text in _TRUE:
            return True
        if text in _FALSE:
            return False
    raise HeaderTypeError(name, value, kind)


def _integer(headers: Mapping[str, Any], name: str, kind: ResourceKind) -> Optional[int]:
    value = headers.get(name)
    if value is None:
        return None
    if isinstance(value, int) and not isinstance(value, bool):
        return value
    if isinstance(value, str) and value.strip().isdigit():
        return int(value)
    raise HeaderTypeError(name, value, kind)


def _ip_version(headers: Mapping[str, Any], kind: ResourceKind) -> Optional[IPVersion]:
    value = headers.get(constants.IP_VERSION)
    if value is None:
        return None
    try:
        return IPVersion.parse(value)
    except ValueError:
        raise HeaderTypeError(constants.IP_VERSION, value, kind) from None


def build_port(headers: Mapping[str, Any]) -> Port:
    """name, tenantId, networkId, macAddress, deviceId; all optional."""
    kind = ResourceKind.PORT
    builder = Port.builder()
    for header, setter in (
        (constants.NAME, builder.name),
        (constants.TENANT_ID, builder.tenant_id),
        (constants.NETWORK_ID, builder.network_id),
        (constants.MAC_ADDRESS, builder.mac_address),
        (constants.DEVICE_ID, builder.device_id),
    ):
        value = _string(headers, header, kind)
        if value is not None:
            setter(value)
    return builder.build()


def build_subnet(headers: Mapping[str, Any]) -> Subnet:
    """networkId (required), name, ipVersion."""
    kind = ResourceKind.SUBNET
    builder = Subnet.builder().network_id(
        _string(headers, constants.NETWORK_ID, kind, required=True)
    )
    name = _string(headers, constants.NAME, kind)
    if name is not None:
        builder.name(name)
    ip_version = _ip_version(headers, kind)
    if ip_version is not None:
        builder.ip_version(ip_version)
    return builder.build()


def build_network(headers: Mapping[str, Any]) -> Network:
    """name (required), tenantId and the provider attributes."""
    kind = ResourceKind.NETWORK
    builder = Network.builder().name(
        _string(headers, constants.NAME, kind, required=True)
    )
    tenant_id = _string(headers, constants.TENANT_ID, kind)
    if tenant_id is not None:
        builder.tenant_id(tenant_id)
    network_type = _string(headers, constants.NETWORK_TYPE, kind)
    if network_type is not None:
        builder.network_type(network_type)
    physical_network = _string(headers, constants.PHYSICAL_NETWORK, kind)
    if physical_network is not None:
        builder.physical_network(physical_network)
    segment_id = _integer(headers, constants.SEGMENT_ID, kind)
    if segment_id is not None:
        builder.segment_id(segment_id)
    for header, setter in (
        (constants.ADMIN_STATE_UP, builder.admin_state_up),
        (constants.IS_SHARED, builder.shared),
        (constants.IS_ROUTER_EXTERNAL, builder.router_external),
    ):
        flag = _boolean(headers, header, kind)
        if flag is not None:
            setter(flag)
    return builder.build()


def build_router(headers: Mapping[str, Any]) -> Router:
    """name (required), tenantId, adminStateUp."""
    kind = ResourceKind.ROUTER
    builder = Router.builder().name(
        _string(headers, constants.NAME, kind, required=True)
    )
    tenant_id = _string(headers, constants.TENANT_ID, kind)
    if tenant_id is not None:
        builder.tenant_id(tenant_id)
    admin_state_up = _boolean(headers, constants.ADMIN_STATE_UP, kind)
    if admin_state_up is not None:
        builder.admin_state_up(admin_state_up)
    return builder.build()


REQUEST_BUILDERS: dict[ResourceKind, RequestBuilder] = {
    ResourceKind.PORT: build_port,
    ResourceKind.SUBNET: build_subnet,
    ResourceKind.NETWORK: build_network,
    ResourceKind.ROUTER: build_router,
}


def get_builder(kind: ResourceKind) -> Optional[RequestBuilder]:
    return REQUEST_BUILDERS.get(kind)
