"""
Header Vocabulary

Architectural Intent:
- Canonical, case-sensitive header names understood by every producer
- One flat vocabulary shared across resource kinds (networkId is read by
  both Port and Subnet builders)
- Operation tokens live with the Operation value object
"""

OPERATION = "operation"
ID = "ID"
NAME = "name"

# Neutron
SUBNET_ID = "subnetId"
NETWORK_ID = "networkId"
ROUTER_ID = "routerId"
TENANT_ID = "tenantId"
MAC_ADDRESS = "macAddress"
DEVICE_ID = "deviceId"
IP_VERSION = "ipVersion"
ADMIN_STATE_UP = "adminStateUp"
NETWORK_TYPE = "networkType"
PHYSICAL_NETWORK = "physicalNetwork"
SEGMENT_ID = "segmentId"
IS_SHARED = "isShared"
IS_ROUTER_EXTERNAL = "isRouterExternal"

HEADER_VOCABULARY = frozenset(
    {
        OPERATION,
        ID,
        NAME,
        SUBNET_ID,
        NETWORK_ID,
        ROUTER_ID,
        TENANT_ID,
        MAC_ADDRESS,
        DEVICE_ID,
        IP_VERSION,
        ADMIN_STATE_UP,
        NETWORK_TYPE,
        PHYSICAL_NETWORK,
        SEGMENT_ID,
        IS_SHARED,
        IS_ROUTER_EXTERNAL,
    }
)
