"""wifi-assoc: list wireless interfaces, scan for networks, and associate
with a network by BSSID."""

from .actions import associate, find_network, scan
from .client import Interface, WirelessClient
from .describe import interface_dictionary, network_dictionary
from .errors import (
    AssociationFailed, InterfaceNotFound, ScanFailed, SubsystemError,
    UsageError, WifiAssocError,
)
from .models import DiscoveredNetwork, InterfaceState
from .output import format_kv_table, format_table

__version__ = "1.0.0"
__all__ = [
    "scan",
    "associate",
    "find_network",
    "WirelessClient",
    "Interface",
    "interface_dictionary",
    "network_dictionary",
    "DiscoveredNetwork",
    "InterfaceState",
    "format_kv_table",
    "format_table",
    "WifiAssocError",
    "UsageError",
    "InterfaceNotFound",
    "SubsystemError",
    "ScanFailed",
    "AssociationFailed",
]
