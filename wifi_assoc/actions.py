"""The scan and associate actions.

Both take the wireless client / interface handle explicitly so a fake
subsystem can stand in for the host's tools.
"""

import logging
from typing import List, Optional, Sequence, TextIO

from .client import Interface, WirelessClient
from .constants import _NETWORK_KEYS
from .describe import interface_dictionary, network_dictionary
from .models import DiscoveredNetwork
from .output import format_kv_table, format_table, print_err, print_out

logger = logging.getLogger(__name__)


def find_network(networks: Sequence[DiscoveredNetwork],
                 bssid: str) -> Optional[DiscoveredNetwork]:
    """Return the first network whose BSSID equals ``bssid`` exactly."""
    for network in networks:
        if network.bssid == bssid:
            return network
    return None


def scan(client: WirelessClient, interface: Interface,
         ssid: Optional[str] = None,
         out: Optional[TextIO] = None,
         err: Optional[TextIO] = None) -> List[DiscoveredNetwork]:
    """List interfaces, dump the active one, scan, and print the network table.

    Progress goes to ``err``; only the network table goes to ``out``, and
    only once the scan has succeeded.  Raises ScanFailed.
    """
    print_err("Available interfaces:", stream=err)
    for name in client.interface_names():
        print_err(f"  {name}", stream=err)
    print_err(f"Using interface: {interface}", stream=err)
    print_err("Current interface:", stream=err)
    print_err(format_kv_table(interface_dictionary(interface.state())), stream=err)

    networks = interface.scan_for_networks(ssid)

    print_err("Available networks:", stream=err)
    rows = [network_dictionary(n) for n in networks]
    print_out(format_table(rows, _NETWORK_KEYS), stream=out)
    return networks


def associate(interface: Interface, bssid: str,
              password: Optional[str] = None,
              err: Optional[TextIO] = None) -> Optional[DiscoveredNetwork]:
    """Associate with ``bssid`` as seen by a fresh scan.

    Returns the network associated with, or None when no network in the
    scan has that BSSID, in which case nothing is sent to the subsystem.
    Raises ScanFailed or AssociationFailed.
    """
    networks = interface.scan_for_networks(None)
    print_err(f"Associating with bssid: {bssid}", stream=err)
    target = find_network(networks, bssid)
    if target is None:
        print_err("No network matching bssid found!", stream=err)
        return None

    logger.debug(f"Matched {bssid} to SSID {target.ssid!r} on channel {target.channel}")
    interface.associate(target, password)
    print_err(f"Associated with {target.ssid or '<hidden>'} ({target.bssid})", stream=err)
    return target
