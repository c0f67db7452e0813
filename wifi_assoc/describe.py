"""Canonical attribute mappings for interfaces and discovered networks.

Both describers return ``{name: str}`` dicts whose key set never depends on
what the subsystem reported: an absent value is rendered as the placeholder
so columns stay aligned.
"""

from typing import Any, Dict

from .constants import _PLACEHOLDER
from .models import DiscoveredNetwork, InterfaceState


def _fmt(value: Any, unit: str = "") -> str:
    """Stringify ``value``, or return the placeholder for None/empty."""
    if value is None or value == "":
        return _PLACEHOLDER
    if isinstance(value, bool):
        return "On" if value else "Off"
    if isinstance(value, float):
        value = f"{value:g}"
    return f"{value}{unit}"


def interface_dictionary(state: InterfaceState) -> Dict[str, str]:
    """Describe an interface snapshot for the key/value dump."""
    return {
        "Interface": _fmt(state.name),
        "Power": _fmt(state.power),
        "SSID": _fmt(state.ssid),
        "BSSID": _fmt(state.bssid),
        "ChannelNumber": _fmt(state.channel),
        "ChannelBand": _fmt(state.channel_band),
        "ChannelWidth": _fmt(state.channel_width),
        "TxRate": _fmt(state.tx_rate, " Mbit/s"),
        "TxPower": _fmt(state.tx_power, " dBm"),
        "RSSI": _fmt(state.rssi),
        "HardwareAddress": _fmt(state.hardware_address),
        "Mode": _fmt(state.mode),
        "Security": _fmt(state.security),
    }


def network_dictionary(network: DiscoveredNetwork) -> Dict[str, str]:
    """Describe one discovered network, including the non-default columns."""
    return {
        "SSID": _fmt(network.ssid),
        "BSSID": _fmt(network.bssid),
        "ChannelNumber": _fmt(network.channel),
        "ChannelBand": _fmt(network.channel_band),
        "ChannelWidth": _fmt(network.channel_width),
        "RSSI": _fmt(network.rssi),
        "Noise": _fmt(network.noise),
        "Country": _fmt(network.country),
        "Security": _fmt(network.security),
        "Frequency": _fmt(network.frequency),
        "BeaconInterval": _fmt(network.beacon_interval),
        "InformationElements": _fmt(",".join(network.information_elements)),
    }
