"""Global constants for wifi-assoc."""

from typing import Dict, List

# Rendered in place of any attribute the subsystem did not report
_PLACEHOLDER = "-"

# CLI actions
_ACTION_SCAN = "scan"
_ACTION_ASSOCIATE = "associate"
_ACTIONS: List[str] = [_ACTION_SCAN, _ACTION_ASSOCIATE]

# Flags that print usage and exit before any other parsing
_HELP_FLAGS = ("-h", "-help", "--help")

_LOG_LEVEL_DEFAULT = "WARNING"

# Network table columns shown by the scan action
_NETWORK_KEYS: List[str] = [
    "SSID", "BSSID",
    "ChannelNumber", "ChannelBand", "ChannelWidth",
    "RSSI",
    "Noise",
    "Country",
]

# Band boundaries (MHz)
_BAND_2GHZ_MAX = 2500
_BAND_5GHZ_MAX = 5925

# VHT operation "channel width" field → channel width
_VHT_WIDTHS: Dict[str, str] = {
    "1": "80MHz",
    "2": "160MHz",
    "3": "80+80MHz",
}

_WIDTH_DEFAULT = "20MHz"
