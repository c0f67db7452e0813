"""Typed records for interface state and scan results."""

from dataclasses import dataclass, field
from typing import Optional, Tuple


@dataclass
class InterfaceState:
    """Snapshot of one wireless interface, taken when it is described."""
    name: str
    power: Optional[bool] = None
    ssid: Optional[str] = None
    bssid: Optional[str] = None
    channel: Optional[int] = None
    channel_band: Optional[str] = None
    channel_width: Optional[str] = None
    tx_rate: Optional[float] = None      # Mbit/s
    tx_power: Optional[float] = None     # dBm
    rssi: Optional[int] = None           # dBm
    hardware_address: Optional[str] = None
    mode: Optional[str] = None
    security: Optional[str] = None


@dataclass(frozen=True)
class DiscoveredNetwork:
    """One BSS observed during a single scan pass.

    ``bssid`` keeps the exact form the subsystem reported; it is the key
    the associate action matches on.
    """
    bssid: str
    ssid: str = ""
    channel: Optional[int] = None
    channel_band: Optional[str] = None
    channel_width: Optional[str] = None
    rssi: Optional[int] = None           # dBm
    noise: Optional[int] = None          # dBm
    country: Optional[str] = None
    security: Optional[str] = None
    frequency: Optional[int] = None      # MHz
    beacon_interval: Optional[int] = None  # TUs
    information_elements: Tuple[str, ...] = field(default=(), repr=False)
