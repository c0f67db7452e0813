"""Wireless subsystem client for wifi-assoc.

:class:`WirelessClient` is constructed once per invocation and hands out
:class:`Interface` handles.  On Linux both drive the host tools:

- ``iw``    interface list, interface info, link state, scan, survey
- ``ip``    link (power) state
- ``nmcli`` association by BSSID and the active connection's security

Every command runs synchronously through :meth:`WirelessClient.run`, which
turns tool failures into :class:`~wifi_assoc.errors.SubsystemError`
subclasses carrying the tool's own message.
"""

import dataclasses
import logging
import os
import subprocess
from typing import List, Optional, Type

from .errors import (
    AssociationFailed, InterfaceNotFound, ScanFailed, SubsystemError,
)
from .models import DiscoveredNetwork, InterfaceState
from .parsers import (
    parse_ip_link_up, parse_iw_dev, parse_iw_info, parse_iw_link,
    parse_iw_scan, parse_iw_survey, parse_nmcli_active_security,
)
from .utils import _freq_to_band

logger = logging.getLogger(__name__)

_SYS_CLASS_NET = "/sys/class/net"


def _redact(cmd: List[str]) -> str:
    """Render a command for logging with any password argument masked."""
    shown = list(cmd)
    for i, arg in enumerate(shown[:-1]):
        if arg == "password":
            shown[i + 1] = "********"
    return " ".join(shown)


class WirelessClient:
    """Entry point to the host's wireless subsystem.

    ``timeout`` bounds each command in seconds; ``None`` leaves it to the
    tools themselves.
    """

    def __init__(self, timeout: Optional[float] = None):
        self.timeout = timeout

    def run(self, cmd: List[str],
            error_cls: Type[SubsystemError] = SubsystemError) -> str:
        """Run ``cmd`` and return its stdout, raising ``error_cls`` on failure."""
        logger.debug(f"Running: {_redact(cmd)}")
        try:
            r = subprocess.run(cmd, capture_output=True, text=True,
                               timeout=self.timeout)
        except FileNotFoundError:
            raise error_cls(f"{cmd[0]} not found", command=cmd)
        except subprocess.TimeoutExpired:
            raise error_cls(f"{cmd[0]} timed out after {self.timeout}s",
                            command=cmd)
        if r.returncode != 0:
            message = (r.stderr.strip() or r.stdout.strip()
                       or f"{cmd[0]} returned code {r.returncode}")
            logger.debug(f"{cmd[0]} exited {r.returncode}: {message}")
            raise error_cls(message, returncode=r.returncode, command=cmd)
        return r.stdout

    def interface_names(self) -> List[str]:
        """Discover wireless interfaces via iw, falling back to /sys/class/net."""
        try:
            names = parse_iw_dev(self.run(["iw", "dev"]))
            if names:
                return names
        except SubsystemError as e:
            logger.debug(f"iw dev failed, falling back to sysfs: {e}")
        try:
            return sorted(
                iface for iface in os.listdir(_SYS_CLASS_NET)
                if os.path.exists(os.path.join(_SYS_CLASS_NET, iface, "wireless"))
            )
        except OSError:
            return []

    def interface(self, name: Optional[str] = None) -> "Interface":
        """Return a handle for ``name``, or for the first wireless interface."""
        names = self.interface_names()
        if name is None:
            if not names:
                raise InterfaceNotFound("No wireless interface found")
            return Interface(self, names[0])
        if name not in names:
            raise InterfaceNotFound(f"No wireless interface named {name!r}")
        return Interface(self, name)


class Interface:
    """Handle to one wireless interface; the host owns the device itself."""

    def __init__(self, client: WirelessClient, name: str):
        self.client = client
        self.name = name

    def __str__(self):
        return self.name

    def __repr__(self):
        return f"Interface({self.name!r})"

    def _optional(self, cmd: List[str]) -> Optional[str]:
        """Run a command whose failure only means a field stays unknown."""
        try:
            return self.client.run(cmd)
        except SubsystemError as e:
            logger.debug(f"{_redact(cmd)} unavailable: {e}")
            return None

    def state(self) -> InterfaceState:
        """Describe the interface's current power, association and radio state."""
        state = InterfaceState(name=self.name)

        out = self._optional(["iw", "dev", self.name, "info"])
        if out is not None:
            info = parse_iw_info(out)
            state.hardware_address = info.get("addr")
            state.mode = info.get("type")
            state.ssid = info.get("ssid")
            state.channel = info.get("channel")
            state.channel_band = _freq_to_band(info.get("frequency"))
            state.channel_width = info.get("width")
            state.tx_power = info.get("txpower")

        out = self._optional(["ip", "-o", "link", "show", "dev", self.name])
        if out is not None:
            state.power = parse_ip_link_up(out)

        out = self._optional(["iw", "dev", self.name, "link"])
        if out is not None:
            link = parse_iw_link(out)
            if link:
                state.bssid = link.get("bssid")
                state.ssid = link.get("ssid", state.ssid)
                state.rssi = link.get("signal")
                state.tx_rate = link.get("tx_rate")

        if state.bssid:
            out = self._optional([
                "nmcli", "-t", "-f", "IN-USE,BSSID,SECURITY",
                "device", "wifi", "list", "ifname", self.name, "--rescan", "no",
            ])
            if out is not None:
                state.security = parse_nmcli_active_security(out)
        return state

    def _noise_by_frequency(self):
        out = self._optional(["iw", "dev", self.name, "survey", "dump"])
        return parse_iw_survey(out) if out is not None else {}

    def scan_for_networks(self, ssid: Optional[str] = None) -> List[DiscoveredNetwork]:
        """Run a blocking scan and return every BSS seen, in subsystem order.

        With ``ssid`` the scan actively probes for that name and only BSSs
        advertising exactly that SSID are returned.
        """
        cmd = ["iw", "dev", self.name, "scan"]
        if ssid is not None:
            cmd += ["ssid", ssid]
        networks = parse_iw_scan(self.client.run(cmd, ScanFailed))
        if ssid is not None:
            networks = [n for n in networks if n.ssid == ssid]

        noise = self._noise_by_frequency()
        if noise:
            networks = [
                dataclasses.replace(n, noise=noise.get(n.frequency))
                for n in networks
            ]
        logger.info(f"Scan on {self.name} found {len(networks)} networks")
        return networks

    def associate(self, network: DiscoveredNetwork,
                  password: Optional[str] = None) -> None:
        """Associate with ``network`` by BSSID; ``password`` None means open."""
        cmd = ["nmcli", "device", "wifi", "connect", network.bssid]
        if password is not None:
            cmd += ["password", password]
        cmd += ["ifname", self.name]
        self.client.run(cmd, AssociationFailed)
