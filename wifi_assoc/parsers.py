"""Parsers for the text output of iw, ip and nmcli.

Each parser takes the raw stdout of one command and returns plain Python
values; none of them runs a command or raises on unexpected input.  Lines
that cannot be understood are skipped.
"""

import logging
import re
from typing import Any, Dict, List, Optional

from .constants import _VHT_WIDTHS, _WIDTH_DEFAULT
from .models import DiscoveredNetwork
from .utils import _freq_to_band, _freq_to_channel, _parse_float, _parse_int

logger = logging.getLogger(__name__)

_BSS_RE = re.compile(r"^BSS ([0-9A-Fa-f]{2}(?::[0-9A-Fa-f]{2}){5})")
_CONNECTED_RE = re.compile(r"^Connected to ([0-9A-Fa-f:]{17})")
_CHANNEL_RE = re.compile(
    r"channel (\d+) \((\d+)(?:\.\d+)? MHz\)(?:, width: (\d+) MHz)?")
_LINK_FLAGS_RE = re.compile(r"<([^>]*)>")
_HIDDEN_SSID_RE = re.compile(r"^(?:\\x00)+$")

# Top-level scan lines that describe the BSS itself rather than an IE
_BSS_META_KEYS = {
    "TSF", "freq", "beacon interval", "capability", "signal",
    "last seen", "Information elements from Probe Response frame",
    "Information elements from Beacon frame",
}


# ---------------------------------------------------------------------------
# iw dev / iw dev <iface> info
# ---------------------------------------------------------------------------

def parse_iw_dev(output: str) -> List[str]:
    """Return interface names listed by ``iw dev``, in listed order."""
    names = []
    for line in output.splitlines():
        s = line.strip()
        if s.startswith("Interface "):
            names.append(s[len("Interface "):].strip())
    return names


def parse_iw_info(output: str) -> Dict[str, Any]:
    """Parse ``iw dev <iface> info``.

    Returns a dict with any of: ``name``, ``addr``, ``ssid``, ``type``,
    ``channel``, ``frequency``, ``width`` and ``txpower``.
    """
    info: Dict[str, Any] = {}
    for line in output.splitlines():
        s = line.strip()
        if s.startswith("Interface "):
            info["name"] = s[len("Interface "):].strip()
        elif s.startswith("addr "):
            info["addr"] = s[len("addr "):].strip()
        elif s.startswith("ssid "):
            info["ssid"] = s[len("ssid "):]
        elif s.startswith("type "):
            info["type"] = s[len("type "):].strip()
        elif s.startswith("channel "):
            m = _CHANNEL_RE.match(s)
            if m:
                info["channel"] = int(m.group(1))
                info["frequency"] = int(m.group(2))
                if m.group(3):
                    info["width"] = f"{m.group(3)}MHz"
        elif s.startswith("txpower "):
            info["txpower"] = _parse_float(s.split()[1])
    return info


# ---------------------------------------------------------------------------
# iw dev <iface> link
# ---------------------------------------------------------------------------

def parse_iw_link(output: str) -> Dict[str, Any]:
    """Parse ``iw dev <iface> link``; an unassociated interface yields ``{}``."""
    link: Dict[str, Any] = {}
    for line in output.splitlines():
        m = _CONNECTED_RE.match(line.strip())
        if m:
            link["bssid"] = m.group(1)
            continue
        if not link:
            continue
        s = line.strip()
        if s.startswith("SSID: "):
            link["ssid"] = s[len("SSID: "):]
        elif s.startswith("freq: "):
            link["frequency"] = _parse_int(s.split()[1])
        elif s.startswith("signal: "):
            link["signal"] = _parse_int(s.split()[1])
        elif s.startswith("tx bitrate: "):
            link["tx_rate"] = _parse_float(s.split()[2])
    return link


# ---------------------------------------------------------------------------
# ip -o link show dev <iface>
# ---------------------------------------------------------------------------

def parse_ip_link_up(output: str) -> Optional[bool]:
    """Return True when the link flags include UP, None if there are none."""
    m = _LINK_FLAGS_RE.search(output)
    if not m:
        return None
    return "UP" in m.group(1).split(",")


# ---------------------------------------------------------------------------
# iw dev <iface> survey dump
# ---------------------------------------------------------------------------

def parse_iw_survey(output: str) -> Dict[int, int]:
    """Map frequency (MHz) to noise floor (dBm) from ``iw survey dump``."""
    noise: Dict[int, int] = {}
    freq = None
    for line in output.splitlines():
        s = line.strip()
        if s.startswith("Survey data from"):
            freq = None
        elif s.startswith("frequency:"):
            freq = _parse_int(s.split()[1])
        elif s.startswith("noise:") and freq is not None:
            value = _parse_int(s.split()[1])
            if value is not None:
                noise[freq] = value
    return noise


# ---------------------------------------------------------------------------
# iw dev <iface> scan
# ---------------------------------------------------------------------------

def _split_bss_blocks(output: str) -> List[List[str]]:
    blocks: List[List[str]] = []
    for line in output.splitlines():
        if line.startswith("BSS "):
            blocks.append([line])
        elif blocks:
            blocks[-1].append(line)
    return blocks


def _top_level(lines: List[str]) -> List[str]:
    """Lines indented by exactly one tab, without the tab."""
    return [ln[1:] for ln in lines if ln.startswith("\t") and not ln.startswith("\t\t")]


def _field(lines: List[str], prefix: str) -> Optional[str]:
    for ln in lines:
        if ln.startswith(prefix):
            return ln[len(prefix):]
    return None


def _security(top: List[str], block: List[str]) -> str:
    capability = _field(top, "capability: ") or ""
    has_rsn = any(ln.startswith("RSN:") for ln in top)
    has_wpa = any(ln.startswith("WPA:") for ln in top)
    if has_rsn:
        for ln in block:
            s = ln.strip()
            if s.startswith("* Authentication suites:") and "SAE" in s:
                return "WPA3"
        return "WPA2"
    if has_wpa:
        return "WPA"
    if "Privacy" in capability.split():
        return "WEP"
    return "Open"


def _channel_width(block: List[str]) -> str:
    vht = None
    ht = None
    for ln in block:
        s = ln.strip()
        if s.startswith("* channel width: "):
            vht = s[len("* channel width: "):].split()[0]
        elif s.startswith("* STA channel width: "):
            ht = s[len("* STA channel width: "):]
    if vht in _VHT_WIDTHS:
        return _VHT_WIDTHS[vht]
    if ht == "any":
        return "40MHz"
    return _WIDTH_DEFAULT


def _parse_bss(block: List[str]) -> Optional[DiscoveredNetwork]:
    m = _BSS_RE.match(block[0])
    if not m:
        logger.debug(f"Skipping unparseable BSS header: {block[0]!r}")
        return None
    bssid = m.group(1)
    top = _top_level(block)

    freq = _parse_int((_field(top, "freq: ") or "").strip() or None)

    ssid = _field(top, "SSID: ")
    if ssid is None:
        ssid = _field(top, "SSID:") or ""
    if _HIDDEN_SSID_RE.match(ssid):
        ssid = ""

    channel = None
    ds = _field(top, "DS Parameter set: channel ")
    if ds is not None:
        channel = _parse_int(ds.strip())
    if channel is None:
        for ln in block:
            s = ln.strip()
            if s.startswith("* primary channel: "):
                channel = _parse_int(s.split()[-1])
                break
    if channel is None and freq:
        channel = _freq_to_channel(freq)

    signal = _field(top, "signal: ")
    rssi = _parse_int(signal.split()[0]) if signal else None

    country = _field(top, "Country: ")
    if country is not None:
        country = country.split()[0] if country.split() else None

    interval = _field(top, "beacon interval: ")
    beacon_interval = _parse_int(interval.split()[0]) if interval else None

    ies = tuple(
        ln.split(":", 1)[0] for ln in top
        if ":" in ln and ln.split(":", 1)[0] not in _BSS_META_KEYS
    )

    return DiscoveredNetwork(
        bssid=bssid,
        ssid=ssid,
        channel=channel,
        channel_band=_freq_to_band(freq),
        channel_width=_channel_width(block),
        rssi=rssi,
        country=country,
        security=_security(top, block),
        frequency=freq,
        beacon_interval=beacon_interval,
        information_elements=ies,
    )


def parse_iw_scan(output: str) -> List[DiscoveredNetwork]:
    """Parse ``iw dev <iface> scan`` into networks, in the order listed.

    Noise is not part of the scan dump; callers merge it from the survey.
    """
    networks = []
    for block in _split_bss_blocks(output):
        network = _parse_bss(block)
        if network is not None:
            networks.append(network)
    return networks


# ---------------------------------------------------------------------------
# nmcli -t
# ---------------------------------------------------------------------------

def split_terse(line: str) -> List[str]:
    """Split one ``nmcli -t`` line on unescaped colons and unescape fields."""
    parts = re.split(r"(?<!\\):", line)
    return [p.replace("\\:", ":").replace("\\\\", "\\") for p in parts]


def parse_nmcli_active_security(output: str) -> Optional[str]:
    """Return SECURITY of the in-use row of ``nmcli -t -f IN-USE,BSSID,SECURITY``.

    An empty or ``--`` security field means an open network.
    """
    for line in output.splitlines():
        if not line:
            continue
        fields = split_terse(line)
        if len(fields) < 3:
            continue
        if fields[0].strip() == "*":
            security = fields[2].strip()
            if not security or security == "--":
                return "Open"
            return security
    return None
