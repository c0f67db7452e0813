"""Utility helpers for wifi-assoc."""

import os
from typing import Optional

from .constants import _BAND_2GHZ_MAX, _BAND_5GHZ_MAX


def _freq_to_channel(freq: int) -> Optional[int]:
    """Convert frequency (MHz) to 802.11 channel number."""
    if freq == 2484:
        return 14
    if 2412 <= freq <= 2472:
        return (freq - 2412) // 5 + 1
    if 5160 <= freq <= 5885:
        return (freq - 5000) // 5
    if freq == 5935:
        return 2
    if 5955 <= freq <= 7115:
        return (freq - 5950) // 5
    return None


def _freq_to_band(freq: Optional[int]) -> Optional[str]:
    """Return the band label ("2.4GHz", "5GHz", "6GHz") for a frequency."""
    if not freq:
        return None
    if freq < _BAND_2GHZ_MAX:
        return "2.4GHz"
    if freq < _BAND_5GHZ_MAX:
        return "5GHz"
    return "6GHz"


def _parse_int(text: Optional[str]) -> Optional[int]:
    """Parse an integer that may carry a fractional part ("-52.00")."""
    if text is None:
        return None
    try:
        return int(float(text))
    except ValueError:
        return None


def _parse_float(text: Optional[str]) -> Optional[float]:
    if text is None:
        return None
    try:
        return float(text)
    except ValueError:
        return None


def _basename(path: Optional[str]) -> Optional[str]:
    """Return the last path component, or None for an empty path."""
    if not path:
        return None
    return os.path.basename(path)
