"""Plain-text rendering of attribute mappings for wifi-assoc.

``format_kv_table`` renders one mapping as aligned ``key: value`` lines;
``format_table`` renders rows over an explicit column list.  Neither sorts:
rows and keys come out in the order they went in.
"""

import sys
from typing import Dict, Optional, Sequence, TextIO

from .constants import _PLACEHOLDER


def format_kv_table(mapping: Dict[str, str], separator: str = ": ") -> str:
    """Render ``mapping`` one key per line, keys padded to the widest key."""
    if not mapping:
        return ""
    width = max(len(k) for k in mapping)
    return "\n".join(
        f"{key:<{width}}{separator}{value}" for key, value in mapping.items()
    )


def format_table(rows: Sequence[Dict[str, str]], keys: Sequence[str],
                 gap: str = "  ") -> str:
    """Render ``rows`` as a header plus one line per row.

    Only ``keys`` are shown, in that order; each column is as wide as its
    header or its widest cell.
    """
    cells = [[row.get(k, _PLACEHOLDER) for k in keys] for row in rows]
    widths = [
        max([len(k)] + [len(r[i]) for r in cells])
        for i, k in enumerate(keys)
    ]
    lines = [gap.join(k.ljust(w) for k, w in zip(keys, widths))]
    for r in cells:
        lines.append(gap.join(c.ljust(w) for c, w in zip(r, widths)))
    return "\n".join(lines)


def print_err(*parts, stream: Optional[TextIO] = None):
    """Write a diagnostic line (stderr unless ``stream`` is given)."""
    print(*parts, file=stream or sys.stderr)


def print_out(*parts, stream: Optional[TextIO] = None):
    """Write a result line (stdout unless ``stream`` is given)."""
    print(*parts, file=stream or sys.stdout)
