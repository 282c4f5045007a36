import math
import re

from dummygen.constants import SIZE_UNITS


_SIZE_RE = re.compile(r"^([\d,.]+)\s*(B|KB|MB|GB)?$")


class FormatError(ValueError):
    pass


def parse_size_to_bytes(text: str) -> int:
    """Convert a size such as "10MB", "512kb", "2.5GB" or "1,024" to bytes.

    Units are binary (1 KB = 1024 B) and case-insensitive; a bare number
    is taken as bytes. The result is rounded half-up to an integer.
    """
    s = str(text).strip().upper()
    m = _SIZE_RE.match(s)
    if not m:
        raise FormatError(f"Invalid size format: '{text}' (e.g. 10MB, 512KB, 100)")

    try:
        num = float(m.group(1).replace(",", ""))
    except ValueError:
        raise FormatError(f"Invalid number in size: '{text}'")

    unit = m.group(2) or "B"
    total = num * SIZE_UNITS[unit]
    if not math.isfinite(total):
        raise FormatError(f"Size too large: '{text}'")
    return int(math.floor(total + 0.5))


def human(n: int) -> str:
    """Render a byte count with the largest unit it reaches, e.g. "1.50 MB"."""
    unit = "B"
    for name, multiplier in SIZE_UNITS.items():
        if n >= multiplier:
            unit = name
    if unit == "B":
        return f"{n} B"
    return f"{n / SIZE_UNITS[unit]:.2f} {unit}"
