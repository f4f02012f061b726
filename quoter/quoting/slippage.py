"""Slippage tolerance parsing."""

from __future__ import annotations

import re

from quoter.constants import MAX_SLIPPAGE_BPS

_SLIPPAGE_PATTERN = re.compile(r"(\d{1,3})(?:\.(\d{0,2}))?", re.ASCII)


def parse_slippage_bps(text: str) -> int | None:
    """Parse a percentage string such as "0.5" or "1.25" into basis points.

    Up to three integer digits and two fraction digits are accepted. The
    fraction is right-padded, so "1.5" is 150 bps.

    Returns:
        Basis points in [0, 10000], or None if the text is empty, malformed
        or above 100%. None means trading is disabled, not zero tolerance.
    """
    trimmed = text.strip()
    if not trimmed:
        return None

    match = _SLIPPAGE_PATTERN.fullmatch(trimmed)
    if match is None:
        return None

    whole = int(match.group(1))
    if whole > 100:
        return None

    fraction = (match.group(2) or "").ljust(2, "0")
    bps = whole * 100 + int(fraction)
    if bps > MAX_SLIPPAGE_BPS:
        return None
    return bps


def format_bps(bps: int | None) -> str:
    """Render basis points as a percentage label ("1.00%"), or "Invalid"."""
    if bps is None:
        return "Invalid"
    return f"{bps // 100}.{bps % 100:02d}%"
