"""Text rendering for rates and converted amounts."""

from __future__ import annotations

from decimal import Decimal


def format_number(value: float) -> str:
    """Render ``value`` in positional notation using its shortest round-trip digits.

    ``10000.0`` becomes ``"10000"`` and ``1e-05`` becomes ``"0.00001"``.
    """

    return format(Decimal(repr(float(value))).normalize(), "f")


__all__ = ["format_number"]
