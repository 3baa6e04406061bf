# tokensafety/utils/fee_check.py
from __future__ import annotations
from typing import Any, Optional

# fees arrive from the data API in basis points (10000 == 100%)
BPS_DENOMINATOR = 10_000
BPS_PER_PERCENT = 100
MAX_FEE_BPS = BPS_DENOMINATOR


def bps_to_percent(raw: int | float) -> float:
    # single division keeps 8000 -> 80.0 exact at the tier boundaries
    return raw / BPS_PER_PERCENT


def max_fee_percent(sell_fee_bps: Optional[int], buy_fee_bps: Optional[int]) -> Optional[float]:
    """
    Higher of the two transfer fees, in percent.
    Only the sides that are present are compared; None when neither is.
    """
    present = [bps for bps in (sell_fee_bps, buy_fee_bps) if bps is not None]
    if not present:
        return None
    return bps_to_percent(max(present))


def format_fee_percent(pct: float) -> str:
    """85.0 -> '85%', 0.3 -> '0.3%', 51.234 -> '51.23%'"""
    s = f"{pct:.2f}".rstrip("0").rstrip(".")
    return f"{s}%"


def coerce_fee_bps(raw: Any, field: str) -> Optional[int]:
    """
    Validate a basis-point value from a provider payload.
    Accepts ints, integral floats and digit strings; None passes through.
    """
    if raw is None:
        return None
    if isinstance(raw, bool):
        raise ValueError(f"{field}: expected basis points, got a boolean.")
    if isinstance(raw, str):
        s = raw.strip()
        if not s:
            return None
        try:
            raw = float(s)
        except ValueError:
            raise ValueError(f"{field}: '{raw}' is not a number.")
    if isinstance(raw, float):
        if not raw.is_integer():
            raise ValueError(f"{field}: basis points must be whole numbers (got {raw}).")
        raw = int(raw)
    if not isinstance(raw, int):
        raise ValueError(f"{field}: expected basis points, got {type(raw).__name__}.")
    if raw < 0 or raw > MAX_FEE_BPS:
        raise ValueError(f"{field}: {raw} is outside 0..{MAX_FEE_BPS} bps.")
    return raw
