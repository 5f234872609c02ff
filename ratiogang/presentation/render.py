"""
Output formats for a market cap ratio: gauge (default), plain and JSON.

Note the percentages differ on purpose: the gauge rounds half away from zero
while plain and JSON truncate, so 17.65% shows as 18% on the gauge and 17
elsewhere.
"""
import json
import math

from ratiogang.presentation.ratio import MarketCapRatio
from ratiogang.schemas import AssetCap, RatioReport

BAR_LENGTH = 40
FILLED_GLYPH = "█"
GREEN = "\x1b[32m"
RESET = "\x1b[0m"

SHORT_SCALE = ("", "K", "M", "B", "T", "P", "E", "Z", "Y")

def round_half_up(value: float) -> int:
    """Round half away from zero (Python's round() is banker's rounding)."""
    return int(math.copysign(math.floor(abs(value) + 0.5), value))

def render_gauge(ratio: float, total_length: int = BAR_LENGTH, color: bool = True) -> str:
    if not 0.0 <= ratio <= 1.0:
        raise ValueError(f"Ratio must be between 0 and 1, got {ratio}")

    filled_length = round_half_up(ratio * total_length)
    filled = FILLED_GLYPH * filled_length
    if color and filled:
        filled = f"{GREEN}{filled}{RESET}"
    empty = " " * (total_length - filled_length)
    percentage = round_half_up(ratio * 100)
    return f"[{filled}{empty}] {percentage}%"

def format_market_cap(value: float, precision: int = 1) -> str:
    """
    Short scale formatting with a fixed number of decimals, e.g. 3.4T, 292.8B.
    """
    scaled = abs(value)
    index = 0
    while index < len(SHORT_SCALE) - 1 and round(scaled, precision) >= 1000:
        scaled /= 1000
        index += 1
    sign = "-" if value < 0 else ""
    return f"{sign}{scaled:.{precision}f}{SHORT_SCALE[index]}"

def render_report(result: MarketCapRatio, color: bool = True) -> str:
    lines = [
        render_gauge(result.ratio, color=color),
        f"{result.numerator_asset}: {format_market_cap(result.numerator_cap)}",
        f"{result.denominator_asset}: {format_market_cap(result.denominator_cap)}",
    ]
    return "\n".join(lines)

def render_plain(result: MarketCapRatio) -> str:
    return f"{result.numerator_asset} {result.denominator_asset} {result.percentage}"

def build_report(result: MarketCapRatio) -> RatioReport:
    return RatioReport(
        percentage=result.percentage,
        numerator=AssetCap(asset=result.numerator_asset, market_cap=int(result.numerator_cap)),
        denominator=AssetCap(asset=result.denominator_asset, market_cap=int(result.denominator_cap)),
    )

def render_json(result: MarketCapRatio) -> str:
    # Compact, keys sorted
    payload = build_report(result).model_dump()
    return json.dumps(payload, sort_keys=True, separators=(",", ":"))
