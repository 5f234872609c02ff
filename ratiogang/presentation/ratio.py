import math
from dataclasses import dataclass

@dataclass(frozen=True)
class MarketCapRatio:
    numerator_asset: str
    numerator_cap: float
    denominator_asset: str
    denominator_cap: float

    @property
    def ratio(self) -> float:
        return self.numerator_cap / self.denominator_cap

    @property
    def percentage(self) -> int:
        # Truncated, not rounded (the gauge rounds instead)
        return math.floor(self.ratio * 100)

def compute_ratio(asset_a: str, cap_a: float, asset_b: str, cap_b: float) -> MarketCapRatio:
    """
    Order the pair so the smaller market cap is the numerator and the ratio
    lies in (0, 1]. On a tie asset_b becomes the numerator.
    """
    if cap_a <= 0 or cap_b <= 0:
        raise ValueError(f"Market caps must be positive, got {cap_a} and {cap_b}")

    if cap_a < cap_b:
        return MarketCapRatio(asset_a, cap_a, asset_b, cap_b)
    return MarketCapRatio(asset_b, cap_b, asset_a, cap_a)
