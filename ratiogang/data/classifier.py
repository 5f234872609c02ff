from enum import Enum

GOLD_NAMES = ("gold", "Gold")

class AssetClass(str, Enum):
    GOLD = "gold"
    EQUITY = "equity"
    CRYPTO = "crypto"
    UNKNOWN = "unknown"

def classify(identifier: str) -> AssetClass:
    """
    Classify an asset identifier by its lexical shape.

    - "gold" / "Gold" -> GOLD
    - all uppercase (a ticker such as "AAPL") -> EQUITY
    - all lowercase (a CoinGecko id such as "ethereum") -> CRYPTO
    - anything else, including "" -> UNKNOWN

    Rules are tried in that order. Identifiers without any cased character
    (e.g. "123") equal both their upper and lower form and therefore
    classify as EQUITY; the provider will usually reject them later.
    """
    if identifier in GOLD_NAMES:
        return AssetClass.GOLD
    if not identifier:
        return AssetClass.UNKNOWN
    if identifier == identifier.upper():
        return AssetClass.EQUITY
    if identifier == identifier.lower():
        return AssetClass.CRYPTO
    return AssetClass.UNKNOWN
