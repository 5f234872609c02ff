from typing import Any, List
from pydantic import BaseModel, ConfigDict, Field

class Credentials(BaseModel):
    """
    Provider API keys, resolved once at startup.
    """
    polygon_key: str
    coingecko_key: str

    model_config = ConfigDict(frozen=True)

class ProviderModel(BaseModel):
    """
    Base for decoded provider payloads. Only the fields carrying the market
    cap are declared; every other field is ignored whatever its type.
    """
    model_config = ConfigDict(extra="ignore")

# --- Polygon: /v3/reference/tickers/{ticker} ---

class CompanyDetails(ProviderModel):
    market_cap: float

class TickerDetails(ProviderModel):
    results: CompanyDetails

# --- Polygon: /v2/aggs/ticker/{ticker}/prev ---

class Candle(ProviderModel):
    """
    Previous day's OHLC; only the close is used.
    """
    c: float = Field(..., description="Close price")

class PreviousClose(ProviderModel):
    results: List[Candle] = Field(..., min_length=1)

class PolygonErrorResponse(ProviderModel):
    message: str
    status: Any = None
    request_id: Any = None

# --- CoinGecko: /api/v3/coins/markets ---

class CoinMarket(ProviderModel):
    market_cap: float

# --- Output ---

class AssetCap(BaseModel):
    asset: str
    market_cap: int

class RatioReport(BaseModel):
    """
    JSON output of the CLI. Market caps are truncated to whole dollars.
    """
    percentage: int = Field(..., ge=0, le=100)
    numerator: AssetCap
    denominator: AssetCap
