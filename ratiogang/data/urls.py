from typing import List, Tuple
from urllib.parse import parse_qsl, urlencode, urlsplit, urlunsplit

from ratiogang.errors import InvalidUrlError

POLYGON_BASE_URL = "https://api.polygon.io"
COINGECKO_BASE_URL = "https://api.coingecko.com"
GOLD_FOREX_TICKER = "XAUUSD"

# Query parameters holding credentials, masked before logging
SECRET_PARAMS = ("apiKey", "x_cg_key")

def ticker_details_url(symbol: str, api_key: str, base_url: str = POLYGON_BASE_URL) -> str:
    """Polygon ticker details (v3), carries ``results.market_cap``."""
    return _build(f"{base_url}/v3/reference/tickers/{symbol}", [("apiKey", api_key)])

def forex_previous_close_url(
    api_key: str,
    forex_ticker: str = GOLD_FOREX_TICKER,
    base_url: str = POLYGON_BASE_URL
) -> str:
    """Polygon previous day aggregate (v2) for a currency pair, e.g. C:XAUUSD."""
    return _build(f"{base_url}/v2/aggs/ticker/C:{forex_ticker}/prev", [("apiKey", api_key)])

def coin_markets_url(coin_id: str, api_key: str, base_url: str = COINGECKO_BASE_URL) -> str:
    """CoinGecko coins/markets (v3) priced in USD for a single coin id."""
    # Order matters: vs_currency, ids, x_cg_key
    params = [
        ("vs_currency", "usd"),
        ("ids", coin_id),
        ("x_cg_key", api_key),
    ]
    return _build(f"{base_url}/api/v3/coins/markets", params)

def redact_url(url: str) -> str:
    """Replace credential query values with '***' so the URL can be logged."""
    parts = urlsplit(url)
    query = [
        (key, "***" if key in SECRET_PARAMS else value)
        for key, value in parse_qsl(parts.query, keep_blank_values=True)
    ]
    return urlunsplit(parts._replace(query=urlencode(query, safe="*")))

def _build(base: str, params: List[Tuple[str, str]]) -> str:
    url = f"{base}?{urlencode(params)}"
    try:
        parts = urlsplit(url)
        parts.port  # raises ValueError on a malformed port
    except ValueError as e:
        raise InvalidUrlError(str(e)) from e

    if parts.scheme.lower() not in {"http", "https"}:
        raise InvalidUrlError(f"unsupported scheme in {base!r}")
    if not parts.hostname:
        raise InvalidUrlError(f"missing host in {base!r}")
    return url
