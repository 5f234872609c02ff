import logging
from typing import Dict, List, Optional, Type, TypeVar

import requests
from pydantic import BaseModel, TypeAdapter, ValidationError

from ratiogang.config import APP_NAME, APP_VERSION, Settings, get_settings
from ratiogang.data.urls import (
    GOLD_FOREX_TICKER,
    coin_markets_url,
    forex_previous_close_url,
    redact_url,
    ticker_details_url,
)
from ratiogang.errors import (
    CoingeckoApiError,
    DeserializationError,
    PolygonApiError,
    TransportError,
    UnexpectedStatusError,
)
from ratiogang.schemas import (
    CoinMarket,
    Credentials,
    PolygonErrorResponse,
    PreviousClose,
    TickerDetails,
)

logger = logging.getLogger(__name__)

TONNE_TO_OUNCE = 35273.96194958  # troy ounces per metric tonne

ModelT = TypeVar("ModelT", bound=BaseModel)

_coin_markets = TypeAdapter(List[CoinMarket])

def fetch_stock_market_cap(
    session: requests.Session,
    symbol: str,
    credentials: Credentials,
    settings: Optional[Settings] = None
) -> float:
    """
    Market cap of an equity from Polygon's ticker details.
    """
    settings = settings or get_settings()
    url = ticker_details_url(symbol, credentials.polygon_key, settings.POLYGON_BASE_URL)

    logger.info(f"Fetching market cap for {symbol} from Polygon...")
    response = _get(session, url, settings)

    if not _is_success(response):
        raise _polygon_error(response, url)

    details = _decode(TickerDetails, response.text, symbol)
    return details.results.market_cap

def fetch_gold_market_cap(
    session: requests.Session,
    above_ground: float,
    credentials: Credentials,
    settings: Optional[Settings] = None
) -> float:
    """
    Market cap of all above ground gold: previous close of XAUUSD (USD per
    troy ounce) times the above ground stock in tonnes.
    """
    settings = settings or get_settings()
    url = forex_previous_close_url(
        credentials.polygon_key, GOLD_FOREX_TICKER, settings.POLYGON_BASE_URL
    )

    logger.info(f"Fetching gold spot price ({GOLD_FOREX_TICKER}) from Polygon...")
    response = _get(session, url, settings)

    if not _is_success(response):
        raise _polygon_error(response, url)

    aggs = _decode(PreviousClose, response.text, GOLD_FOREX_TICKER)
    close = aggs.results[0].c
    logger.info(f"Gold close {close} USD/oz, above ground stock {above_ground} t")
    return close * above_ground * TONNE_TO_OUNCE

def fetch_crypto_market_cap(
    session: requests.Session,
    coin_id: str,
    credentials: Credentials,
    settings: Optional[Settings] = None
) -> float:
    """
    Market cap of a coin from CoinGecko's coins/markets endpoint.

    CoinGecko answers unknown ids with 200 and an empty array, which is
    reported as a provider error just like a non-2xx response.
    """
    settings = settings or get_settings()
    url = coin_markets_url(coin_id, credentials.coingecko_key, settings.COINGECKO_BASE_URL)
    headers = {"User-Agent": f"{APP_NAME}/{APP_VERSION}"}

    logger.info(f"Fetching market cap for {coin_id} from CoinGecko...")
    response = _get(session, url, settings, headers)
    body = response.text

    if not _is_success(response):
        raise CoingeckoApiError(body)

    try:
        markets = _coin_markets.validate_json(body)
    except ValidationError as e:
        raise DeserializationError(str(e), coin_id) from e

    if not markets:
        raise CoingeckoApiError(body)
    return markets[0].market_cap

def _get(
    session: requests.Session,
    url: str,
    settings: Settings,
    extra_headers: Optional[Dict[str, str]] = None
) -> requests.Response:
    headers = {"Accept": "application/json"}
    if extra_headers:
        headers.update(extra_headers)

    logger.debug(f"GET {redact_url(url)}")
    try:
        response = session.get(url, headers=headers, timeout=settings.REQUEST_TIMEOUT)
    except requests.RequestException as e:
        raise TransportError(e) from e

    logger.debug(f"Response {response.status_code} ({len(response.text)} bytes)")
    return response

def _is_success(response: requests.Response) -> bool:
    return 200 <= response.status_code < 300

def _decode(model: Type[ModelT], body: str, identifier: str) -> ModelT:
    try:
        return model.model_validate_json(body)
    except ValidationError as e:
        raise DeserializationError(str(e), identifier) from e

def _polygon_error(response: requests.Response, url: str) -> Exception:
    try:
        error = PolygonErrorResponse.model_validate_json(response.text)
    except ValidationError:
        logger.warning(f"Undecodable Polygon error body with status {response.status_code}")
        return UnexpectedStatusError(response.status_code, redact_url(url))
    return PolygonApiError(error.message)
