"""Shared fixtures: provider payloads and a fake HTTP session."""

from __future__ import annotations

from typing import Dict, Optional
from unittest.mock import MagicMock

import pytest
import requests

from ratiogang.config import Settings
from ratiogang.schemas import Credentials

TICKER_DETAILS_AAPL = """
{
  "request_id": "102a3351cebaf560a070c6002c3b1d91",
  "results": {
    "ticker": "AAPL",
    "name": "Apple Inc.",
    "market": "stocks",
    "locale": "us",
    "primary_exchange": "XNAS",
    "type": "CS",
    "active": true,
    "currency_name": "usd",
    "cik": "0000320193",
    "composite_figi": "BBG000B9XRY4",
    "share_class_figi": "BBG001S5N8V8",
    "market_cap": 3.38702559949E+12,
    "phone_number": "(408) 996-1010",
    "address": {
      "address1": "ONE APPLE PARK WAY",
      "city": "CUPERTINO",
      "state": "CA",
      "postal_code": "95014"
    },
    "sic_code": "3571",
    "sic_description": "ELECTRONIC COMPUTERS",
    "ticker_root": "AAPL",
    "homepage_url": "https://www.apple.com",
    "total_employees": 161000,
    "list_date": "1980-12-12",
    "branding": {
      "logo_url": "https://api.polygon.io/v1/reference/company-branding/YXBwbGUuY29t/images/2024-09-01_logo.svg",
      "icon_url": "https://api.polygon.io/v1/reference/company-branding/YXBwbGUuY29t/images/2024-09-01_icon.png"
    },
    "share_class_shares_outstanding": 15204140000,
    "weighted_shares_outstanding": 15204137000,
    "round_lot": 100
  },
  "status": "OK"
}
"""

PREVIOUS_CLOSE_XAUUSD = """
{
  "ticker": "C:XAUUSD",
  "queryCount": 1,
  "resultsCount": 1,
  "adjusted": true,
  "results": [
    {
      "T": "C:XAUUSD",
      "v": 3560,
      "vw": 2570.3368,
      "o": 2574.07,
      "c": 2559.15,
      "h": 2599.8,
      "l": 2547.63,
      "t": 1726703999999,
      "n": 3560
    }
  ],
  "status": "OK",
  "request_id": "852639747d77390dc13e683c4938d3c8",
  "count": 1
}
"""

COIN_MARKETS_ETHEREUM = """
[
  {
    "id": "ethereum",
    "symbol": "eth",
    "name": "Ethereum",
    "image": "https://coin-images.coingecko.com/coins/images/279/large/ethereum.png?1696501628",
    "current_price": 2431.96,
    "market_cap": 292802217292,
    "market_cap_rank": 2,
    "fully_diluted_valuation": 292802217292,
    "total_volume": 20902271271,
    "high_24h": 2440.58,
    "low_24h": 2285.67,
    "price_change_24h": 110.02,
    "price_change_percentage_24h": 4.73821,
    "market_cap_change_24h": 13366145157,
    "market_cap_change_percentage_24h": 4.78326,
    "circulating_supply": 120345065.769204,
    "total_supply": 120345065.769204,
    "max_supply": null,
    "ath": 4878.26,
    "ath_change_percentage": -50.09723,
    "ath_date": "2021-11-10T14:24:19.604Z",
    "atl": 0.432979,
    "atl_change_percentage": 562141.58481,
    "atl_date": "2015-10-20T00:00:00.000Z",
    "roi": {
      "times": 51.51623725311915,
      "currency": "btc",
      "percentage": 5151.623725311915
    },
    "last_updated": "2024-09-19T08:55:01.703Z"
  }
]
"""

COIN_MARKETS_BITCOIN = '[{"id": "bitcoin", "symbol": "btc", "market_cap": 1243012345678}]'

POLYGON_NOT_FOUND = (
    '{"status": "NOT_FOUND", "request_id": "6a7e4b1c", '
    '"message": "Ticker not found."}'
)

AAPL_MARKET_CAP = 3.38702559949e12
GOLD_MARKET_CAP = 2559.15 * 212582.0 * 35273.96194958


class FakeResponse:
    """Minimal stand-in for requests.Response."""

    def __init__(self, status_code: int = 200, text: str = ""):
        self.status_code = status_code
        self.text = text


def make_session(routes: Optional[Dict[str, FakeResponse]] = None) -> MagicMock:
    """Session whose get() answers with the first route contained in the URL."""
    routes = routes or {}
    session = MagicMock(spec=requests.Session)

    def get(url, headers=None, timeout=None):
        for fragment, response in routes.items():
            if fragment in url:
                return response
        raise AssertionError(f"Unexpected request to {url}")

    session.get.side_effect = get
    session.__enter__.return_value = session
    session.__exit__.return_value = False
    return session


@pytest.fixture
def credentials() -> Credentials:
    return Credentials(polygon_key="myPolygonIOKey", coingecko_key="myCoinGeckoKey")


@pytest.fixture
def settings(monkeypatch: pytest.MonkeyPatch) -> Settings:
    for name in ("POLYGON_BASE_URL", "COINGECKO_BASE_URL", "REQUEST_TIMEOUT", "GOLD_ABOVE_GROUND_TONNES"):
        monkeypatch.delenv(name, raising=False)
    return Settings(_env_file=None)


@pytest.fixture
def provider_routes() -> Dict[str, FakeResponse]:
    return {
        "/v3/reference/tickers/AAPL": FakeResponse(200, TICKER_DETAILS_AAPL),
        "/v2/aggs/ticker/C:XAUUSD/prev": FakeResponse(200, PREVIOUS_CLOSE_XAUUSD),
        "ids=ethereum": FakeResponse(200, COIN_MARKETS_ETHEREUM),
        "ids=bitcoin": FakeResponse(200, COIN_MARKETS_BITCOIN),
    }
