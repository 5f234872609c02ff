import logging
import math
from typing import Optional

import requests

from ratiogang.config import Settings, get_settings
from ratiogang.data.classifier import AssetClass, classify
from ratiogang.data.providers import (
    fetch_crypto_market_cap,
    fetch_gold_market_cap,
    fetch_stock_market_cap,
)
from ratiogang.errors import ProviderError, UnknownAssetError
from ratiogang.schemas import Credentials

logger = logging.getLogger(__name__)

class MarketCapIngestion:
    """
    Resolves USD market caps for gold, equities and crypto assets over one
    shared HTTP session.
    """
    def __init__(
        self,
        session: requests.Session,
        credentials: Credentials,
        settings: Optional[Settings] = None
    ):
        self.session = session
        self.credentials = credentials
        self.settings = settings or get_settings()

    def fetch_market_cap(self, identifier: str, above_ground: Optional[float] = None) -> float:
        """
        Fetch the market cap for an asset identifier, picking the provider by
        the identifier's asset class. ``above_ground`` (tonnes) only applies
        to gold and defaults to the configured estimate.
        """
        if above_ground is None:
            above_ground = self.settings.GOLD_ABOVE_GROUND_TONNES

        asset_class = classify(identifier)
        logger.debug(f"{identifier} classified as {asset_class.value}")

        if asset_class == AssetClass.GOLD:
            market_cap = fetch_gold_market_cap(
                self.session, above_ground, self.credentials, self.settings
            )
        elif asset_class == AssetClass.EQUITY:
            market_cap = fetch_stock_market_cap(
                self.session, identifier, self.credentials, self.settings
            )
        elif asset_class == AssetClass.CRYPTO:
            market_cap = fetch_crypto_market_cap(
                self.session, identifier, self.credentials, self.settings
            )
        else:
            raise UnknownAssetError(identifier)

        if not math.isfinite(market_cap) or market_cap <= 0:
            logger.warning(f"Provider reported market cap {market_cap} for {identifier}")
            raise ProviderError(f"Provider reported an unusable market cap ({market_cap}) for {identifier}")

        logger.info(f"Market cap of {identifier}: {market_cap:,.0f} USD")
        return market_cap

def fetch_market_cap(
    session: requests.Session,
    identifier: str,
    credentials: Credentials,
    above_ground: Optional[float] = None,
    settings: Optional[Settings] = None
) -> float:
    return MarketCapIngestion(session, credentials, settings).fetch_market_cap(identifier, above_ground)
