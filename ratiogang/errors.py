"""
Error types raised while resolving and comparing market caps.

Every error carries a complete, human readable message; the CLI prints
``str(error)`` to stderr and exits with status 1.
"""
from typing import List, Optional


class RatioGangError(Exception):
    """Base class for all failures surfaced to the command line."""


class EnvMissingError(RatioGangError):
    def __init__(self, name: str):
        super().__init__(
            f"Required environmental variable not set. Use 'export {name}=YOURKEY' to set it."
        )
        self.name = name


class ConfigError(RatioGangError):
    def __init__(self, problems: List[str]):
        super().__init__("Invalid configuration: " + "; ".join(problems))
        self.problems = problems


class InvalidUrlError(RatioGangError):
    def __init__(self, reason: str):
        super().__init__(f"URL is not valid: {reason}")
        self.reason = reason


class TransportError(RatioGangError):
    def __init__(self, cause: Exception):
        super().__init__(f"Error sending request: {cause}")
        self.cause = cause


class UnexpectedStatusError(RatioGangError):
    def __init__(self, status_code: int, url: Optional[str] = None):
        super().__init__(f"Unexpected status code: {status_code}")
        self.status_code = status_code
        self.url = url


class DeserializationError(RatioGangError):
    def __init__(self, reason: str, identifier: str):
        super().__init__(
            f"Failed to deserialize response: '{reason}' for asset {identifier}"
        )
        self.reason = reason
        self.identifier = identifier


class ProviderError(RatioGangError):
    """The data provider answered, but not with a usable market cap."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class PolygonApiError(ProviderError):
    def __init__(self, message: str):
        super().__init__(f"Polygon API error: {message}")
        self.provider_message = message


class CoingeckoApiError(ProviderError):
    def __init__(self, body: str):
        super().__init__(
            "Coingecko API did not return expected payload.\n"
            f"Received {body}, expected https://docs.coingecko.com/reference/coins-markets"
        )
        self.body = body


class UnknownAssetError(RatioGangError):
    def __init__(self, identifier: str):
        super().__init__(
            f"Could not identify if {identifier} is a crypto asset or a stock, "
            "please use all caps for stock symbols and lower caps for crypto coingecko-ids"
        )
        self.identifier = identifier
