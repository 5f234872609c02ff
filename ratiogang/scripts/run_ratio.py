import argparse
import logging
import math
import os
import sys
from typing import List, Optional

import requests

from ratiogang.config import APP_NAME, APP_VERSION, Settings, load_credentials, load_settings
from ratiogang.data.ingestion import MarketCapIngestion
from ratiogang.errors import RatioGangError
from ratiogang.presentation.ratio import compute_ratio
from ratiogang.presentation.render import render_json, render_plain, render_report

logger = logging.getLogger(__name__)

DESCRIPTION = """\
Compare market caps between crypto, stock and gold by calculating their ratio.
- Returns percentages and market caps
- Requires https://polygon.io and https://coingecko.com API keys as
  environmental variables: POLYGON_KEY and COINGECKO_KEY
- Use all caps for stock symbols (AAPL), lower case CoinGecko ids for crypto
  (ethereum) and 'gold' for gold"""

def positive_float(value: str) -> float:
    try:
        number = float(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"{value!r} is not a number")
    if not math.isfinite(number) or number <= 0:
        raise argparse.ArgumentTypeError(f"{value!r} must be a positive number")
    return number

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="ratio-gang",
        description=DESCRIPTION,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("asset_a", nargs="?", default="ethereum", help="First asset (default: ethereum)")
    parser.add_argument("asset_b", nargs="?", default="bitcoin", help="Second asset (default: bitcoin)")
    parser.add_argument(
        "--above-ground",
        type=positive_float,
        default=None,
        help="Set the estimated above ground stock of gold in tonnes (default: GOLD_ABOVE_GROUND_TONNES or 212582.0)",
    )
    parser.add_argument(
        "-p", "--plain",
        action="store_true",
        help="Return 'numerator-asset denominator-asset percentage', e.g. 'AAPL gold 17'",
    )
    parser.add_argument("-j", "--json", action="store_true", help="Return json")
    parser.add_argument("--no-color", action="store_true", help="Disable colored gauge output")
    parser.add_argument("-v", "--verbose", action="count", default=0, help="Log progress to stderr (-vv for debug)")
    parser.add_argument("--version", action="version", version=f"{APP_NAME} {APP_VERSION}")
    return parser

def use_color(args: argparse.Namespace) -> bool:
    if args.no_color or os.environ.get("NO_COLOR"):
        return False
    return sys.stdout.isatty()

def setup_logging(verbosity: int, settings: Settings):
    if verbosity >= 2:
        level = logging.DEBUG
    elif verbosity == 1:
        level = logging.INFO
    else:
        level = getattr(logging, settings.LOG_LEVEL.upper(), logging.WARNING)
    logging.basicConfig(
        level=level,
        format='%(asctime)s - %(levelname)s - %(message)s',
        stream=sys.stderr
    )

def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    try:
        settings = load_settings()
        setup_logging(args.verbose, settings)
        credentials = load_credentials(settings)

        above_ground = args.above_ground
        if above_ground is None:
            above_ground = settings.GOLD_ABOVE_GROUND_TONNES

        # asset_a first; a failure there skips the second request
        with requests.Session() as session:
            ingest = MarketCapIngestion(session, credentials, settings)
            cap_a = ingest.fetch_market_cap(args.asset_a, above_ground)
            cap_b = ingest.fetch_market_cap(args.asset_b, above_ground)
    except RatioGangError as e:
        print(e, file=sys.stderr)
        return 1

    result = compute_ratio(args.asset_a, cap_a, args.asset_b, cap_b)
    logger.info(f"{result.numerator_asset}/{result.denominator_asset} = {result.ratio:.4f}")

    if args.plain:
        print(render_plain(result))
    elif args.json:
        print(render_json(result))
    else:
        print(render_report(result, color=use_color(args)))
    return 0

if __name__ == "__main__":
    sys.exit(main())
