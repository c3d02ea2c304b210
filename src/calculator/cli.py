"""Command-line entry point.

    gold2btc --asset btc 50000
    gold2btc --asset gold 1784.21 --json
    gold2btc --request '{"asset": "silver", "value": 23.14}'
"""

import argparse
import json
import logging
import sys
from typing import Optional, Sequence

import jsonschema
import pydantic

from src.core.domain.asset import AssetKind, asset_info
from src.core.domain.conversion import ConversionInput
from src.core.math.price_model import convert_input
from src.calculator.config import CalculatorConfig
from src.calculator.formatting import render_result
from src.calculator.input_parsing import InvalidPriceInput, require_price_input
from src.calculator.payload import request_from_payload, result_to_payload

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    defaults = CalculatorConfig()
    parser = argparse.ArgumentParser(
        prog="gold2btc",
        description="Derive Gold / Silver / Bitcoin prices from one known price",
    )
    parser.add_argument(
        "--asset",
        choices=[a.value for a in AssetKind],
        default=defaults.default_asset.value,
        help="Asset whose price is given (default: %(default)s)",
    )
    parser.add_argument(
        "value", nargs="?", help="Price of the asset (USD/oz for metals, USD for btc)"
    )
    parser.add_argument(
        "--request",
        metavar="JSON",
        help='Conversion request as JSON, e.g. \'{"asset": "gold", "value": 1800}\'',
    )
    parser.add_argument("--json", action="store_true", help="Print the result as JSON")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return parser


def _request_from_args(
    parser: argparse.ArgumentParser, args: argparse.Namespace
) -> ConversionInput:
    # parser.error завершает процесс с кодом 2
    if (args.value is None) == (args.request is None):
        parser.error("give either a price VALUE or --request JSON")

    if args.request is not None:
        try:
            return request_from_payload(json.loads(args.request))
        except json.JSONDecodeError as e:
            parser.error(f"--request is not valid JSON: {e.msg} (invalid_request)")
        except (jsonschema.ValidationError, pydantic.ValidationError) as e:
            logger.debug("Rejected request payload: %s", e)
            parser.error("--request does not match conversion_request (invalid_request)")

    asset = AssetKind(args.asset)
    try:
        value = require_price_input(args.value)
    except InvalidPriceInput as e:
        parser.error(
            f"price for {asset_info(asset).label} must be a non-negative number ({e.reason})"
        )
    return ConversionInput(asset=asset, value=value)


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    request = _request_from_args(parser, args)
    result = convert_input(request)
    logger.debug("Converted %s=%s", request.asset.value, request.value)

    if args.json:
        try:
            output = json.dumps(result_to_payload(result), allow_nan=False)
        except ValueError:
            # Конечный, но огромный вход даёт Inf в выходе
            parser.error("result overflows to a non-finite price (not_finite)")
        print(output)
    else:
        print(render_result(result, request.asset))
    return 0


if __name__ == "__main__":
    sys.exit(main())
