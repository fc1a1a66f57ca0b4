"""Helper functions for the good-count CLI."""

from __future__ import annotations

import argparse
import importlib
import logging
from typing import Sequence

from common.cli_helpers import parse_log_level
from good_count.config import GoodCountConfig
from good_count.errors import ConfigurationError
from good_count.use_case import CountProvider

logger = logging.getLogger(__name__)


def build_good_count_parser(config: GoodCountConfig) -> argparse.ArgumentParser:
    """Build the argument parser, using config for defaults."""

    parser = argparse.ArgumentParser(
        prog="good-count",
        description="Fetch the good count for an article.",
    )

    # Mode options
    parser.add_argument("--local", action="store_true", help="Run a single lookup locally and exit")
    parser.add_argument("--id", dest="article_id", default="", help="Article ID for local execution")

    # Provider options
    parser.add_argument(
        "--provider",
        default=config.provider,
        help="Count provider as package.module:function (default: $GOOD_COUNT_PROVIDER)",
    )
    parser.add_argument(
        "--propagate-provider-errors",
        action=argparse.BooleanOptionalAction,
        default=config.propagate_provider_errors,
        help="Report provider failures as errors instead of an empty body",
    )

    parser.add_argument(
        "--log-level",
        type=parse_log_level,
        default=config.log_level,
        help=f"Logging level (default: {config.log_level})",
    )
    return parser


def parse_good_count_args(
    parser: argparse.ArgumentParser,
    argv: Sequence[str] | None = None,
) -> argparse.Namespace:
    """Parse CLI arguments, ignoring any the tool does not know."""

    args, unknown = parser.parse_known_args(argv)

    # The Lambda bootstrap passes its own arguments through
    if unknown:
        logger.debug("Ignoring unrecognised arguments: %s", unknown)

    return args


def load_provider(path: str) -> CountProvider:
    """Resolve a ``package.module:function`` import string to a provider.

    Raises:
        ConfigurationError: If the string is malformed or does not name a callable.
    """
    module_name, sep, attr = path.partition(":")
    if not sep or not module_name or not attr:
        raise ConfigurationError(f"provider must look like 'package.module:function' (got {path!r})")

    try:
        module = importlib.import_module(module_name)
    except Exception as exc:
        raise ConfigurationError(f"cannot import provider module {module_name!r}: {exc}") from exc

    provider = module
    for part in attr.split("."):
        try:
            provider = getattr(provider, part)
        except AttributeError as exc:
            raise ConfigurationError(f"provider {path!r} not found") from exc

    if not callable(provider):
        raise ConfigurationError(f"provider {path!r} is not callable")

    return provider
