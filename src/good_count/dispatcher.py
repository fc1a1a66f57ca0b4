"""Startup dispatch between local and service execution."""

from __future__ import annotations

import logging
import sys
from typing import Sequence

from common.cli_helpers import setup_logging
from good_count.config import GoodCountConfig, get_config
from good_count.errors import ConfigurationError, GoodCountError
from good_count.gateway import GatewayAdapter
from good_count.helpers import build_good_count_parser, load_provider, parse_good_count_args
from good_count.models import ExecutionMode, LocalMode, ServiceMode
from good_count.use_case import CountProvider, GoodCountUseCase

logger = logging.getLogger(__name__)


def resolve_mode(local: bool, article_id: str | None) -> ExecutionMode:
    """Decide how the process runs from its startup flags.

    The article ID only matters in local mode and is ignored otherwise.

    Raises:
        ConfigurationError: If local mode is requested without an article ID.
    """
    if not local:
        return ServiceMode()

    if not article_id:
        raise ConfigurationError("local execution requested without an article ID")

    return LocalMode(article_id=article_id)


def run_local(use_case: GoodCountUseCase, article_id: str) -> int:
    """Run one lookup and print the result to stdout.

    Returns:
        Process exit status: 0 on success, 1 if the lookup failed.
    """
    try:
        body = use_case.execute(article_id)
    except GoodCountError as exc:
        print(exc)
        return 1

    print(body)
    return 0


def start(
    provider: CountProvider | None = None,
    argv: Sequence[str] | None = None,
    config: GoodCountConfig | None = None,
) -> GatewayAdapter | None:
    """Resolve the execution mode once and run it.

    In local mode a single lookup is printed and None is returned; a failed
    lookup exits the process with status 1. In service mode the returned
    adapter is the handler to register with the gateway runtime.

    Args:
        provider: Count provider. Loaded from --provider or
            GOOD_COUNT_PROVIDER when omitted.
        argv: Command line arguments (default: sys.argv[1:]).
        config: Settings supplying flag defaults (default: get_config()).
    """
    if config is None:
        try:
            config = get_config()
        except ConfigurationError as exc:
            logger.error("Not executing: %s", exc)
            build_good_count_parser(GoodCountConfig()).error(str(exc))

    parser = build_good_count_parser(config)
    args = parse_good_count_args(parser, argv)
    setup_logging(args.log_level)

    try:
        mode = resolve_mode(args.local, args.article_id)
        if provider is None:
            if not args.provider:
                raise ConfigurationError("no count provider configured (use --provider or GOOD_COUNT_PROVIDER)")
            provider = load_provider(args.provider)
    except ConfigurationError as exc:
        logger.error("Not executing: %s", exc)
        parser.error(str(exc))

    use_case = GoodCountUseCase(provider, propagate_provider_errors=args.propagate_provider_errors)

    if isinstance(mode, LocalMode):
        logger.info("Running in local mode for article %s", mode.article_id)
        status = run_local(use_case, mode.article_id)
        if status:
            sys.exit(status)
        return None

    logger.info("Running in service mode")
    return GatewayAdapter(use_case)
