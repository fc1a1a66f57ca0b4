"""CLI for looking up an article's good count."""

from __future__ import annotations

import logging
from typing import Sequence

from good_count.dispatcher import start

logger = logging.getLogger(__name__)


def main(argv: Sequence[str] | None = None) -> int:
    adapter = start(argv=argv)
    if adapter is not None:
        # Service mode needs a gateway runtime to deliver events
        logger.warning("Service mode selected; point the runtime at good_count.lambda_function.lambda_handler")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
