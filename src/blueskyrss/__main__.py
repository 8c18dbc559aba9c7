"""Entry point for the Bluesky feed rewriter: python -m blueskyrss"""

import logging
import sys
from collections.abc import Mapping

from blueskyrss.config import load_settings
from blueskyrss.errors import FeedError
from blueskyrss.pipeline import run

logger = logging.getLogger("blueskyrss")


def main(environ: Mapping[str, str] | None = None, session=None) -> int:
    """Rewrite the feed named by the environment. Returns the exit status."""
    try:
        settings = load_settings(environ)
        run(settings, session=session)
    except FeedError as e:
        logger.error("%s failed: %s", e.stage, e)
        return 1
    return 0


def cli() -> None:
    """Console script wrapper around main()."""
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s [%(name)s] %(message)s",
        datefmt="%H:%M:%S",
    )
    # Quiet noisy loggers
    logging.getLogger("urllib3").setLevel(logging.WARNING)
    sys.exit(main())


if __name__ == "__main__":
    cli()
