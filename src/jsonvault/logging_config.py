"""Root logger setup for the jsonvault command line."""

import logging
import sys
from typing import TextIO


def configure_logging(level: int = logging.INFO, stream: TextIO = sys.stdout) -> None:
    # Only the first call installs a handler; the CLI points it at stderr so JSON on stdout stays clean.
    logging.basicConfig(
        level=level,
        format="[%(asctime)s] %(levelname)s %(name)s: %(message)s",
        datefmt="%H:%M:%S",
        stream=stream,
    )
