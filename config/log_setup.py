"""
Process-wide logging configuration.
"""

from __future__ import annotations

import logging
import sys


def configure_logging(debug: bool = False) -> None:
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.INFO,
        format="%(asctime)s  %(levelname)-8s  %(name)s - %(message)s",
        stream=sys.stdout,
    )
    for _noisy in ("httpcore", "httpx", "requests", "urllib3"):
        logging.getLogger(_noisy).setLevel(logging.WARNING)
