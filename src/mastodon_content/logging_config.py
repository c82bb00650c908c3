"""Configure logging for the application."""

import logging
import sys
import warnings

from bs4 import MarkupResemblesLocatorWarning


def setup_logging(debug: bool = False) -> None:
    level = logging.DEBUG if debug else logging.INFO
    formatter = logging.Formatter(
        "%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(formatter)

    root = logging.getLogger("mastodon_content")
    root.setLevel(level)
    # Replace rather than stack handlers when called more than once
    root.handlers.clear()
    root.addHandler(handler)

    # A status that is only a URL is valid content, not a file name mix-up
    warnings.filterwarnings("ignore", category=MarkupResemblesLocatorWarning)
