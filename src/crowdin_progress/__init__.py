"""
Crowdin translations progress - writes per-language translation progress
tables from Crowdin into a README.
"""

import asyncio
import logging
import sys

from .main import main as async_main


def main() -> None:
    """Synchronous entry point that runs the async main function."""
    try:
        exit_code = asyncio.run(async_main())
    except KeyboardInterrupt:
        logger = logging.getLogger(__name__)
        logger.info("Stopped by user")
        exit_code = 1
    sys.exit(exit_code)


__all__ = ["main"]
