"""repobrowse entry point.

Starts the API-only server. Settings come from ``~/.repobrowse/config.json``
and ``REPOBROWSE_*`` environment variables; flags override both.
"""

import argparse
import logging

from repobrowse import __version__
from repobrowse.config import get_settings
from repobrowse.logging_setup import setup_logging

logger = logging.getLogger(__name__)


def main() -> None:
    """Main entry point."""
    settings = get_settings()

    parser = argparse.ArgumentParser(
        description="repobrowse - browse submission repositories by revision",
    )
    parser.add_argument("--host", default=settings.api_host, help="Interface to bind")
    parser.add_argument("--port", type=int, default=settings.api_port, help="Port to listen on")
    parser.add_argument("--log-level", default=settings.log_level, help="Logging level")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    args = parser.parse_args()

    setup_logging(level=args.log_level)

    from repobrowse.api.serve import run_api_server

    try:
        run_api_server(host=args.host, port=args.port, log_level=args.log_level)
    except KeyboardInterrupt:
        logger.info("Stopped")


if __name__ == "__main__":
    main()
