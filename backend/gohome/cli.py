"""CLI entry point: parse flags, configure logging, run the server."""

import argparse
import logging
import sys

import uvicorn

from gohome import __version__, create_app
from gohome.core.config import settings
from gohome.core.exceptions import TemplateSetupError

logger = logging.getLogger(__name__)

ENVIRONMENT_HELP = """\
Environment Variables:
  PORT              Server port (default: 8080)
  NAMESPACE         Kubernetes namespace (default: default)
  CONFIG_MAP_NAME   ConfigMap name for bookmarks (default: gohome-config)
  REQUEST_TIMEOUT   Seconds to wait for the cluster per page load (default: 30)
  LOG_LEVEL         Logging level (default: INFO)
  TEMPLATES_DIR     Directory holding index.html (default: bundled templates)
  STATIC_DIR        Directory served under /static (default: bundled assets)
"""


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="gohome",
        description=f"GoHome {__version__} - Kubernetes Personal Homepage",
        epilog=ENVIRONMENT_HELP,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--version", action="version", version=f"GoHome {__version__}",
        help="Show version information",
    )
    parser.add_argument(
        "--host", default="0.0.0.0",
        help="Interface to bind (default: 0.0.0.0)",
    )
    parser.add_argument(
        "--port", type=int, default=settings.PORT,
        help=f"Port to listen on (default: $PORT or {settings.PORT})",
    )
    return parser


def main(argv=None) -> int:
    """CLI entry point."""
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=settings.LOG_LEVEL,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        app = create_app(settings)
    except TemplateSetupError as e:
        logger.error(f"Failed to create server: {e}")
        return 1

    logger.info(f"Starting GoHome {__version__} on port {args.port}")
    uvicorn.run(app, host=args.host, port=args.port, log_level=settings.LOG_LEVEL.lower())
    return 0


if __name__ == "__main__":
    sys.exit(main())
