"""
CLI for running the image resizer server.

Examples:
  python -m image_resizer
  python -m image_resizer --host 0.0.0.0 --port 4200
  HOST=0.0.0.0 PORT=4200 image-resizer

Every flag can also be set through the environment variable named after it
(uppercased, dashes replaced by underscores). Flags win over the environment.
"""

import argparse
import logging
from typing import List, Optional

from ..config import Settings


def _parse_args(argv: Optional[List[str]] = None, defaults: Optional[Settings] = None) -> argparse.Namespace:
    defaults = defaults if defaults is not None else Settings()

    parser = argparse.ArgumentParser(description="Serve the image resizer API.")
    parser.add_argument(
        "--host",
        dest="host",
        default=defaults.host,
        help="Host to listen on (defaults to HOST env, else localhost).",
    )
    parser.add_argument(
        "--port",
        dest="port",
        type=int,
        default=defaults.port,
        help="Port to listen on (defaults to PORT env, else 8080).",
    )
    parser.add_argument(
        "--log-level",
        dest="log_level",
        default=defaults.log_level,
        type=str.upper,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Log level (defaults to LOG_LEVEL env, else INFO).",
    )
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    args = _parse_args(argv)

    import uvicorn

    from ..server import app

    logging.getLogger().setLevel(args.log_level)
    logger = logging.getLogger(__name__)
    logger.info("Listening on %s:%d", args.host, args.port)

    # uvicorn stops accepting on SIGINT/SIGTERM and waits for in-flight requests
    uvicorn.run(
        app,
        host=args.host,
        port=args.port,
        log_level=args.log_level.lower(),
    )
    logger.info("Server stopped")
    return 0
