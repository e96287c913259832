"""Command line interface for the blog server.

Subcommands:
    web              Start the web server (post API plus the single-page app)
"""

import argparse
import logging
import socket
import sys

from . import create_app
from .config import SERVER_HOST, SERVER_PORT, UI_DIR

logger = logging.getLogger(__name__)


def check_port(host, port):
    """Bind ``host:port`` once and release it, raising ``OSError`` if it is taken."""
    family = socket.AF_INET6 if ":" in host else socket.AF_INET
    with socket.socket(family, socket.SOCK_STREAM) as sock:
        # same reuse policy as the serving socket
        sock.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
        sock.bind((host, port))


def main(argv=None):
    parser = argparse.ArgumentParser(description="Blog server")
    subparsers = parser.add_subparsers(dest="command")

    web_parser = subparsers.add_parser("web", help="Start the web server")
    web_parser.add_argument(
        "--host", default=SERVER_HOST, help="Bind address",
    )
    web_parser.add_argument(
        "--port", type=int, default=SERVER_PORT, help="Port",
    )
    web_parser.add_argument(
        "--ui-dir", default=UI_DIR, help="Directory holding the built single-page app",
    )

    args = parser.parse_args(argv)

    if args.command == "web":
        logging.basicConfig(
            level=logging.INFO,
            format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        )
        app = create_app(config={"ui_dir": args.ui_dir})

        try:
            check_port(args.host, args.port)
        except OSError as e:
            logger.error("[Server] Cannot listen on %s:%d: %s", args.host, args.port, e)
            sys.exit(1)

        logger.info("Listening on :%d", args.port)
        try:
            app.run(host=args.host, port=args.port, threaded=True)
        except KeyboardInterrupt:
            logger.info("[Server] Stopped")
    else:
        parser.print_help()
