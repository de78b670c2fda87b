import argparse
import logging
import socket
import sys
from typing import Optional

import uvicorn

from item_api import config

logger = logging.getLogger("item_api")


def parse_args(argv: Optional[list[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Serve the in-memory item API")
    parser.add_argument("--host", type=str, default=None, help="Bind host (default ITEM_API_HOST or 127.0.0.1)")
    parser.add_argument("--port", type=int, default=None, help="Bind port (default ITEM_API_PORT or 8080)")
    parser.add_argument("--log-level", type=str, default=None, help="Log level (default ITEM_API_LOG_LEVEL or info)")
    return parser.parse_args(argv)


def configure_logging(level: str) -> None:
    logging.basicConfig(
        stream=sys.stdout,
        level=level.upper(),
        format="[item-api] %(message)s",
    )


def bind_socket(host: str, port: int) -> socket.socket:
    family = socket.AF_INET6 if ":" in host else socket.AF_INET
    sock = socket.socket(family, socket.SOCK_STREAM)
    sock.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
    try:
        sock.bind((host, port))
    except OSError:
        sock.close()
        raise
    sock.set_inheritable(True)
    return sock


def report_bind_failure(host: str, port: int, error: OSError) -> None:
    logger.error("Failed to start server: %s", error)
    logger.error("Another process may already be listening on %s:%s.", host, port)
    logger.error("Stop it, or pick a free port with --port or ITEM_API_PORT.")
    if port < 1024:
        logger.error("Ports below 1024 need elevated privileges on most systems.")


def main(argv: Optional[list[str]] = None) -> int:
    args = parse_args(argv)
    host = args.host or config.HOST
    port = args.port if args.port is not None else config.PORT
    log_level = (args.log_level or config.LOG_LEVEL).lower()

    configure_logging(log_level)

    try:
        sock = bind_socket(host, port)
    except OSError as error:
        report_bind_failure(host, port, error)
        return 1

    bound_port = sock.getsockname()[1]
    logger.info("Server started at %s", config.base_url(host, bound_port))

    server = uvicorn.Server(
        uvicorn.Config(
            "item_api.main:app",
            log_level=log_level,
            access_log=False,
        )
    )
    try:
        server.run(sockets=[sock])
    finally:
        sock.close()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
