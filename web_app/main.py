from __future__ import annotations

import logging

from aiohttp import web

from web_app.config import AppConfig, load_config
from web_app.server import create_app

CONSOLE_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def run(config: AppConfig) -> None:
    logging.basicConfig(level=logging.INFO, format=CONSOLE_FORMAT)
    web.run_app(create_app(config), host=config.server.host, port=config.server.port)


def main() -> int:
    run(load_config())
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
