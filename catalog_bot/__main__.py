"""Run the bot: ``python -m catalog_bot``."""

import uvicorn

from catalog_bot.adapters.web.server import create_app
from catalog_bot.config import AppConfig


def main():
    config = AppConfig.from_env()
    uvicorn.run(create_app(config), host="0.0.0.0", port=config.port, log_level="info")


if __name__ == "__main__":
    main()
