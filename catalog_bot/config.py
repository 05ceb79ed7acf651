"""Configuration and shared settings."""

__version__ = "0.1.0"

import os
from dataclasses import dataclass, field

from dotenv import load_dotenv

from catalog_bot.domain.models import DEFAULT_NAMESPACE

load_dotenv()

DEFAULT_PORT = 7007
DEFAULT_BOT_HANDLE = "@xs-backstage"

CONFIG = {
    "port": int(os.getenv("PORT", str(DEFAULT_PORT))),
    # Slack (socket mode)
    "slack_bot_token": os.getenv("SLACK_BOT_TOKEN", ""),
    "slack_signing_secret": os.getenv("SLACK_SIGNING_SECRET", ""),
    "slack_app_token": os.getenv("SLACK_APP_TOKEN", ""),
    # Directory (catalog) service
    "catalog_api_url": os.getenv("CATALOG_API_URL", "http://localhost:7007/api/catalog").rstrip("/"),
    "catalog_web_url": os.getenv("CATALOG_WEB_URL", "https://backstage.example.com").rstrip("/"),
    "catalog_token": os.getenv("CATALOG_TOKEN", ""),
    "catalog_namespace": os.getenv("CATALOG_NAMESPACE", DEFAULT_NAMESPACE),
    # Presentation
    "bot_handle": os.getenv("BOT_HANDLE", DEFAULT_BOT_HANDLE),
    "help_channel": os.getenv("HELP_CHANNEL", "CHANNEL"),
}


# ── Typed config ────────────────────────────────────────────


@dataclass
class SlackConfig:
    bot_token: str = ""
    signing_secret: str = ""
    app_token: str = ""

    @property
    def is_configured(self) -> bool:
        return bool(self.bot_token and self.signing_secret and self.app_token)


@dataclass
class CatalogConfig:
    api_url: str = "http://localhost:7007/api/catalog"
    web_url: str = "https://backstage.example.com"
    token: str = ""
    namespace: str = DEFAULT_NAMESPACE


@dataclass
class AppConfig:
    """Typed configuration passed explicitly into the pipeline and adapters."""

    port: int = DEFAULT_PORT
    bot_handle: str = DEFAULT_BOT_HANDLE
    help_channel: str = "CHANNEL"
    slack: SlackConfig = field(default_factory=SlackConfig)
    catalog: CatalogConfig = field(default_factory=CatalogConfig)

    @classmethod
    def from_env(cls) -> "AppConfig":
        """Create AppConfig from environment variables."""
        return cls(
            port=CONFIG["port"],
            bot_handle=CONFIG["bot_handle"],
            help_channel=CONFIG["help_channel"],
            slack=SlackConfig(
                bot_token=CONFIG["slack_bot_token"],
                signing_secret=CONFIG["slack_signing_secret"],
                app_token=CONFIG["slack_app_token"],
            ),
            catalog=CatalogConfig(
                api_url=CONFIG["catalog_api_url"],
                web_url=CONFIG["catalog_web_url"],
                token=CONFIG["catalog_token"],
                namespace=CONFIG["catalog_namespace"],
            ),
        )
