import logging
import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

load_dotenv()

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


@dataclass
class Settings:
    # Application
    app_name: str = os.getenv("APP_NAME", "Library Management System")
    app_version: str = os.getenv("APP_VERSION", "1.0.0")
    debug: bool = os.getenv("DEBUG", "False").lower() in ("true", "1", "yes")

    # Logging
    log_level: str = os.getenv("LOG_LEVEL", "WARNING")

    # Output: plain | json | rich
    output_mode: str = os.getenv("CATALOG_OUTPUT", "rich")


settings = Settings()


def configure_logging(level: Optional[str] = None) -> None:
    """Configure root logging from ``level`` or the LOG_LEVEL setting. DEBUG=true forces DEBUG."""
    name = "DEBUG" if settings.debug else (level or settings.log_level)
    numeric = logging.getLevelName(name.upper())
    if not isinstance(numeric, int):
        numeric = logging.WARNING
    logging.basicConfig(level=numeric, format=LOG_FORMAT)
