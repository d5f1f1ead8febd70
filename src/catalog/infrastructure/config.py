"""
Configuration settings for the catalog.
"""

import os

from dotenv import load_dotenv

load_dotenv()


class Settings:
    """Settings loaded from environment variables (or a ``.env`` file).

    Values are read when the instance is created, so a fresh ``Settings()``
    picks up the current environment.
    """

    def __init__(self) -> None:
        self.LOG_LEVEL: str = os.getenv("CATALOG_LOG_LEVEL", "INFO").upper()
        self.WELCOME_MESSAGE: str = os.getenv(
            "CATALOG_WELCOME_MESSAGE",
            "Welcome to the online store!",
        )


settings = Settings()
