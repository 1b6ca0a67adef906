# src/containerservice/core/config.py

import logging
import os

from dotenv import load_dotenv

# Load environment variables from a .env file located in the project root
dotenv_path = os.path.join(os.path.dirname(__file__), "..", "..", "..", ".env")
load_dotenv(dotenv_path=dotenv_path)

LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG", "NOTSET")


class Config:
    """
    Handles the application's configuration by loading values from environment variables.
    """

    # --- Logging variables ---
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

    # JSON_INDENT and SHOW_SECRETS are resolved at access time so tests and
    # callers can change the environment after import.
    @property
    def JSON_INDENT(self) -> int:
        return int(os.getenv("CONTAINERSERVICE_JSON_INDENT", "2"))

    @property
    def SHOW_SECRETS(self) -> bool:
        return os.getenv("CONTAINERSERVICE_SHOW_SECRETS", "False").lower() in (
            "true",
            "1",
            "t",
            "y",
            "yes",
        )

    def validate_instance(self):
        if self.LOG_LEVEL.upper() not in LOG_LEVELS:
            raise ValueError(f"LOG_LEVEL must be one of {', '.join(LOG_LEVELS)}.")
        if self.JSON_INDENT < 0:
            raise ValueError("CONTAINERSERVICE_JSON_INDENT must not be negative.")
        if self.SHOW_SECRETS:
            logging.getLogger(__name__).warning("CONTAINERSERVICE_SHOW_SECRETS is set; secrets will be printed.")


# Instantiate the config to be imported by other modules
config = Config()
config.validate_instance()
