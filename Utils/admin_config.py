"""
Admin Configuration Manager
Handles persistence of console settings like the admin API endpoint
"""

import json
import os
import logging
from typing import Optional

from Utils.ui_config import DEFAULT_ITEMS_PER_PAGE

BASE_URL_ENV_VAR = "SENSEI_ADMIN_URL"

DEFAULT_CONFIG = {
    "base_url": "http://localhost:5401",
    "request_timeout": 15,
    "items_per_page": DEFAULT_ITEMS_PER_PAGE,
}


class AdminConfig:
    """Simple configuration manager for persistent console settings"""

    def __init__(self, config_dir: Optional[str] = None):
        self.config_dir = config_dir or os.path.expanduser("~/.sensei-admin")
        self.config_file = os.path.join(self.config_dir, "config.json")
        self.config = self._load_config()

    def _ensure_config_dir(self):
        """Ensure the configuration directory exists"""
        try:
            os.makedirs(self.config_dir, exist_ok=True)
        except OSError as e:
            logging.warning(f"Could not create config directory {self.config_dir}: {e}")

    def _load_config(self) -> dict:
        """Load configuration from file, falling back to defaults"""
        config = dict(DEFAULT_CONFIG)
        try:
            if os.path.exists(self.config_file):
                with open(self.config_file, 'r', encoding='utf-8') as f:
                    stored = json.load(f)
                if isinstance(stored, dict):
                    config.update(stored)
                    logging.debug(f"Loaded admin config from {self.config_file}")
                else:
                    logging.warning(f"Ignoring malformed admin config in {self.config_file}")
        except (OSError, ValueError) as e:
            logging.warning(f"Could not load admin config: {e}")
        return config

    def _save_config(self):
        """Save configuration to file"""
        try:
            self._ensure_config_dir()
            with open(self.config_file, 'w', encoding='utf-8') as f:
                json.dump(self.config, f, indent=2, ensure_ascii=False)
                logging.debug(f"Saved admin config to {self.config_file}")
        except OSError as e:
            logging.error(f"Could not save admin config: {e}")

    def get_base_url(self) -> str:
        """Admin API base URL; the environment variable wins over the file"""
        url = os.environ.get(BASE_URL_ENV_VAR) or self.config.get("base_url") or DEFAULT_CONFIG["base_url"]
        return url.rstrip("/")

    def set_base_url(self, base_url: str):
        self.config["base_url"] = base_url
        self._save_config()
        logging.info(f"Updated admin API base URL: {base_url}")

    def get_request_timeout(self) -> float:
        try:
            timeout = float(self.config.get("request_timeout", DEFAULT_CONFIG["request_timeout"]))
        except (TypeError, ValueError):
            timeout = DEFAULT_CONFIG["request_timeout"]
        return timeout if timeout > 0 else DEFAULT_CONFIG["request_timeout"]

    def get_items_per_page(self) -> int:
        try:
            take = int(self.config.get("items_per_page", DEFAULT_ITEMS_PER_PAGE))
        except (TypeError, ValueError):
            take = DEFAULT_ITEMS_PER_PAGE
        return take if take > 0 else DEFAULT_ITEMS_PER_PAGE

    def set_items_per_page(self, items_per_page: int):
        if items_per_page <= 0:
            raise ValueError("items_per_page must be positive")
        self.config["items_per_page"] = items_per_page
        self._save_config()


# Global singleton instance
_admin_config = None


def get_admin_config() -> AdminConfig:
    """Get the global admin configuration singleton"""
    global _admin_config
    if _admin_config is None:
        _admin_config = AdminConfig()
    return _admin_config
