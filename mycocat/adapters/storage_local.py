from __future__ import annotations
import json
import os
from typing import Dict

from mycocat.domain.ports import StoragePort
from mycocat.viewmodels.settings_vm import default_settings_payload


class StorageLocal(StoragePort):
    """Local filesystem storage for user settings (JSON)."""

    SETTINGS_FILE = "user_settings.json"

    def __init__(self, root_dir: str = ".") -> None:
        self.root = root_dir

    @property
    def settings_path(self) -> str:
        return os.path.join(self.root, self.SETTINGS_FILE)

    def save_user_settings(self, payload: Dict) -> None:
        os.makedirs(self.root, exist_ok=True)
        with open(self.settings_path, "w", encoding="utf-8") as f:
            json.dump(payload, f, ensure_ascii=False, indent=2, sort_keys=True)

    def load_user_settings(self) -> Dict:
        """Return persisted settings, or the defaults when nothing was saved yet."""
        if not os.path.exists(self.settings_path):
            return default_settings_payload()
        with open(self.settings_path, "r", encoding="utf-8") as f:
            payload = json.load(f)
        if not isinstance(payload, dict):
            raise ValueError(f"{self.settings_path} must contain a JSON object.")
        return payload
