"""Small JSON key/value file used to carry the order id to the next step."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Dict, Optional

LOGGER = logging.getLogger(__name__)


class OrderStateStore:
    def __init__(self, path: str | Path):
        self.path = Path(path)

    def _load(self) -> Dict[str, Any]:
        if not self.path.exists():
            return {}
        try:
            with self.path.open("r", encoding="utf-8") as f:
                data = json.load(f)
        except json.JSONDecodeError:
            LOGGER.warning(f"Ignoring unreadable state file {self.path}")
            return {}
        return data if isinstance(data, dict) else {}

    def get(self, key: str, default: Optional[Any] = None) -> Any:
        return self._load().get(key, default)

    def set(self, **values: Any) -> None:
        data = self._load()
        data.update(values)
        self.path.parent.mkdir(parents=True, exist_ok=True)
        with self.path.open("w", encoding="utf-8") as f:
            json.dump(data, f, indent=2)

    def clear(self) -> None:
        if self.path.exists():
            self.path.unlink()
