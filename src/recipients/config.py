"""
Recipient store configuration and settings.
"""

import os
from pathlib import Path
from typing import Optional

from utils import read_conf_file


class StoreConfig:
    """Configuration for the recipient store."""

    def __init__(
        self,
        sqlite_path: Optional[str] = None,
        busy_timeout: float = 30.0,
        chunk_size: int = 500,
    ):
        # Seconds a writer waits on a locked database
        self.busy_timeout = busy_timeout
        self.chunk_size = chunk_size

        # Set default SQLite path if not provided
        if sqlite_path is None:
            project_root = Path(__file__).parent.parent.parent
            data_dir = project_root / "data"
            data_dir.mkdir(exist_ok=True)
            self.sqlite_path = str(data_dir / "recipients.db")
        else:
            self.sqlite_path = sqlite_path

    @classmethod
    def from_env(cls) -> "StoreConfig":
        """Create config from environment variables."""
        return cls(
            sqlite_path=os.getenv("RECIPIENTS_SQLITE_PATH"),
            busy_timeout=float(os.getenv("RECIPIENTS_BUSY_TIMEOUT", "30")),
            chunk_size=int(os.getenv("RECIPIENTS_CHUNK_SIZE", "500")),
        )

    @classmethod
    def from_config_file(cls, config_path: str = "recipients.conf") -> "StoreConfig":
        """Create config from configuration file."""
        config = read_conf_file(config_path)
        return cls(
            sqlite_path=config.get("sqlite_path"),
            busy_timeout=float(config.get("busy_timeout", "30")),
            chunk_size=int(config.get("chunk_size", "500")),
        )
