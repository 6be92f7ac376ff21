"""
Checkout client configuration and settings.
"""

import os
from pathlib import Path
from typing import Optional

from utils import read_conf_file


def _optional_float(value):
    if value in (None, ""):
        return None
    return float(value)


class CheckoutConfig:
    """Configuration for order submission."""

    def __init__(
        self,
        base_url: str = "http://localhost:3000",
        submit_path: str = "/submit-order",
        redirect_path: str = "/resume.html",
        state_path: Optional[str] = None,
        timeout: Optional[float] = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.submit_path = submit_path
        self.redirect_path = redirect_path
        # None means wait as long as the server takes
        self.timeout = timeout

        # Set default state file path if not provided
        if state_path is None:
            project_root = Path(__file__).parent.parent.parent
            data_dir = project_root / "data"
            data_dir.mkdir(exist_ok=True)
            self.state_path = str(data_dir / "checkout_state.json")
        else:
            self.state_path = state_path

    @property
    def submit_url(self) -> str:
        return f"{self.base_url}{self.submit_path}"

    @classmethod
    def from_env(cls) -> "CheckoutConfig":
        """Create config from environment variables."""
        return cls(
            base_url=os.getenv("CHECKOUT_BASE_URL", "http://localhost:3000"),
            state_path=os.getenv("CHECKOUT_STATE_PATH"),
            timeout=_optional_float(os.getenv("CHECKOUT_TIMEOUT")),
        )

    @classmethod
    def from_config_file(cls, config_path: str = "checkout.conf") -> "CheckoutConfig":
        """Create config from configuration file."""
        config = read_conf_file(config_path)
        return cls(
            base_url=config.get("base_url", "http://localhost:3000"),
            submit_path=config.get("submit_path", "/submit-order"),
            redirect_path=config.get("redirect_path", "/resume.html"),
            state_path=config.get("state_path"),
            timeout=_optional_float(config.get("timeout")),
        )
