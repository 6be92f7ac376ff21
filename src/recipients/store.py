"""SQLite persistence for the recipient collection."""

from __future__ import annotations
import sqlite3, logging
from datetime import datetime
from contextlib import contextmanager
from typing import Optional, List

from .config import StoreConfig
from .models import Recipient, CREATE_TABLES_SQL


class RecipientStore:
    def __init__(self, config: Optional[StoreConfig] = None):
        self.config = config or StoreConfig()
        self.logger = logging.getLogger(__name__)
        self._init_sqlite()

    def _init_sqlite(self):
        with self._get_connection() as conn:
            conn.executescript(CREATE_TABLES_SQL)
            conn.commit()
        self.logger.info(f"Recipient store initialized at {self.config.sqlite_path}")

    @contextmanager
    def _get_connection(self):
        # One connection per call so concurrent loaders never share one
        conn = sqlite3.connect(self.config.sqlite_path, timeout=self.config.busy_timeout)
        conn.row_factory = sqlite3.Row
        try:
            yield conn
        finally:
            conn.close()

    # --- writes --- #
    def upsert_recipient(self, email: str) -> bool:
        """Insert ``email`` unless it is already stored. Returns True on insert."""
        email = (email or "").strip()
        if not email:
            raise ValueError("email must not be empty")
        with self._get_connection() as conn:
            cur = conn.execute(
                "INSERT INTO recipients (email) VALUES (?) ON CONFLICT(email) DO NOTHING",
                (email,),
            )
            conn.commit()
            return cur.rowcount == 1

    def clear(self) -> int:
        with self._get_connection() as conn:
            cur = conn.execute("DELETE FROM recipients")
            conn.commit()
        self.logger.info(f"Cleared {cur.rowcount} recipients")
        return cur.rowcount

    # --- reads --- #
    def count(self) -> int:
        with self._get_connection() as conn:
            return conn.execute("SELECT COUNT(*) FROM recipients").fetchone()[0]

    def is_empty(self) -> bool:
        return self.count() == 0

    def list_emails(self) -> List[str]:
        with self._get_connection() as conn:
            rows = conn.execute("SELECT email FROM recipients ORDER BY email").fetchall()
            return [r["email"] for r in rows]

    def get_recipients(self) -> List[Recipient]:
        with self._get_connection() as conn:
            rows = conn.execute(
                "SELECT id, email, created_at FROM recipients ORDER BY email"
            ).fetchall()
            return [
                Recipient(
                    id=r["id"],
                    email=r["email"],
                    created_at=(
                        datetime.fromisoformat(r["created_at"]) if r["created_at"] else None
                    ),
                )
                for r in rows
            ]
