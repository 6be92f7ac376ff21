"""
Database models for the recipient store.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Optional


@dataclass
class Recipient:
    """Recipient model. The email address is the unique key."""

    email: str = ""
    id: Optional[int] = None
    created_at: Optional[datetime] = None


# SQL Table Creation Queries
CREATE_TABLES_SQL = """
-- Recipients table
CREATE TABLE IF NOT EXISTS recipients (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    email TEXT NOT NULL UNIQUE,
    created_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP
);

CREATE INDEX IF NOT EXISTS idx_recipients_email ON recipients(email);
"""
