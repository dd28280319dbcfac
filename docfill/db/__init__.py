"""Database models and session management."""

from docfill.db.models import DocumentRecord
from docfill.db.session import (
    close_db,
    create_all_tables,
    drop_all_tables,
    get_session_maker,
    init_db,
)

__all__ = [
    # Models
    "DocumentRecord",
    # Session
    "close_db",
    "create_all_tables",
    "drop_all_tables",
    "get_session_maker",
    "init_db",
]
