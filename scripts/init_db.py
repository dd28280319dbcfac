"""Database initialization script.

Creates the ``documents`` table when it does not exist yet. Existing
documents are left untouched.

Usage:
    python -m scripts.init_db
"""

import asyncio
import sys
from pathlib import Path

# Add project root to path for imports
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from docfill.core.config import get_settings
from docfill.db.session import close_db, init_db


async def main() -> None:
    """Initialize the database."""
    settings = get_settings()
    try:
        await init_db(settings)
    finally:
        await close_db()
    print(f"Database initialized at {settings.database_url}")


if __name__ == "__main__":
    asyncio.run(main())
