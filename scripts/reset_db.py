"""Database reset script.

Drops every docfill table and reinitializes the database. All stored
documents are lost.

Usage:
    python -m scripts.reset_db --yes
"""

import argparse
import asyncio
import sys
from pathlib import Path

# Add project root to path for imports
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from docfill.core.config import get_settings
from docfill.db.session import close_db, drop_all_tables, init_db


async def main() -> None:
    """Reset the database by dropping all tables and reinitializing."""
    settings = get_settings()

    try:
        print("Dropping all database tables...")
        await drop_all_tables(settings)
        print("All tables dropped successfully!")

        print("Recreating tables...")
        await init_db(settings)
        print("Database reinitialized successfully!")
    finally:
        await close_db()


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Drop and recreate docfill tables.")
    parser.add_argument("--yes", action="store_true", help="Confirm data loss")
    args = parser.parse_args()
    if not args.yes:
        parser.error("refusing to reset without --yes")
    asyncio.run(main())
