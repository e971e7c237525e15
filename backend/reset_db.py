"""
Database Reset Script
Run this to drop the catalog tables and rebuild the schema fresh.
"""

import asyncio
import sys
sys.path.append('src')

from infrastructure.config import get_settings, setup_logger
from infrastructure.database import reset_database, close_db


async def main() -> None:
    """Drop and recreate all tables, then release the engine."""
    settings = get_settings()
    setup_logger(level=settings.log_level, log_format=settings.log_format)
    try:
        await reset_database()
    finally:
        await close_db()


if __name__ == "__main__":
    print(f"\n⚠️  WARNING: This will DELETE ALL PRODUCTS in {get_settings().database_url}\n")
    response = input("Are you sure? Type 'yes' to continue: ")
    
    if response.lower() == 'yes':
        asyncio.run(main())
        print("\n✅ Database has been reset successfully!\n")
    else:
        print("\n❌ Cancelled.\n")
