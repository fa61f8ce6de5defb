"""
Initialize database — creates all tables, optionally loads the demo fleet.
Run once before first launch, or after adding new models.
Usage: python scripts/setup/init_db.py [--seed]
"""

import argparse
import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), "..", ".."))

from app.database import create_tables, engine, SessionLocal
from app.config import settings
from app.services.sample_data import seed_sample_data
from app.services.storage import SqlStorage
from sqlalchemy import inspect, text


def main():
    parser = argparse.ArgumentParser(description="Create fleet tables")
    parser.add_argument("--seed", action="store_true", help="Load the demo fleet into an empty database")
    args = parser.parse_args()

    print("🗄️  Fleet Manager DB Initialization")
    print("=" * 40)
    print(f"📡 Database: {settings.DATABASE_URL}")

    # Test connection
    try:
        with engine.connect() as conn:
            conn.execute(text("SELECT 1"))
        print("✅ Database connection OK")
    except Exception as e:
        print(f"❌ Cannot connect to database: {e}")
        print("\nCheck DATABASE_URL in .env")
        sys.exit(1)

    print("\n📋 Creating tables...")
    create_tables()
    tables = sorted(inspect(engine).get_table_names())
    print(f"✅ Tables in database ({len(tables)} total):")
    for t in tables:
        print(f"   ✓ {t}")

    if args.seed:
        db = SessionLocal()
        try:
            loaded = seed_sample_data(SqlStorage(db))
        finally:
            db.close()
        print("\n🚐 Sample fleet loaded" if loaded else "\nℹ️  Database not empty — sample fleet skipped")

    print("\n🎉 Database ready! You can now start the backend:")
    print("   uvicorn app.main:app --host 0.0.0.0 --port 8080 --reload")


if __name__ == "__main__":
    main()
