# scripts/setup/init_db.py
"""
Initialize a persistent store: creates all tables and loads the demo seed data.
Only useful when DATABASE_URL points at a file or server; the default
in-memory store is rebuilt on every start.
Usage: DATABASE_URL=sqlite:///./driver_hub.db python scripts/setup/init_db.py
"""

import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), "..", ".."))

from app.database import SessionLocal, close_session, create_tables, engine
from app.config import settings
from app.services.seed_service import seed_store
from sqlalchemy import inspect, text


def main():
    print("🗄️  Driver Hub Store Initialization")
    print("=" * 40)
    print(f"📡 Database: {settings.DATABASE_URL}")

    if settings.DATABASE_URL in ("sqlite://", "sqlite:///:memory:"):
        print("⚠️  DATABASE_URL is in-memory: nothing would survive this script. Set DATABASE_URL first.")
        sys.exit(1)

    try:
        with engine.connect() as conn:
            conn.execute(text("SELECT 1"))
        print("✅ Database connection OK")
    except Exception as e:
        print(f"❌ Cannot connect to database: {e}")
        sys.exit(1)

    print("\n📋 Creating tables...")
    create_tables()
    tables = sorted(inspect(engine).get_table_names())
    print(f"✅ {len(tables)} tables ready:")
    for t in tables:
        print(f"   ✓ {t}")

    db = SessionLocal()
    try:
        seeded = seed_store(db)
    finally:
        close_session(db)
    print("\n🌱 Demo data loaded" if seeded else "\n🌱 Store already populated: seed skipped")

    print("\n🎉 Store ready! Start the API with SEED_DEMO_DATA=false:")
    print(f"   uvicorn app.main:app --host {settings.BACKEND_HOST} --port {settings.BACKEND_PORT} --reload")


if __name__ == "__main__":
    main()
