# scripts/init_db.py
"""
One-shot setup: create tables, wipe them, load the seed profile.
Usage: python scripts/init_db.py   (package installed; honours DATABASE_URL / .env)
"""
import logging
import sys

from profile_api.config import settings
from profile_api.database import SessionLocal, engine, init_schema
from profile_api.services.seed import reset_and_seed

logging.basicConfig(level=settings.log_level.upper(), format="%(levelname)s %(name)s - %(message)s")

try:
    init_schema(engine)
except Exception as e:
    print("Error opening database:", e)
    sys.exit(1)

db = SessionLocal()
try:
    pid = reset_and_seed(db)
finally:
    db.close()
engine.dispose()

print(f"Database initialized with seed data (profile_id={pid}) at {settings.database_url}")
