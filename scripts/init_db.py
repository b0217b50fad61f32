"""
Create the Customers table and optionally seed sample rows.

Usage:
  python scripts/init_db.py            # create schema only
  python scripts/init_db.py --seed     # create schema + sample customers (idempotent)
"""

from __future__ import annotations

import argparse
import os
import sys
from contextlib import contextmanager
from pathlib import Path

from sqlalchemy import create_engine
from sqlalchemy.orm import Session

# Ensure repo root is on sys.path when running as a script (Windows-friendly).
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from app.customer_api.models import Base, Customer  # noqa: E402

SAMPLE_CUSTOMERS = (
    ("Alfreds Futterkiste", "Maria Anders"),
    ("Around the Horn", "Thomas Hardy"),
    ("Bs Beverages", "Victoria Ashworth"),
    ("Bs Beverages", "Random Name"),
)


@contextmanager
def _customers_session(db_url: str):
    """Ensure the Customers table exists, then yield a session that commits on success."""
    engine = create_engine(db_url, future=True)
    Base.metadata.create_all(bind=engine)
    s = Session(bind=engine, autoflush=False, expire_on_commit=False)
    try:
        yield s
        s.commit()
    except Exception:
        s.rollback()
        raise
    finally:
        s.close()
        engine.dispose()


def seed_only(*, database_url: str | None = None, seed: bool = False) -> int:
    """
    Create missing tables; with seed=True insert sample customers whose
    (CompanyName, ContactName) pair is not present yet. Returns rows added.
    """
    db_url = (database_url or os.environ.get("DATABASE_URL") or "sqlite:///customers.db").strip()
    added = 0
    with _customers_session(db_url) as s:
        if not seed:
            return 0
        for company, contact in SAMPLE_CUSTOMERS:
            exists = (
                s.query(Customer)
                .filter(Customer.CompanyName == company, Customer.ContactName == contact)
                .one_or_none()
            )
            if not exists:
                s.add(Customer(CompanyName=company, ContactName=contact))
                added += 1
    return added


def main() -> None:
    parser = argparse.ArgumentParser(description=__doc__, formatter_class=argparse.RawDescriptionHelpFormatter)
    parser.add_argument("--seed", action="store_true", help="insert sample customers")
    parser.add_argument("--database-url", default=None, help="overrides DATABASE_URL")
    args = parser.parse_args()

    added = seed_only(database_url=args.database_url, seed=args.seed)
    print(f"Schema ready. Sample customers added: {added}", flush=True)


if __name__ == "__main__":
    main()
