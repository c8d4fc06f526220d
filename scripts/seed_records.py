#!/usr/bin/env python3
"""
Insert synthetic person records directly into the configured database.

Usage:
  python scripts/seed_records.py [--count 10] [--seed 42]
"""
from __future__ import annotations

import argparse
import random
import sys
from pathlib import Path

# Allow running the script straight from a checkout
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from api.core.config import get_settings  # noqa: E402
from api.core.errors import PersistenceError  # noqa: E402
from api.db.session import get_sessionmaker  # noqa: E402
from api.domain.records import random_record  # noqa: E402
from api.repositories.record_repository import RecordRepository  # noqa: E402


def seed(repo: RecordRepository, count: int, rng: random.Random) -> list[str]:
    created = []
    for _ in range(count):
        stored = repo.create(random_record(rng))
        created.append(str(stored.id))
    return created


def main() -> None:
    ap = argparse.ArgumentParser(description="Seed person records")
    ap.add_argument("--count", type=int, default=10, help="number of records to insert (default: 10)")
    ap.add_argument("--seed", type=int, help="random seed for reproducible data")
    args = ap.parse_args()
    if args.count < 1:
        raise SystemExit("--count must be >= 1")

    settings = get_settings()
    repo = RecordRepository(get_sessionmaker(), statement_timeout_ms=settings.db_statement_timeout_ms)
    for record_id in seed(repo, args.count, random.Random(args.seed)):
        print(record_id)
    print(f"OK: {args.count} records inserted")


if __name__ == "__main__":
    try:
        main()
    except (PersistenceError, RuntimeError) as exc:  # pragma: no cover - CLI usage
        sys.stderr.write(f"Error: {exc}\n")
        raise SystemExit(1)
