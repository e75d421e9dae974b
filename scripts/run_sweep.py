#!/usr/bin/env python3
"""
Retention Sweep Runner

Runs one retention sweep against the configured database (DATABASE_URL / DB_*),
for deployments that trigger the sweep from an external cron instead of the
in-process scheduler.

Usage:
    python scripts/run_sweep.py
    python scripts/run_sweep.py --retention-hours 48

Exit status is 1 when the sweep could not run.
"""
import argparse
import asyncio
import json
import os
import sys
from datetime import timedelta

# Add project root to path
project_root = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
sys.path.insert(0, project_root)

from dotenv import load_dotenv

load_dotenv()

from application.service.sweep_transactions import SweepTransactionsService
from domain.exceptions import StoreError
from infrastructure.db.database import AsyncSessionLocal, init_db
from infrastructure.db.repositories.transaction_store_sqlalchemy import TransactionStoreSqlalchemy
from infrastructure.logging.logging_adapter import LoggingAdapter
from infrastructure.metrics.metrics_adapter import MetricsAdapter


async def run(retention_hours=None) -> dict:
    await init_db()
    retention_window = timedelta(hours=retention_hours) if retention_hours else None
    async with AsyncSessionLocal() as session:
        srv = SweepTransactionsService(
            store=TransactionStoreSqlalchemy(session),
            metrics_port=MetricsAdapter(),
            logging_port=LoggingAdapter(trigger="cli"),
        )
        result = await srv.execute(retention_window=retention_window)
    return result.to_payload()


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Delete stored transactions older than the retention window")
    parser.add_argument("--retention-hours", type=int, default=None, help="Override RETENTION_HOURS")
    args = parser.parse_args(argv)

    try:
        payload = asyncio.run(run(args.retention_hours))
    except StoreError as e:
        print(f"Sweep failed: {e}", file=sys.stderr)
        return 1
    print(json.dumps(payload))
    return 0


if __name__ == "__main__":
    sys.exit(main())
