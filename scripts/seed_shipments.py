#!/usr/bin/env python3
"""
Shipment seeding script

Reads shipments from a CSV file (header row with the create-shipment fields)
and creates each one through the shipment service.

Usage:
    python scripts/seed_shipments.py --csv assets/shipments.csv
"""

import asyncio
import argparse
import csv
import sys
from pathlib import Path
from typing import Any, Dict, List

# 添加项目根目录到Python路径
sys.path.append(str(Path(__file__).parent.parent))

from core.logger import setup_service_logger
from core.response import ServiceError
from core.validation import parse_model
from microservices.shipment_service.factory import create_shipment_service
from microservices.shipment_service.models import ShipmentCreateRequest
from microservices.shipment_service.shipment_service import ShipmentService

logger = setup_service_logger("seed_shipments")


def load_rows(csv_path: str) -> List[Dict[str, Any]]:
    """Read CSV rows as dicts; numeric columns are coerced by the request model"""
    with open(csv_path, newline="", encoding="utf-8") as f:
        return [
            {key.strip(): (value or "").strip() for key, value in row.items() if key}
            for row in csv.DictReader(f)
        ]


async def seed(service: ShipmentService, rows: List[Dict[str, Any]]) -> int:
    """Create one shipment per row, returns how many were created"""
    created = 0
    for index, row in enumerate(rows, start=1):
        try:
            request = parse_model(ShipmentCreateRequest, row)
            await service.create_shipment(request)
            created += 1
        except ServiceError as e:
            print(f"Row {index} skipped: {e}")
    return created


async def main():
    parser = argparse.ArgumentParser(description="Seed shipments from a CSV file")
    parser.add_argument("--csv", required=True, help="Path to the shipments CSV")
    args = parser.parse_args()

    rows = load_rows(args.csv)
    logger.info(f"Loaded {len(rows)} rows from {args.csv}")

    service = create_shipment_service()
    await service.initialize()
    try:
        created = await seed(service, rows)
    finally:
        await service.close()

    print(f"{created} shipments have been created!")
    return 0 if created == len(rows) else 1


if __name__ == "__main__":
    sys.exit(asyncio.run(main()))
