#!/usr/bin/env python3
"""
Seed the inventory table from a JSON file.

The file may hold a list of product entries or an object with an "items"
list. Entries are normalized from a few loose shapes (price in currency
units or cents, "stock" or "quantity", supplier by number or name).

Usage:
    python scripts/seed_products.py --file products.json
"""
import argparse
import json
import os
import sys

# allow running from repo/scripts
sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

from inventory_app.db import init_db
from inventory_app.errors import ValidationError
from inventory_app.models.supplier import Supplier
from inventory_app.repositories.product_repo import ProductRepository
from inventory_app.utils.logs import get_logger

log = get_logger("inventory.seed", "SEED")


def _to_int(value, default=0):
    try:
        return int(value)
    except (TypeError, ValueError):
        return default


def normalize_entry(entry: dict) -> dict:
    """Return a dict with keys: name, price, quantity, supplier, supplier_phone"""
    name = entry.get("name") or entry.get("title") or ""

    # price parsing: prefer cents; otherwise treat price as currency units
    if entry.get("price_cents") is not None:
        price = _to_int(entry.get("price_cents"))
    else:
        raw_price = entry.get("price", entry.get("amount", 0))
        try:
            price = int(round(float(raw_price) * 100))
        except (TypeError, ValueError):
            price = 0

    quantity = _to_int(entry.get("quantity", entry.get("stock", 0)) or 0)
    supplier = Supplier.from_selection(entry.get("supplier", entry.get("supplier_name")))
    phone = entry.get("supplier_phone") or entry.get("phone") or ""

    return {
        "name": str(name).strip(),
        "price": max(price, 0),
        "quantity": max(quantity, 0),
        "supplier": int(supplier),
        "supplier_phone": str(phone).strip(),
    }


def load_entries(path: str) -> list:
    if not os.path.exists(path):
        raise FileNotFoundError(path)

    with open(path, "r", encoding="utf-8") as f:
        try:
            data = json.load(f)
        except json.JSONDecodeError as e:
            raise RuntimeError(f"Failed to parse JSON from {path}: {e}") from e

    if isinstance(data, dict):
        if "items" in data and isinstance(data["items"], list):
            source_list = data["items"]
        else:
            source_list = list(data.values())
    elif isinstance(data, list):
        source_list = data
    else:
        source_list = []
    return [normalize_entry(e) for e in source_list if isinstance(e, dict)]


def seed_from_file(path: str, repo: ProductRepository = None) -> int:
    repo = repo or ProductRepository()
    created = 0
    for entry in load_entries(path):
        if not entry["name"]:
            log.warning(f"skipping entry without a name: {entry}")
            continue
        try:
            new_id = repo.insert(entry)
        except ValidationError as e:
            log.warning(f"skipping {entry['name']!r}: {e}")
            continue
        if new_id is not None:
            created += 1
    log.info(f"Seeded products: {created}")
    return created


if __name__ == "__main__":
    parser = argparse.ArgumentParser()
    parser.add_argument("--file", "-f", required=True, help="Path to a JSON list of product entries")
    parser.add_argument("--reset", action="store_true", help="Drop and recreate the table first")
    args = parser.parse_args()
    if not os.path.exists(args.file):
        print("File not found:", args.file)
        sys.exit(1)
    init_db(reset=args.reset)
    seed_from_file(args.file)
