#!/usr/bin/env python3
"""
Seed products from a JSON file (scripts/sample_products.json by default).

The file may hold a list of product objects or an object with an "items" list.
Every entry goes through the same validation as POST /products; invalid
entries are reported and skipped.

Usage:
    python scripts/seed_products.py --file scripts/sample_products.json
"""
import argparse
import json
import os
import sys

# allow running from repo/scripts
sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

from products_api.config import settings
from products_api.db import Database
from products_api.repositories.product_repo import ProductRepository
from products_api.services.product_validator import validate_product

DEFAULT_SOURCE = os.path.join(os.path.dirname(__file__), "sample_products.json")


def load_entries(path: str) -> list:
    with open(path, "r", encoding="utf-8") as f:
        try:
            data = json.load(f)
        except ValueError as e:
            raise RuntimeError(f"Failed to parse JSON from {path}: {e}")

    if isinstance(data, dict) and isinstance(data.get("items"), list):
        return data["items"]
    if isinstance(data, list):
        return data
    return []


def seed_from_file(path: str, database_url: str = settings.DATABASE_URL):
    """Returns (created, skipped)."""
    database = Database(database_url)
    try:
        database.init_schema()
        repo = ProductRepository(database.SessionLocal)
        created = 0
        skipped = 0
        for i, entry in enumerate(load_entries(path)):
            result = validate_product(entry)
            if not result.valid:
                print(f"entry {i}: {', '.join(result.errors)}, skipped")
                skipped += 1
                continue
            repo.create(result.value)
            created += 1
        print("Seeded products:", created)
        return created, skipped
    finally:
        database.dispose()


if __name__ == "__main__":
    parser = argparse.ArgumentParser()
    parser.add_argument("--file", "-f", default=DEFAULT_SOURCE, help="Path to a JSON list of products")
    parser.add_argument("--db", default=settings.DATABASE_URL, help="SQLAlchemy URL of the store")
    args = parser.parse_args()
    if not os.path.exists(args.file):
        print("File not found:", args.file)
        sys.exit(1)
    seed_from_file(args.file, args.db)
