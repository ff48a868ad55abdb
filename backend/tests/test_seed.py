import json
import os
import sys

sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "scripts")))

from seed_products import DEFAULT_SOURCE, seed_from_file  # noqa: E402

from products_api.db import Database  # noqa: E402
from products_api.repositories.product_repo import ProductRepository  # noqa: E402


def test_seed_skips_invalid_entries(tmp_path, db_url):
    src = tmp_path / "products.json"
    src.write_text(
        json.dumps(
            {
                "items": [
                    {"name": "Tea", "price": "3.00", "stock": 5},
                    {"name": "", "price": 1},
                    "not a product",
                    {"name": "Mug", "price": 12.99, "opis": "Ceramic"},
                ]
            }
        ),
        encoding="utf-8",
    )
    assert seed_from_file(str(src), db_url) == (2, 2)

    db = Database(db_url)
    try:
        names = sorted(p.name for p in ProductRepository(db.SessionLocal).list())
    finally:
        db.dispose()
    assert names == ["Mug", "Tea"]


def test_bundled_sample_is_valid(db_url):
    created, skipped = seed_from_file(DEFAULT_SOURCE, db_url)
    assert skipped == 0
    assert created == 4
