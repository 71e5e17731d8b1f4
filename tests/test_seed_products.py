import json

from inventory_app.models.supplier import Supplier
from scripts.seed_products import load_entries, normalize_entry, seed_from_file


def test_normalize_entry_loose_shapes():
    entry = normalize_entry(
        {"title": " Poetry ", "price": "12.5", "stock": "3", "supplier_name": "American Book", "phone": "555 0101"}
    )
    assert entry == {
        "name": "Poetry",
        "price": 1250,
        "quantity": 3,
        "supplier": int(Supplier.AMERICAN_BOOK),
        "supplier_phone": "555 0101",
    }


def test_normalize_entry_prefers_cents_and_clamps():
    entry = normalize_entry({"name": "Maps", "price_cents": 305, "quantity": -2, "supplier": 8})
    assert entry["price"] == 305
    assert entry["quantity"] == 0
    assert entry["supplier"] == int(Supplier.PEARSON)
    assert entry["supplier_phone"] == ""


def test_load_entries_accepts_items_object(tmp_path):
    path = tmp_path / "products.json"
    path.write_text(json.dumps({"items": [{"name": "A"}, "junk", {"name": "B"}]}), encoding="utf-8")
    assert [e["name"] for e in load_entries(str(path))] == ["A", "B"]


def test_seed_from_file_inserts_named_entries(tmp_path, repo):
    path = tmp_path / "products.json"
    path.write_text(
        json.dumps(
            [
                {"name": "History", "price": 9.99, "quantity": 2, "supplier": 1},
                {"name": "", "price": 1},
                {"name": "Art", "price_cents": 1500},
            ]
        ),
        encoding="utf-8",
    )
    assert seed_from_file(str(path), repo=repo) == 2
    stored = repo.list()
    assert [(p.name, p.price, p.quantity, p.supplier) for p in stored] == [
        ("History", 999, 2, 1),
        ("Art", 1500, 0, 0),
    ]
