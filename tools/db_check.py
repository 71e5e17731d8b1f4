import os
import sqlite3
import sys
sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

from inventory_app.models.supplier import Supplier

DB = sys.argv[1] if len(sys.argv) > 1 else "inventory.db"
PRODUCT_ID = sys.argv[2] if len(sys.argv) > 2 else None

conn = sqlite3.connect(DB)
cur = conn.cursor()

print("=== Inventory ===")
if PRODUCT_ID:
    cur.execute(
        "SELECT id, name, price, quantity, supplier, supplier_phone FROM inventory WHERE id=?",
        (int(PRODUCT_ID),),
    )
else:
    cur.execute(
        "SELECT id, name, price, quantity, supplier, supplier_phone FROM inventory ORDER BY id LIMIT 50"
    )
for r in cur.fetchall():
    print(
        {
            "id": r[0],
            "name": r[1],
            "price_cents": r[2],
            "quantity": r[3],
            "supplier": r[4],
            "supplier_display": Supplier.for_display(r[4]).display_name,
            "supplier_phone": r[5],
        }
    )

print("\n=== Integrity ===")
print(cur.execute("PRAGMA integrity_check").fetchone()[0])

conn.close()
