import os
import sys
sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

import argparse
import concurrent.futures

from inventory_app.db import create_db_engine, create_session_factory, init_db
from inventory_app.repositories.product_repo import ProductRepository
from inventory_app.services.inventory_service import InventoryService


def sell_task(i, svc, product_id):
    # each worker reads its own row, as separate list screens would
    row = next((r for r in svc.list_rows() if r.id == product_id), None)
    if row is None:
        return (i, "missing")
    result = svc.sell_one(row)
    return (i, result.ok, row.quantity)


def run_sell_concurrent(db_url, workers, quantity):
    engine = create_db_engine(db_url)
    init_db(engine)
    repo = ProductRepository(create_session_factory(engine))
    svc = InventoryService(repo)
    pid = repo.insert({"name": "stress", "price": 100, "quantity": quantity})
    print(f"Running sell test: workers={workers}, product={pid}, quantity={quantity}")
    with concurrent.futures.ThreadPoolExecutor(max_workers=workers) as ex:
        futures = [ex.submit(sell_task, i, svc, pid) for i in range(workers)]
        results = [f.result() for f in futures]
    for r in results:
        print(r)
    print("Final stored quantity:", repo.get(pid).quantity)


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Concurrent sell-one tool.")
    parser.add_argument("--db", default="sqlite:///./stress.db")
    parser.add_argument("--workers", type=int, default=8)
    parser.add_argument("--quantity", type=int, default=5)
    args = parser.parse_args()
    run_sell_concurrent(args.db, args.workers, args.quantity)
