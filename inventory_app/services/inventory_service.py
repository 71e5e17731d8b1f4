from typing import List, Optional

from inventory_app.errors import InventoryException
from inventory_app.repositories.product_repo import ProductRepository
from inventory_app.schemas.editor_schema import EditorResult, ProductRow
from inventory_app.services import messages
from inventory_app.services.editor_service import EditorSession
from inventory_app.utils.logs import get_logger

log = get_logger("inventory.sales", "SALES")


class InventoryService:
    def __init__(self, repo: Optional[ProductRepository] = None):
        self.repo = repo or ProductRepository()

    def list_rows(self) -> List[ProductRow]:
        try:
            products = self.repo.list()
        except InventoryException as e:
            log.error(f"listing products failed: {e}")
            return []
        return [ProductRow.from_product(p) for p in products]

    def open_editor(self, product_id: Optional[int] = None) -> EditorSession:
        return EditorSession.open(self.repo, product_id)

    def sell_one(self, row: ProductRow) -> EditorResult:
        """
        Sell a single unit of the product shown in `row`.

        The store is updated first; the row's displayed quantity only
        changes once the update reports an affected row.
        """
        if row.quantity <= 0:
            log.info(f"product {row.id}: quantity is 0, nothing to sell")
            return EditorResult(ok=True, product_id=row.id)

        new_quantity = row.quantity - 1
        try:
            rows = self.repo.update(row.id, {"quantity": new_quantity})
        except InventoryException as e:
            log.error(f"sale of product {row.id} failed: {e}")
            rows = 0
        if rows == 0:
            return EditorResult(ok=False, message=messages.UPDATE_FAILED, product_id=row.id)

        row.quantity = new_quantity
        return EditorResult(ok=True, product_id=row.id, written=True)
