from decimal import Decimal
from typing import Optional

from pydantic import BaseModel

from inventory_app.config import settings
from inventory_app.models.supplier import Supplier
from inventory_app.schemas.product_schema import ProductOut

CENT_TO_DOLLAR = 100


def format_price(cents: int, symbol: Optional[str] = None) -> str:
    symbol = settings.CURRENCY_SYMBOL if symbol is None else symbol
    amount = Decimal(cents) / CENT_TO_DOLLAR
    return f"{symbol}{amount:,.2f}"


class EditorResult(BaseModel):
    """Outcome of an editor or list action, shown to the user as a short message."""

    ok: bool
    message: Optional[str] = None
    product_id: Optional[int] = None
    written: bool = False
    uri: Optional[str] = None


class ProductRow(BaseModel):
    id: int
    name: str
    supplier_name: str
    supplier_phone: str
    price: int
    price_text: str
    quantity: int

    @property
    def quantity_text(self) -> str:
        return f"{self.quantity} in stock"

    @property
    def phone_text(self) -> str:
        return f"Phone: {self.supplier_phone}"

    @classmethod
    def from_product(cls, p: ProductOut) -> "ProductRow":
        return cls(
            id=p.id,
            name=p.name,
            supplier_name=Supplier.for_display(p.supplier).display_name,
            supplier_phone=p.supplier_phone,
            price=p.price,
            price_text=format_price(p.price),
            quantity=p.quantity,
        )
