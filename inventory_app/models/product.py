from sqlalchemy import CheckConstraint, Column, Integer, String, Text

from inventory_app.db import Base
from inventory_app.models.supplier import Supplier


class Product(Base):
    __tablename__ = "inventory"
    __table_args__ = (
        CheckConstraint("price >= 0", name="ck_inventory_price_non_negative"),
        CheckConstraint("quantity >= 0", name="ck_inventory_quantity_non_negative"),
    )

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(256), nullable=False)
    price = Column(Integer, nullable=False, default=0)  # cents
    quantity = Column(Integer, nullable=False, default=0)
    supplier = Column(Integer, nullable=False, default=int(Supplier.PEARSON))
    supplier_phone = Column(Text, nullable=False, default="")

    def __repr__(self):
        return f"<Product id={self.id} name={self.name}>"
