class InventoryException(Exception):
    pass


class ParseError(InventoryException):
    """Raised when price or quantity text is not a whole number."""

    def __init__(self, field: str, raw: str):
        super().__init__(f"{field} must be a whole number, got {raw!r}")
        self.field = field
        self.raw = raw


class ValidationError(InventoryException):
    pass


class ProductNotFound(InventoryException):
    def __init__(self, product_id: int):
        super().__init__(f"Product {product_id} not found")
        self.product_id = product_id


class StorageError(InventoryException):
    pass
