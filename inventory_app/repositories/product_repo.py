import os
from contextlib import contextmanager
from typing import Any, Iterator, List, Mapping, Optional, Union

from filelock import FileLock, Timeout
from pydantic import ValidationError as SchemaError
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, sessionmaker

from inventory_app.config import settings
from inventory_app.db import SessionLocal
from inventory_app.errors import ProductNotFound, StorageError, ValidationError
from inventory_app.models.product import Product
from inventory_app.schemas.product_schema import ProductIn, ProductOut, ProductUpdate
from inventory_app.utils.logs import get_logger

log = get_logger("inventory.store", "STORE")

# sqlite3 raises OverflowError itself for integers wider than 64 bits
DB_ERRORS = (SQLAlchemyError, OverflowError)


def _schema_message(exc: SchemaError) -> str:
    parts = []
    for err in exc.errors():
        loc = ".".join(str(x) for x in err.get("loc", ())) or "product"
        parts.append(f"{loc}: {err.get('msg')}")
    return "; ".join(parts)


class ProductRepository:
    """
    Keyed storage for inventory rows.

    Every call opens its own short-lived session and transaction, so a write
    is committed (and visible to any later read) by the time the call returns.
    Updates and deletes on the same id are serialized with a file lock.
    """

    def __init__(
        self,
        session_factory: sessionmaker = None,
        locks_dir: Optional[str] = None,
        lock_timeout: Optional[int] = None,
    ):
        self.session_factory = session_factory or SessionLocal
        self.locks_dir = locks_dir or settings.locks_dir
        self.lock_timeout = (
            lock_timeout if lock_timeout is not None else settings.LOCK_TIMEOUT_SECONDS
        )

    @contextmanager
    def _transaction(self) -> Iterator[Session]:
        """
        Fresh session with one transaction: committed when the block exits
        normally, rolled back when it raises.
        """
        with self.session_factory() as s, s.begin():
            yield s

    @contextmanager
    def _row_lock(self, product_id: int):
        os.makedirs(self.locks_dir, exist_ok=True)
        lock = FileLock(os.path.join(self.locks_dir, f"product_{product_id}.lock"))
        try:
            lock.acquire(timeout=self.lock_timeout)
        except Timeout as e:
            raise StorageError(
                f"Could not acquire lock for product {product_id}; try again"
            ) from e
        try:
            yield
        finally:
            lock.release()

    def insert(self, product: Union[ProductIn, Mapping[str, Any]]) -> Optional[int]:
        """
        Persist a new row and return its id.

        Invalid values raise ValidationError before anything is written. A
        failed write is logged and reported as None.
        """
        if isinstance(product, ProductIn):
            data = product.model_dump()
        else:
            try:
                data = ProductIn.model_validate(dict(product)).model_dump()
            except SchemaError as e:
                raise ValidationError(_schema_message(e)) from e

        try:
            with self._transaction() as s:
                p = Product(**data)
                s.add(p)
                s.flush()  # ensure id assigned
                new_id = p.id
        except DB_ERRORS as e:
            log.error(f"insert failed for {data.get('name')!r}: {e}")
            return None
        log.debug(f"insert(): id={new_id} name={data['name']!r}")
        return new_id

    def find(self, product_id: int) -> Optional[ProductOut]:
        try:
            with self.session_factory() as s:
                p = s.get(Product, product_id)
                return ProductOut.model_validate(p) if p else None
        except DB_ERRORS as e:
            raise StorageError(f"query of product {product_id} failed") from e

    def get(self, product_id: int) -> ProductOut:
        p = self.find(product_id)
        if p is None:
            raise ProductNotFound(product_id)
        return p

    def list(self) -> List[ProductOut]:
        try:
            with self.session_factory() as s:
                rows = s.query(Product).order_by(Product.id).all()
                return [ProductOut.model_validate(p) for p in rows]
        except DB_ERRORS as e:
            raise StorageError("listing products failed") from e

    def update(self, product_id: int, values: Mapping[str, Any]) -> int:
        """
        Overwrite the given columns of one row. Returns the number of rows
        affected, 0 when no product has this id.
        """
        try:
            changes = ProductUpdate.model_validate(dict(values)).changes()
        except SchemaError as e:
            raise ValidationError(_schema_message(e)) from e
        if not changes:
            raise ValidationError("nothing to update")

        with self._row_lock(product_id):
            try:
                with self._transaction() as s:
                    rows = (
                        s.query(Product)
                        .filter(Product.id == product_id)
                        .update(changes, synchronize_session=False)
                    )
            except DB_ERRORS as e:
                raise StorageError(f"update of product {product_id} failed") from e
        log.debug(f"update(): id={product_id} columns={sorted(changes)} rows={rows}")
        return rows

    def delete(self, product_id: int) -> int:
        with self._row_lock(product_id):
            try:
                with self._transaction() as s:
                    rows = (
                        s.query(Product)
                        .filter(Product.id == product_id)
                        .delete(synchronize_session=False)
                    )
            except DB_ERRORS as e:
                raise StorageError(f"delete of product {product_id} failed") from e
        log.debug(f"delete(): id={product_id} rows={rows}")
        return rows
