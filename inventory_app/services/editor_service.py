import enum
import re
from typing import Any, Dict, Optional

from inventory_app.config import settings
from inventory_app.errors import InventoryException, ParseError, StorageError
from inventory_app.models.supplier import Supplier
from inventory_app.repositories.product_repo import ProductRepository
from inventory_app.schemas.editor_schema import EditorResult
from inventory_app.schemas.product_schema import ProductOut
from inventory_app.services import messages
from inventory_app.utils.logs import get_logger

log = get_logger("inventory.editor", "EDITOR")

FORM_FIELDS = ("name", "price", "quantity", "supplier_phone")

_WHOLE_NUMBER = re.compile(r"[+-]?\d+")


class EditorState(enum.Enum):
    NEW = "new"
    EXISTING = "existing"
    DIRTY = "dirty"


class ExitDecision(enum.Enum):
    LEAVE = "leave"
    CONFIRM_DISCARD = "confirm_discard"
    STAY = "stay"


def parse_whole_number(field: str, text: str) -> int:
    """Parse form text as an integer; empty text counts as 0."""
    text = (text or "").strip()
    if not text:
        return 0
    if not _WHOLE_NUMBER.fullmatch(text):
        raise ParseError(field, text)
    return int(text)


def _displayed_int(text: str) -> Optional[int]:
    # None for empty or unparsable display text
    if not (text or "").strip():
        return None
    try:
        return parse_whole_number("quantity", text)
    except ParseError:
        return None


class EditorSession:
    """
    Form state for creating or editing one product.

    Fields hold the raw text shown to the user; nothing reaches the store
    until save() or delete(). The session starts NEW (no id) or EXISTING
    (loaded from the store) and becomes DIRTY on any edit.
    """

    def __init__(
        self,
        repo: ProductRepository,
        product_id: Optional[int] = None,
        phone_min_length: Optional[int] = None,
    ):
        self.repo = repo
        self.product_id = product_id
        self.phone_min_length = (
            phone_min_length if phone_min_length is not None else settings.PHONE_NUM_MIN
        )
        self.name = ""
        self.price = ""
        self.quantity = ""
        self.supplier_phone = ""
        self.supplier = Supplier.PEARSON
        self.state = EditorState.NEW
        self.closed = False
        self.load_result: Optional[EditorResult] = None

    @classmethod
    def open(cls, repo: ProductRepository, product_id: Optional[int] = None, **kwargs):
        session = cls(repo, product_id=product_id, **kwargs)
        if product_id is not None:
            session.load_result = session.load()
        return session

    @property
    def is_dirty(self) -> bool:
        return self.state is EditorState.DIRTY

    @property
    def can_delete(self) -> bool:
        return self.product_id is not None

    def load(self) -> EditorResult:
        try:
            product = self.repo.get(self.product_id)
        except InventoryException as e:
            log.warning(f"load of product {self.product_id} failed: {e}")
            return EditorResult(
                ok=False, message=messages.LOAD_FAILED, product_id=self.product_id
            )
        self._fill(product)
        self.state = EditorState.EXISTING
        return EditorResult(ok=True, product_id=product.id)

    def _fill(self, product: ProductOut):
        self.name = product.name
        self.price = str(product.price)
        self.quantity = str(product.quantity)
        self.supplier_phone = product.supplier_phone
        # the form has no "other" bucket; unknown values select the first supplier
        self.supplier = Supplier.from_selection(product.supplier)

    def _mark_dirty(self):
        self.state = EditorState.DIRTY

    def _settle(self):
        self.state = EditorState.NEW if self.product_id is None else EditorState.EXISTING

    def edit(self, **fields: Any):
        for key, value in fields.items():
            if key not in FORM_FIELDS:
                raise TypeError(f"unknown form field {key!r}")
            setattr(self, key, "" if value is None else str(value))
        self._mark_dirty()

    def select_supplier(self, value: Any):
        self.supplier = Supplier.from_selection(value)
        self._mark_dirty()

    def increment_quantity(self) -> EditorResult:
        current = _displayed_int(self.quantity)
        self.quantity = "0" if current is None else str(current + 1)
        self._mark_dirty()
        return EditorResult(ok=True)

    def decrement_quantity(self) -> EditorResult:
        current = _displayed_int(self.quantity)
        self._mark_dirty()
        if current is None or current <= 0:
            self.quantity = "0"
            return EditorResult(ok=False, message=messages.QUANTITY_BELOW_ZERO)
        self.quantity = str(current - 1)
        return EditorResult(ok=True)

    def _is_blank_new_form(self) -> bool:
        return (
            self.product_id is None
            and not self.name.strip()
            and not self.price.strip()
            and not self.quantity.strip()
            and not self.supplier_phone.strip()
            and self.supplier == Supplier.PEARSON
        )

    def values(self) -> Dict[str, Any]:
        """Normalized column values for the current form; raises ParseError."""
        return {
            "name": self.name.strip(),
            "price": parse_whole_number("price", self.price),
            "quantity": parse_whole_number("quantity", self.quantity),
            "supplier": int(Supplier.from_selection(self.supplier)),
            "supplier_phone": self.supplier_phone.strip(),
        }

    def save(self) -> EditorResult:
        if self._is_blank_new_form():
            log.debug("save(): blank new form, nothing written")
            self._settle()
            return EditorResult(ok=True)

        try:
            values = self.values()
            if self.product_id is None:
                return self._insert(values)
            return self._update(values)
        except InventoryException as e:
            # ParseError / ValidationError: keep the user on the form
            log.warning(f"save rejected: {e}")
            return EditorResult(ok=False, message=str(e), product_id=self.product_id)

    def _insert(self, values: Dict[str, Any]) -> EditorResult:
        new_id = self.repo.insert(values)
        if new_id is None:
            return EditorResult(ok=False, message=messages.INSERT_FAILED)
        self.product_id = new_id
        self._settle()
        log.info(f"product {new_id} created")
        return EditorResult(
            ok=True, message=messages.INSERT_OK, product_id=new_id, written=True
        )

    def _update(self, values: Dict[str, Any]) -> EditorResult:
        try:
            rows = self.repo.update(self.product_id, values)
        except StorageError as e:
            log.error(f"update of product {self.product_id} failed: {e}")
            rows = 0
        if rows == 0:
            return EditorResult(
                ok=False, message=messages.UPDATE_FAILED, product_id=self.product_id
            )
        self._settle()
        return EditorResult(
            ok=True,
            message=messages.UPDATE_OK,
            product_id=self.product_id,
            written=True,
        )

    def delete(self) -> EditorResult:
        """
        Delete the bound product. Call only after the user confirmed.
        The session is closed whatever the outcome.
        """
        self.closed = True
        if self.product_id is None:
            return EditorResult(ok=False, message=messages.DELETE_UNSAVED)
        try:
            rows = self.repo.delete(self.product_id)
        except StorageError as e:
            log.error(f"delete of product {self.product_id} failed: {e}")
            rows = 0
        if rows == 0:
            return EditorResult(
                ok=False, message=messages.DELETE_FAILED, product_id=self.product_id
            )
        log.info(f"product {self.product_id} deleted")
        return EditorResult(
            ok=True,
            message=messages.DELETE_OK,
            product_id=self.product_id,
            written=True,
        )

    def request_exit(self) -> ExitDecision:
        if self.is_dirty:
            return ExitDecision.CONFIRM_DISCARD
        self.closed = True
        return ExitDecision.LEAVE

    def confirm_discard(self, confirmed: bool) -> ExitDecision:
        if not confirmed:
            return ExitDecision.STAY
        self._settle()
        self.closed = True
        return ExitDecision.LEAVE

    def dial_supplier(self) -> EditorResult:
        phone = self.supplier_phone.strip()
        if len(phone) < self.phone_min_length:
            return EditorResult(ok=False, message=messages.INVALID_PHONE)
        return EditorResult(ok=True, uri=f"tel:{phone}")
