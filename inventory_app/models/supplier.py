import enum
from typing import Any, Optional


class Supplier(enum.IntEnum):
    PEARSON = 0
    BROOK_TAYLOR = 1
    AMERICAN_BOOK = 2

    @property
    def display_name(self) -> str:
        return _DISPLAY_NAMES[self]

    @classmethod
    def from_selection(cls, value: Optional[Any]) -> "Supplier":
        """
        Resolve a value chosen in the editor (or passed to a write).
        Unset or unrecognized selections fall back to PEARSON.
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            by_name = _by_display_name(value)
            if by_name is not None:
                return by_name
            text = value.strip()
            if text.isdecimal():
                value = int(text)
        if is_valid_supplier(value):
            return cls(value)
        return cls.PEARSON

    @classmethod
    def for_display(cls, value: Optional[Any]) -> "Supplier":
        """
        Resolve a persisted supplier value for showing it in a list or form.
        Anything other than PEARSON or BROOK_TAYLOR lands in AMERICAN_BOOK.
        """
        if value == cls.PEARSON:
            return cls.PEARSON
        if value == cls.BROOK_TAYLOR:
            return cls.BROOK_TAYLOR
        return cls.AMERICAN_BOOK


_DISPLAY_NAMES = {
    Supplier.PEARSON: "Pearson",
    Supplier.BROOK_TAYLOR: "Brook & Taylor",
    Supplier.AMERICAN_BOOK: "American Book",
}


def _by_display_name(name: str) -> Optional[Supplier]:
    wanted = name.strip().lower()
    for supplier, label in _DISPLAY_NAMES.items():
        if label.lower() == wanted or supplier.name.lower() == wanted:
            return supplier
    return None


def is_valid_supplier(value: Any) -> bool:
    # whole numbers only: bools and floats never name a supplier
    if isinstance(value, bool) or not isinstance(value, int):
        return False
    return value in (Supplier.PEARSON, Supplier.BROOK_TAYLOR, Supplier.AMERICAN_BOOK)
