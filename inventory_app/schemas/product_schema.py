from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from inventory_app.models.supplier import Supplier

# largest value an SQLite INTEGER column holds
MAX_INTEGER = 2**63 - 1


class ProductIn(BaseModel):
    name: str = Field(min_length=1)
    price: int = Field(default=0, ge=0, le=MAX_INTEGER)
    quantity: int = Field(default=0, ge=0, le=MAX_INTEGER)
    supplier: int = int(Supplier.PEARSON)
    supplier_phone: str = ""

    @field_validator("name")
    @classmethod
    def _name_not_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("name must not be blank")
        return v

    @field_validator("supplier", mode="before")
    @classmethod
    def _resolve_supplier(cls, v) -> int:
        return int(Supplier.from_selection(v))


class ProductOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)
    id: int
    name: str
    price: int
    quantity: int
    supplier: int
    supplier_phone: str

    def fields(self) -> dict:
        return self.model_dump(exclude={"id"})


class ProductUpdate(BaseModel):
    """
    Column values for a partial update. Only fields the caller set are
    written; unknown columns are rejected.
    """

    model_config = ConfigDict(extra="forbid")
    name: Optional[str] = Field(default=None, min_length=1)
    price: Optional[int] = Field(default=None, ge=0, le=MAX_INTEGER)
    quantity: Optional[int] = Field(default=None, ge=0, le=MAX_INTEGER)
    supplier: Optional[int] = None
    supplier_phone: Optional[str] = None

    @field_validator("name")
    @classmethod
    def _name_not_blank(cls, v: Optional[str]) -> Optional[str]:
        if v is not None and not v.strip():
            raise ValueError("name must not be blank")
        return v

    @field_validator("supplier", mode="before")
    @classmethod
    def _resolve_supplier(cls, v):
        if v is None:
            return v
        return int(Supplier.from_selection(v))

    @model_validator(mode="after")
    def _no_nulls(self):
        for key in self.model_fields_set:
            if getattr(self, key) is None:
                raise ValueError(f"{key} cannot be null")
        return self

    def changes(self) -> dict:
        return self.model_dump(exclude_unset=True)
