# backend/products_api/schemas/product_schema.py
from typing import Any, Optional
from pydantic import BaseModel, field_validator
from pydantic import ConfigDict

class ProductIn(BaseModel):
    """
    Raw request body for create/update. Fields are deliberately untyped;
    validate_product() does the coercion and reports what is wrong.
    """
    model_config = ConfigDict(extra="ignore")
    name: Any = None
    price: Any = None
    category: Any = None
    stock: Any = None
    description: Any = None
    # legacy key for description
    opis: Any = None

class ProductOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)
    id: int
    name: str
    price: float
    category: str = ""
    stock: int
    description: str = ""

    @field_validator("category", "description", mode="before")
    @classmethod
    def _null_as_empty(cls, v: Optional[str]) -> str:
        return "" if v is None else v
