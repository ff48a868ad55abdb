"""
Validation and normalization of incoming product data.

Numeric fields accept either JSON numbers or numeric strings ("9.99", " 5 ").
Booleans, empty strings, null and anything unparseable coerce to NaN and fail
the numeric rules. Numbers too large for a float count as infinite, and stock
must fit an SQLite INTEGER. Input that is not a mapping is treated as an empty
record. Text fields render booleans as "true"/"false" and integral floats
without the trailing ".0". All rule violations are collected; nothing here
raises.
"""
import math
from dataclasses import asdict, dataclass, field
from typing import Any, List, Mapping, Optional, Union

from products_api.schemas.product_schema import ProductIn

MAX_DESCRIPTION_LENGTH = 2000
# largest value an SQLite INTEGER column holds
MAX_STOCK = 2**63 - 1

NAME_REQUIRED = "name is required"
PRICE_INVALID = "price must be non-negative number"
STOCK_INVALID = "stock must be non-negative integer"
DESCRIPTION_TOO_LONG = f"opis is too long (max {MAX_DESCRIPTION_LENGTH} chars)"


@dataclass
class ProductValues:
    """Normalized product fields, ready for the repository once validation passed."""

    name: Optional[str]
    price: float
    category: str
    stock: Union[int, float]
    description: str

    def as_dict(self) -> dict:
        return asdict(self)


@dataclass
class ValidationResult:
    value: ProductValues
    errors: List[str] = field(default_factory=list)

    @property
    def valid(self) -> bool:
        return not self.errors


def coerce_number(raw: Any) -> float:
    """Explicit numeric coercion: int/float pass through, numeric strings are parsed, the rest is NaN."""
    if isinstance(raw, bool):
        return math.nan
    if isinstance(raw, (int, float)):
        try:
            return float(raw)
        except OverflowError:
            return math.inf if raw > 0 else -math.inf
    if isinstance(raw, str):
        s = raw.strip()
        if not s:
            return math.nan
        try:
            return float(s)
        except ValueError:
            return math.nan
    return math.nan


def _as_text(raw: Any) -> str:
    if raw is None:
        return ""
    if isinstance(raw, bool):
        return "true" if raw else "false"
    if isinstance(raw, float) and raw.is_integer():
        return str(int(raw))
    return str(raw).strip()


def validate_product(raw: Union[ProductIn, Mapping[str, Any]]) -> ValidationResult:
    if isinstance(raw, ProductIn):
        data = raw.model_dump()
    elif isinstance(raw, Mapping):
        data = dict(raw)
    else:
        data = {}

    errors: List[str] = []

    name = data.get("name")
    if not isinstance(name, str) or not name.strip():
        errors.append(NAME_REQUIRED)
    name = name.strip() if isinstance(name, str) else None

    price = coerce_number(data.get("price"))
    if math.isnan(price) or math.isinf(price) or price < 0:
        errors.append(PRICE_INVALID)

    raw_stock = data.get("stock")
    if raw_stock is None:
        stock = 0
    elif isinstance(raw_stock, int) and not isinstance(raw_stock, bool):
        # JSON integers stay exact so the upper bound is checked precisely
        stock = raw_stock
    else:
        stock = coerce_number(raw_stock)
        if math.isfinite(stock) and stock.is_integer():
            stock = int(stock)
    if not isinstance(stock, int) or not 0 <= stock <= MAX_STOCK:
        errors.append(STOCK_INVALID)

    raw_description = data.get("description")
    if raw_description is None:
        raw_description = data.get("opis")
    description = _as_text(raw_description)
    if len(description) > MAX_DESCRIPTION_LENGTH:
        errors.append(DESCRIPTION_TOO_LONG)

    value = ProductValues(
        name=name,
        price=price,
        category=_as_text(data.get("category")),
        stock=stock,
        description=description,
    )
    return ValidationResult(value=value, errors=errors)
