"""
Pydantic models for menu data.

``MenuItemCreate`` and ``MenuItemUpdate`` describe request bodies.  Both
are strict: a string price or a numeric name is rejected rather than
coerced, and every violated rule is reported in one
``ValidationError``.  ``MenuItemUpdate`` has no minimum lengths for
``name`` and ``description`` and refuses unknown keys.  ``MenuItem`` is
what the catalog stores and the API returns.
"""

from typing import Annotated, Any, List, Literal, Optional

from pydantic import BaseModel, BeforeValidator, Field, field_validator


# Allowed values for ``MenuItem.category``, in display order.
MENU_CATEGORIES = ("appetizer", "entree", "dessert", "beverage")

Category = Literal["appetizer", "entree", "dessert", "beverage"]


def _float_sized(value: Any) -> Any:
    # JSON integers can exceed the float range; float() would overflow.
    if isinstance(value, int) and not isinstance(value, bool):
        try:
            float(value)
        except OverflowError:
            raise ValueError("price is out of range")
    return value


Price = Annotated[float, BeforeValidator(_float_sized), Field(gt=0, allow_inf_nan=False)]


class MenuItemCreate(BaseModel):
    """Schema for creating a menu item.  ``id`` is assigned by the catalog."""

    name: str = Field(..., min_length=3, examples=["Taco"])
    description: str = Field(..., min_length=10, examples=["Spicy beef taco"])
    price: Price = Field(..., examples=[5.5])
    category: Category = Field(..., examples=["entree"])
    ingredients: List[str] = Field(..., min_length=1, examples=[["beef", "tortilla"]])
    available: bool = True

    model_config = {
        "strict": True,
    }


class MenuItemUpdate(BaseModel):
    """Schema for updating a menu item.

    All fields are optional; only provided values will be updated.  An
    explicit ``null`` is rejected.
    """

    name: Optional[str] = None
    description: Optional[str] = None
    price: Optional[Price] = None
    category: Optional[Category] = None
    ingredients: Optional[List[str]] = None
    available: Optional[bool] = None

    model_config = {
        "strict": True,
        "extra": "forbid",
    }

    @field_validator("name", "description", "price", "category", "ingredients", "available")
    @classmethod
    def reject_null(cls, v):
        if v is None:
            raise ValueError("must not be null")
        return v


class MenuItem(BaseModel):
    """A menu entry as stored by the catalog and returned by the API."""

    id: int = Field(..., examples=[1])
    name: str = Field(..., examples=["Classic Burger"])
    description: str = Field("", examples=["Beef patty with lettuce, tomato, and cheese"])
    price: float = Field(..., examples=[12.99])
    category: str = Field("", examples=["entree"])
    ingredients: List[str] = Field(default_factory=list, examples=[["beef", "bun"]])
    available: bool = Field(True, examples=[True])


class FieldError(BaseModel):
    """A single violated validation rule."""

    field: str
    message: str


class ValidationErrorResponse(BaseModel):
    """Body returned when a payload is rejected."""

    errors: List[FieldError]


class NotFoundResponse(BaseModel):
    error: str = "item not found"


class DeleteResponse(BaseModel):
    """Body returned after a successful deletion."""

    message: str = "Menu Item Removed"
    item: MenuItem
