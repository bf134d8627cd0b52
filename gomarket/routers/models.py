"""
Cart API Pydantic Models
"""
from typing import Annotated, List, Union
from pydantic import BaseModel, Field, StrictInt

from gomarket.cart import LineItem, ProductInput

# Integer prices stay integers. Non-finite floats are rejected.
PriceField = Union[
    Annotated[StrictInt, Field(ge=0)],
    Annotated[float, Field(ge=0, allow_inf_nan=False)],
]


class AddToCartRequest(BaseModel):
    id: str = Field(min_length=1)
    title: str
    image_url: str
    price: PriceField

    def to_product(self) -> ProductInput:
        return ProductInput(
            id=self.id,
            title=self.title,
            image_url=self.image_url,
            price=self.price,
        )


class LineItemResponse(BaseModel):
    id: str
    title: str
    image_url: str
    price: Union[StrictInt, float]
    quantity: int


class CartResponse(BaseModel):
    products: List[LineItemResponse]
    count: int

    @classmethod
    def from_items(cls, items: List[LineItem]) -> "CartResponse":
        return cls(
            products=[LineItemResponse(**item.to_dict()) for item in items],
            count=len(items),
        )
