# shop/models.py
from dataclasses import dataclass, field
from typing import Literal

Role = Literal['user', 'admin']


@dataclass
class Product:
    id: str
    name: str
    price: float
    description: str | None = None
    image_url: str | None = None


@dataclass
class Customer:
    id: str
    name: str
    email: str
    order_ids: list[str] | None = None
    role: Role = 'user'
    # Only loaded by CustomerStore.find_by_email_with_password
    password_hash: str | None = field(default=None, repr=False)


@dataclass
class Order:
    id: str
    product_ids: list[str]
    total_price: float
    customer_id: str


@dataclass
class AuthUser:
    """Identity decoded from a bearer token, valid for one request."""

    user_id: str
    email: str
    role: Role
