# shop/schemas.py
from typing import Literal

from pydantic import BaseModel, ConfigDict, EmailStr, Field, field_validator
from pydantic.alias_generators import to_camel

from .security import MAX_PASSWORD_BYTES


def check_password_length(value: str | None) -> str | None:
    if value is not None and len(value.encode('utf-8')) > MAX_PASSWORD_BYTES:
        raise ValueError(f'must be at most {MAX_PASSWORD_BYTES} bytes')
    return value


class CamelModel(BaseModel):
    # camelCase on the wire, snake_case accepted too
    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, from_attributes=True
    )


class ProductSchema(CamelModel):
    name: str = Field(..., min_length=1)
    description: str | None = None
    price: float = Field(..., ge=0)
    image_url: str | None = None


class ProductUpdateSchema(CamelModel):
    name: str | None = Field(None, min_length=1)
    description: str | None = None
    price: float | None = Field(None, ge=0)
    image_url: str | None = None

    @field_validator('name', 'price')
    @classmethod
    def reject_null(cls, value):
        if value is None:
            raise ValueError('may be omitted but not null')
        return value


class ProductPublic(CamelModel):
    id: str
    name: str
    description: str | None
    price: float
    image_url: str | None


class CustomerSchema(CamelModel):
    name: str = Field(..., min_length=1)
    email: EmailStr
    order_ids: list[str] | None = None
    password: str | None = Field(None, min_length=1)
    role: Literal['user', 'admin'] = 'user'

    @field_validator('password')
    @classmethod
    def password_fits_bcrypt(cls, value):
        return check_password_length(value)


class CustomerUpdateSchema(CamelModel):
    name: str | None = Field(None, min_length=1)
    email: EmailStr | None = None
    order_ids: list[str] | None = None
    password: str | None = Field(None, min_length=1)
    role: Literal['user', 'admin'] | None = None

    @field_validator('name', 'email', 'password', 'role')
    @classmethod
    def reject_null(cls, value):
        if value is None:
            raise ValueError('may be omitted but not null')
        return value

    @field_validator('password')
    @classmethod
    def password_fits_bcrypt(cls, value):
        return check_password_length(value)


class CustomerPublic(CamelModel):
    id: str
    name: str
    email: str
    order_ids: list[str] | None
    role: str


class OrderSchema(CamelModel):
    product_ids: list[str]
    total_price: float = Field(..., ge=0)
    customer_id: str = Field(..., min_length=1)


class OrderPublic(CamelModel):
    id: str
    product_ids: list[str]
    total_price: float
    customer_id: str


class LoginSchema(BaseModel):
    email: str
    password: str


class Token(BaseModel):
    access_token: str
    token_type: str


class AuthUserPublic(CamelModel):
    user_id: str
    email: str
    role: str


class Message(BaseModel):
    message: str
