# shop/services.py
import logging

from pydantic import validate_email
from pydantic_core import PydanticCustomError

from . import schemas
from .errors import AlreadyExists, InvalidCredentials
from .models import AuthUser, Customer, Order, Product
from .security import PasswordHasher, TokenSigner
from .store import CustomerStore, EntityStore

logger = logging.getLogger(__name__)


def normalize_email(email: str) -> str:
    """Normalize like EmailStr does on registration; malformed input is left as is."""
    try:
        return validate_email(email)[1]
    except PydanticCustomError:
        return email


class ProductsService:
    def __init__(self, store: EntityStore[Product]):
        self.store = store

    def create(self, product: schemas.ProductSchema) -> Product:
        db_product = self.store.create(product.model_dump())
        logger.info('Created product %s', db_product.id)
        return db_product

    def list(self) -> list[Product]:
        return self.store.find_all()

    def get_by_id(self, product_id: str) -> Product:
        return self.store.find_one(product_id)

    def update(self, product_id: str, product: schemas.ProductUpdateSchema) -> Product:
        return self.store.update(product_id, product.model_dump(exclude_unset=True))

    def delete(self, product_id: str) -> None:
        self.store.remove(product_id)
        logger.info('Deleted product %s', product_id)


class CustomersService:
    def __init__(self, store: CustomerStore, passwords: PasswordHasher):
        self.store = store
        self.passwords = passwords

    def _check_email_free(self, email: str, customer_id: str | None = None):
        existing = self.store.find_by_email(email)
        if existing and existing.id != customer_id:
            raise AlreadyExists('Email already registered')

    def create(self, customer: schemas.CustomerSchema) -> Customer:
        self._check_email_free(customer.email)
        fields = customer.model_dump(exclude={'password'})
        if customer.password is not None:
            fields['password_hash'] = self.passwords.hash(customer.password)
        db_customer = self.store.create(fields)
        logger.info('Created customer %s', db_customer.id)
        return db_customer

    def list(self) -> list[Customer]:
        return self.store.find_all()

    def get_by_id(self, customer_id: str) -> Customer:
        return self.store.find_one(customer_id)

    def update(self, customer_id: str, customer: schemas.CustomerUpdateSchema) -> Customer:
        fields = customer.model_dump(exclude_unset=True, exclude={'password'})
        if 'email' in fields:
            self._check_email_free(fields['email'], customer_id)
        if customer.password is not None:
            fields['password_hash'] = self.passwords.hash(customer.password)
        return self.store.update(customer_id, fields)

    def delete(self, customer_id: str) -> None:
        self.store.remove(customer_id)
        logger.info('Deleted customer %s', customer_id)


class OrdersService:
    # customer_id and product_ids are stored as given, without lookups
    def __init__(self, store: EntityStore[Order]):
        self.store = store

    def create(self, order: schemas.OrderSchema) -> Order:
        db_order = self.store.create(order.model_dump())
        logger.info('Created order %s for customer %s', db_order.id, db_order.customer_id)
        return db_order

    def list(self) -> list[Order]:
        return self.store.find_all()

    def get_by_id(self, order_id: str) -> Order:
        return self.store.find_one(order_id)


class AuthService:
    def __init__(
        self, customers: CustomerStore, passwords: PasswordHasher, tokens: TokenSigner
    ):
        self.customers = customers
        self.passwords = passwords
        self.tokens = tokens

    def validate_user(self, email: str, password: str) -> Customer:
        customer = self.customers.find_by_email_with_password(normalize_email(email))
        # verify() runs even for unknown emails so both failures cost the same
        password_ok = self.passwords.verify(
            password, customer.password_hash if customer else None
        )
        if customer is None or not password_ok:
            logger.info('Rejected login attempt')
            raise InvalidCredentials()
        return customer

    def login(self, email: str, password: str) -> str:
        customer = self.validate_user(email, password)
        return self.tokens.sign_user(
            AuthUser(user_id=customer.id, email=customer.email, role=customer.role)
        )

    def refresh(self, user: AuthUser) -> str:
        return self.tokens.sign_user(user)
