# shop_web/pages.py
"""View state for the admin pages.

Each page object holds what one screen shows: the records it fetched, whether
a fetch or submit is in flight, and the last error message. Successful writes
update the local list instead of fetching it again.
"""
import math
from typing import Callable, Mapping

from .client import APIError, ShopClient

# ask(field, prompt, default) -> answer, or None when the user cancels
Ask = Callable[[str, str, str], str | None]


class FormError(Exception):
    pass


def parse_number(text: str | None) -> float | None:
    try:
        number = float(text)
    except (TypeError, ValueError):
        return None
    if not math.isfinite(number):
        return None
    return number


def split_ids(text: str | None) -> list[str]:
    if not text or not text.strip():
        return []
    return [part.strip() for part in text.split(',') if part.strip()]


def require(form: Mapping[str, str], field: str, label: str) -> str:
    value = (form.get(field) or '').strip()
    if not value:
        raise FormError(f'{label} is required')
    return value


class ListPage:
    resource = ''
    singular = ''
    plural = ''

    def __init__(self, client: ShopClient):
        self.client = client
        self.items: list[dict] = []
        self.is_loading = False
        self.is_submitting = False
        self.error: str | None = None

    @property
    def render_state(self) -> str:
        if self.is_loading:
            return 'loading'
        if not self.items:
            return 'empty'
        return 'list'

    def find(self, id: str) -> dict | None:
        return next((item for item in self.items if item['id'] == id), None)

    async def load(self):
        self.is_loading = True
        self.error = None
        try:
            self.items = await self.client.fetch_all(self.resource, self.plural)
        except APIError as exc:
            self.error = exc.message
        finally:
            self.is_loading = False

    def build_body(self, form: Mapping[str, str]) -> dict:
        raise NotImplementedError

    async def submit(self, form: Mapping[str, str]) -> bool:
        self.is_submitting = True
        self.error = None
        try:
            body = self.build_body(form)
            created = await self.client.create(self.resource, body, self.singular)
        except FormError as exc:
            self.error = str(exc)
            return False
        except APIError as exc:
            self.error = exc.message
            return False
        finally:
            self.is_submitting = False

        self.items = [*self.items, created]
        return True


class ProductsPage(ListPage):
    resource = 'products'
    singular = 'product'
    plural = 'products'

    def build_body(self, form):
        name = require(form, 'name', 'Name')
        price = parse_number(form.get('price'))
        if price is None:
            raise FormError('Price must be a number')
        return {
            'name': name,
            'description': form.get('description') or None,
            'price': price,
            'imageUrl': form.get('imageUrl') or None,
        }

    async def edit(self, product: dict, ask: Ask) -> bool:
        """Ask for every field in turn, then PUT them all at once."""
        self.error = None

        name = ask('name', 'New name:', product['name'])
        if name is None or not name.strip():
            return False

        description = ask(
            'description',
            'New description (can be empty):',
            product.get('description') or '',
        )

        price_text = ask('price', 'New price:', str(product['price']))
        if price_text is None:
            return False
        price = parse_number(price_text)
        if price is None:
            self.error = 'Price must be a number'
            return False

        image_url = ask(
            'imageUrl', 'New image URL (can be empty):', product.get('imageUrl') or ''
        )

        try:
            updated = await self.client.update(
                self.resource,
                product['id'],
                {
                    'name': name,
                    'description': description or None,
                    'price': price,
                    'imageUrl': image_url or None,
                },
                self.singular,
            )
        except APIError as exc:
            self.error = exc.message
            return False

        self.items = [
            updated if item['id'] == product['id'] else item for item in self.items
        ]
        return True

    async def delete(self, product_id: str) -> bool:
        self.error = None
        try:
            await self.client.delete(self.resource, product_id, self.singular)
        except APIError as exc:
            self.error = exc.message
            return False

        self.items = [item for item in self.items if item['id'] != product_id]
        return True


class CustomersPage(ListPage):
    resource = 'customers'
    singular = 'customer'
    plural = 'customers'

    def build_body(self, form):
        body = {
            'name': require(form, 'name', 'Name'),
            'email': require(form, 'email', 'Email'),
        }
        order_ids = split_ids(form.get('orderIds'))
        if order_ids:
            body['orderIds'] = order_ids
        if form.get('password'):
            body['password'] = form.get('password')
        return body


class OrdersPage(ListPage):
    resource = 'orders'
    singular = 'order'
    plural = 'orders'

    def build_body(self, form):
        total_price = parse_number(form.get('totalPrice'))
        if total_price is None:
            raise FormError('Total price must be a number')
        return {
            'productIds': split_ids(form.get('productIds')),
            'totalPrice': total_price,
            'customerId': require(form, 'customerId', 'Customer ID'),
        }


class DetailPage:
    def __init__(self, client: ShopClient, resource: str, noun: str):
        self.client = client
        self.resource = resource
        self.noun = noun
        self.record: dict | None = None
        self.is_loading = True
        self.error: str | None = None

    @property
    def render_state(self) -> str:
        if self.is_loading:
            return 'loading'
        if self.error or self.record is None:
            return 'missing'
        return 'loaded'

    @property
    def message(self) -> str:
        return self.error or f'{self.noun.capitalize()} not found'

    async def load(self, id: str):
        self.is_loading = True
        self.error = None
        try:
            self.record = await self.client.fetch_one(self.resource, id, self.noun)
        except APIError as exc:
            self.error = exc.message
        finally:
            self.is_loading = False
