# shop_web/main.py
import logging
from pathlib import Path
from typing import Annotated

import httpx
import uvicorn
from fastapi import APIRouter, Depends, FastAPI, Request
from fastapi.responses import RedirectResponse
from fastapi.templating import Jinja2Templates

from .client import ShopClient
from .pages import CustomersPage, DetailPage, OrdersPage, ProductsPage
from .settings import WebSettings

logger = logging.getLogger(__name__)

templates = Jinja2Templates(directory=str(Path(__file__).parent / 'templates'))


def get_client(request: Request) -> ShopClient:
    return request.app.state.client


T_Client = Annotated[ShopClient, Depends(get_client)]

router = APIRouter()


def render(request: Request, name: str, **context):
    return templates.TemplateResponse(request, name, context)


@router.get('/')
def home():
    return RedirectResponse('/products')


# --- Products ---

@router.get('/products')
async def products_page(request: Request, client: T_Client):
    page = ProductsPage(client)
    await page.load()
    return render(request, 'products.html', page=page, form={})


@router.post('/products')
async def create_product(request: Request, client: T_Client):
    form = await request.form()
    page = ProductsPage(client)
    await page.load()
    created = await page.submit(form)
    return render(request, 'products.html', page=page, form={} if created else form)


@router.post('/products/{product_id}/edit')
async def edit_product(product_id: str, request: Request, client: T_Client):
    form = await request.form()
    page = ProductsPage(client)
    await page.load()
    product = page.find(product_id)
    if product is None:
        page.error = 'Product not found'
    else:
        # The submitted edit form answers each prompt; missing fields keep the old value
        await page.edit(product, lambda field, prompt, default: form.get(field, default))
    return render(request, 'products.html', page=page, form={})


@router.post('/products/{product_id}/delete')
async def delete_product(product_id: str, request: Request, client: T_Client):
    page = ProductsPage(client)
    await page.load()
    await page.delete(product_id)
    return render(request, 'products.html', page=page, form={})


@router.get('/products/{product_id}')
async def product_detail(product_id: str, request: Request, client: T_Client):
    page = DetailPage(client, 'products', 'product')
    await page.load(product_id)
    return render(request, 'product_detail.html', page=page)


# --- Customers ---

@router.get('/customers')
async def customers_page(request: Request, client: T_Client):
    page = CustomersPage(client)
    await page.load()
    return render(request, 'customers.html', page=page, form={})


@router.post('/customers')
async def create_customer(request: Request, client: T_Client):
    form = await request.form()
    page = CustomersPage(client)
    await page.load()
    created = await page.submit(form)
    return render(request, 'customers.html', page=page, form={} if created else form)


@router.get('/customers/{customer_id}')
async def customer_detail(customer_id: str, request: Request, client: T_Client):
    page = DetailPage(client, 'customers', 'customer')
    await page.load(customer_id)
    return render(request, 'customer_detail.html', page=page)


# --- Orders ---

@router.get('/orders')
async def orders_page(request: Request, client: T_Client):
    page = OrdersPage(client)
    await page.load()
    return render(request, 'orders.html', page=page, form={})


@router.post('/orders')
async def create_order(request: Request, client: T_Client):
    form = await request.form()
    page = OrdersPage(client)
    await page.load()
    created = await page.submit(form)
    return render(request, 'orders.html', page=page, form={} if created else form)


def create_app(
    settings: WebSettings | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> FastAPI:
    settings = settings or WebSettings()
    app = FastAPI(
        title='Minimal Shop',
        description='Páginas de administração da loja.',
        version='1.0.0',
    )
    app.state.client = ShopClient(
        settings.API_BASE_URL, timeout=settings.REQUEST_TIMEOUT, transport=transport
    )
    app.include_router(router)
    return app


def run():
    settings = WebSettings()
    logging.basicConfig(level=settings.LOG_LEVEL)
    logger.info('Serving shop pages on port %s, API at %s', settings.PORT, settings.API_BASE_URL)
    uvicorn.run(create_app(settings), host='0.0.0.0', port=settings.PORT)
