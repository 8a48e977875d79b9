# shop/main.py
import logging
from http import HTTPStatus

import uvicorn
from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from . import DB, tables
from .errors import ShopError
from .models import Order, Product
from .routers import auth, customers, orders, products
from .security import PasswordHasher, TokenSigner
from .services import AuthService, CustomersService, OrdersService, ProductsService
from .settings import Settings
from .store import CustomerStore, EntityStore

logger = logging.getLogger(__name__)


def create_app(settings: Settings | None = None) -> FastAPI:
    settings = settings or Settings()

    engine = DB.create_db_engine(settings.database_url)
    sessions = DB.session_factory(engine)
    passwords = PasswordHasher(rounds=settings.BCRYPT_ROUNDS)
    tokens = TokenSigner(
        settings.SECRET_KEY,
        algorithm=settings.ALGORITHM,
        expire_minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES,
    )
    customer_store = CustomerStore(sessions)

    app = FastAPI(
        title='Minimal Shop API',
        description='API para gerenciar produtos, clientes e pedidos.',
        version='1.0.0',
    )
    app.state.settings = settings
    app.state.engine = engine
    app.state.tokens = tokens
    app.state.products = ProductsService(
        EntityStore(sessions, tables.products, Product, 'Product')
    )
    app.state.customers = CustomersService(customer_store, passwords)
    app.state.orders = OrdersService(
        EntityStore(sessions, tables.orders, Order, 'Order')
    )
    app.state.auth = AuthService(customer_store, passwords, tokens)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=[settings.FRONTEND_ORIGIN],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.exception_handler(ShopError)
    async def shop_error_handler(request: Request, exc: ShopError):
        return JSONResponse(
            status_code=exc.status_code,
            content={'detail': exc.detail},
            headers=exc.headers,
        )

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError):
        return JSONResponse(
            status_code=HTTPStatus.BAD_REQUEST,
            content={'detail': jsonable_encoder(exc.errors())},
        )

    app.include_router(products.router)
    app.include_router(customers.router)
    app.include_router(orders.router)
    app.include_router(auth.router)

    @app.get("/")
    def read_root():
        return {"message": "Bem-vindo à API da loja"}

    return app


def run():
    settings = Settings()
    logging.basicConfig(level=settings.LOG_LEVEL)
    logger.info('Serving shop API on port %s', settings.PORT)
    uvicorn.run(create_app(settings), host='0.0.0.0', port=settings.PORT)
