# shop/routers/products.py
from http import HTTPStatus
from typing import Annotated

from fastapi import APIRouter, Depends, Request

from .. import schemas
from ..services import ProductsService


def get_products_service(request: Request) -> ProductsService:
    return request.app.state.products


T_Products = Annotated[ProductsService, Depends(get_products_service)]

router = APIRouter(prefix='/products', tags=['products'])


@router.post(
    '', status_code=HTTPStatus.CREATED, response_model=schemas.ProductPublic
)
def create_product(product: schemas.ProductSchema, products: T_Products):
    return products.create(product)


@router.get('', response_model=list[schemas.ProductPublic])
def read_products(products: T_Products):
    return products.list()


@router.get('/{product_id}', response_model=schemas.ProductPublic)
def get_product_by_id(product_id: str, products: T_Products):
    return products.get_by_id(product_id)


@router.put('/{product_id}', response_model=schemas.ProductPublic)
def update_product(
        product_id: str,
        product: schemas.ProductUpdateSchema,
        products: T_Products,
):
    return products.update(product_id, product)


@router.delete('/{product_id}', status_code=HTTPStatus.NO_CONTENT)
def delete_product(product_id: str, products: T_Products):
    products.delete(product_id)
    return None
