# shop/routers/orders.py
from http import HTTPStatus
from typing import Annotated

from fastapi import APIRouter, Depends, Request

from .. import schemas
from ..services import OrdersService


def get_orders_service(request: Request) -> OrdersService:
    return request.app.state.orders


T_Orders = Annotated[OrdersService, Depends(get_orders_service)]

router = APIRouter(prefix='/orders', tags=['orders'])


@router.post(
    '', status_code=HTTPStatus.CREATED, response_model=schemas.OrderPublic
)
def create_order(order: schemas.OrderSchema, orders: T_Orders):
    return orders.create(order)


@router.get('', response_model=list[schemas.OrderPublic])
def read_orders(orders: T_Orders):
    return orders.list()


@router.get('/{order_id}', response_model=schemas.OrderPublic)
def get_order_by_id(order_id: str, orders: T_Orders):
    return orders.get_by_id(order_id)
