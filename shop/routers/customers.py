# shop/routers/customers.py
from http import HTTPStatus
from typing import Annotated

from fastapi import APIRouter, Depends, Request

from .. import schemas
from ..services import CustomersService


def get_customers_service(request: Request) -> CustomersService:
    return request.app.state.customers


T_Customers = Annotated[CustomersService, Depends(get_customers_service)]

router = APIRouter(prefix='/customers', tags=['customers'])


@router.post(
    '', status_code=HTTPStatus.CREATED, response_model=schemas.CustomerPublic
)
def create_customer(customer: schemas.CustomerSchema, customers: T_Customers):
    """Registers a customer; the password, if given, is stored hashed."""
    return customers.create(customer)


@router.get('', response_model=list[schemas.CustomerPublic])
def read_customers(customers: T_Customers):
    return customers.list()


@router.get('/{customer_id}', response_model=schemas.CustomerPublic)
def get_customer_by_id(customer_id: str, customers: T_Customers):
    return customers.get_by_id(customer_id)


@router.put('/{customer_id}', response_model=schemas.CustomerPublic)
def update_customer(
        customer_id: str,
        customer: schemas.CustomerUpdateSchema,
        customers: T_Customers,
):
    return customers.update(customer_id, customer)


@router.delete('/{customer_id}', status_code=HTTPStatus.NO_CONTENT)
def delete_customer(customer_id: str, customers: T_Customers):
    customers.delete(customer_id)
    return None
