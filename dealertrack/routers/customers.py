"""
Customer routes.
"""
from fastapi import APIRouter, Depends, HTTPException, status
from typing import List, Optional

from dealertrack.database import JsonStore, get_store
from dealertrack.exceptions import NotFoundError
from dealertrack.schemas.base import DeleteResult
from dealertrack.schemas.customer import Customer as CustomerSchema, CustomerCreate, CustomerUpdate
from dealertrack.services.customer_service import CustomerService

router = APIRouter(prefix="/customers", tags=["customers"])


def get_customer_service(store: JsonStore = Depends(get_store)) -> CustomerService:
    return CustomerService(store)


@router.get("", response_model=List[CustomerSchema])
def get_customers(
    q: Optional[str] = None,
    service: CustomerService = Depends(get_customer_service),
):
    """
    Get all customers, optionally filtered by a search term.
    """
    return service.list(q)


@router.get("/{customer_id}", response_model=CustomerSchema)
def get_customer(customer_id: str, service: CustomerService = Depends(get_customer_service)):
    """
    Get a specific customer by ID.
    """
    try:
        return service.get(customer_id)
    except NotFoundError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc))


@router.post("", response_model=CustomerSchema, status_code=status.HTTP_201_CREATED)
def create_customer(
    customer: CustomerCreate,
    service: CustomerService = Depends(get_customer_service),
):
    """
    Create a new customer. An account number is generated when none is given.
    """
    return service.create(customer.to_record())


@router.put("/{customer_id}", response_model=CustomerSchema)
def update_customer(
    customer_id: str,
    customer_update: CustomerUpdate,
    service: CustomerService = Depends(get_customer_service),
):
    """
    Update a customer.
    """
    try:
        return service.update(customer_id, customer_update.to_record())
    except NotFoundError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc))


@router.delete("/{customer_id}", response_model=DeleteResult)
def delete_customer(customer_id: str, service: CustomerService = Depends(get_customer_service)):
    """
    Delete a customer.
    """
    service.delete(customer_id)
    return DeleteResult()
