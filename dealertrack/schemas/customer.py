"""
Pydantic schemas for Customer.
"""
from pydantic import EmailStr, field_validator
from typing import Optional

from dealertrack.schemas.base import Amount, CamelModel


class CustomerUpdate(CamelModel):
    """Schema for updating a customer. Only supplied fields are merged."""
    account_number: Optional[str] = None
    type: Optional[str] = None
    name: Optional[str] = None
    company: Optional[str] = None
    email: Optional[EmailStr] = None
    phone: Optional[str] = None
    address: Optional[str] = None
    city: Optional[str] = None
    state: Optional[str] = None
    zip: Optional[str] = None
    tax_exempt: Optional[bool] = None
    credit_limit: Optional[Amount] = None
    notes: Optional[str] = None

    @field_validator("email", mode="before")
    @classmethod
    def blank_email_is_none(cls, value):
        if isinstance(value, str) and not value.strip():
            return None
        return value


class CustomerCreate(CustomerUpdate):
    """Schema for creating a customer."""
    tax_exempt: bool = False
    credit_limit: Amount = 0.0


class Customer(CamelModel):
    """Schema for customer responses.

    Stored records are returned as written, so the email is not
    re-validated here.
    """
    id: str
    account_number: Optional[str] = None
    type: Optional[str] = None
    name: Optional[str] = None
    company: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    address: Optional[str] = None
    city: Optional[str] = None
    state: Optional[str] = None
    zip: Optional[str] = None
    tax_exempt: Optional[bool] = None
    credit_limit: Optional[float] = None
    balance: Optional[float] = None
    notes: Optional[str] = None
    created_at: Optional[str] = None
    updated_at: Optional[str] = None
