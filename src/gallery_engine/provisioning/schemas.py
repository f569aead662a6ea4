"""Pydantic schemas for payment webhook payloads."""

from typing import Optional

from pydantic import BaseModel, Field


class PaymentCustomer(BaseModel):
    name: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None


class PaymentEvent(BaseModel):
    """Relevant fields of a PortOne payment notification."""

    status: str = ""
    transaction_id: str = ""
    customer: PaymentCustomer = Field(default_factory=PaymentCustomer)


class ProvisioningRequest(BaseModel):
    """Internal representation of a paid subscription to provision."""

    customer_name: str
    customer_email: str = ""
    customer_phone: str = ""
    transaction_id: str = ""


class ProvisioningResult(BaseModel):
    """Result of a provisioning operation."""

    success: bool
    status: str = "provisioned"
    artist_id: Optional[str] = None
    link_id: Optional[str] = None
    gallery_url: Optional[str] = None
    sms_sent: bool = False
    email_sent: bool = False
    error: Optional[str] = None
