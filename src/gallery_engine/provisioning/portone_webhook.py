"""PortOne payment webhook handler."""

import hashlib
import hmac
import logging
from typing import Any, Optional

from pydantic import ValidationError

from gallery_engine.provisioning.schemas import PaymentEvent, ProvisioningRequest

logger = logging.getLogger(__name__)

PAID_STATUS = "paid"
ANONYMOUS_CUSTOMER = "익명"


def verify_portone_signature(
    payload: bytes,
    signature_header: str,
    webhook_secret: str,
) -> bool:
    """Verify a PortOne webhook HMAC-SHA256 hex signature."""
    if not signature_header or not webhook_secret:
        return False

    computed = hmac.new(
        webhook_secret.encode(),
        payload,
        hashlib.sha256,
    ).hexdigest()

    return hmac.compare_digest(computed, signature_header.strip())


def parse_portone_event(event_data: dict[str, Any]) -> Optional[ProvisioningRequest]:
    """Extract a provisioning request from a completed payment.

    Returns None for any status other than ``paid``.
    """
    try:
        event = PaymentEvent.model_validate(event_data)
    except ValidationError:
        logger.warning("Malformed PortOne payload")
        return None

    if event.status != PAID_STATUS:
        logger.info("Ignoring PortOne payment status: %s", event.status)
        return None

    return ProvisioningRequest(
        customer_name=event.customer.name or ANONYMOUS_CUSTOMER,
        customer_email=event.customer.email or "",
        customer_phone=event.customer.phone or "",
        transaction_id=event.transaction_id,
    )
