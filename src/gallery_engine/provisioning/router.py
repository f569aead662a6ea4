"""Payment webhook endpoint for PortOne."""

import json
import logging

from fastapi import APIRouter, Header, HTTPException, Request

from gallery_engine.common.config import get_settings
from gallery_engine.provisioning.portone_webhook import (
    parse_portone_event,
    verify_portone_signature,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/payment", tags=["provisioning"])


def _get_service():
    from gallery_engine.deps import get_provisioning_service
    return get_provisioning_service()


def _get_db():
    from gallery_engine.deps import get_db
    return get_db()


@router.get("/webhook")
async def describe_webhook():
    return {"message": "결제 웹훅 엔드포인트", "method": "POST only"}


@router.post("/webhook")
async def portone_webhook(
    request: Request,
    portone_signature: str = Header("", alias="x-portone-signature"),
):
    """Handle a PortOne payment notification."""
    body = await request.body()

    if not portone_signature:
        logger.warning("PortOne webhook without signature")
        raise HTTPException(status_code=401, detail="Missing signature")

    secret = get_settings().portone_webhook_secret
    if secret and not verify_portone_signature(body, portone_signature, secret):
        logger.warning("Invalid PortOne webhook signature")
        raise HTTPException(status_code=401, detail="Invalid signature")

    try:
        event_data = json.loads(body)
    except json.JSONDecodeError:
        raise HTTPException(status_code=400, detail="Invalid JSON")
    if not isinstance(event_data, dict):
        raise HTTPException(status_code=400, detail="Invalid payload")

    prov_request = parse_portone_event(event_data)
    if prov_request is None:
        return {"status": "ignored"}

    svc = _get_service()
    result = await svc.provision(_get_db(), prov_request)

    return result.model_dump(exclude_none=True)
