"""ProvisioningService: turns paid subscriptions into VIP galleries."""

import logging
import secrets
from typing import Optional

from gallery_engine.artists.service import ArtistService, gallery_url
from gallery_engine.common.config import GallerySettings
from gallery_engine.common.database import DatabaseManager
from gallery_engine.provisioning.email_delivery import EmailSender
from gallery_engine.provisioning.schemas import ProvisioningRequest, ProvisioningResult
from gallery_engine.verification.sms import SmsSender

logger = logging.getLogger(__name__)


def generate_temp_password() -> str:
    """Six random digits, easy to type on a phone keypad."""
    return f"{secrets.randbelow(10**6):06d}"


class ProvisioningService:
    """Creates the artist and delivers login info after a payment."""

    def __init__(
        self,
        settings: GallerySettings,
        artist_service: ArtistService,
        sms_sender: Optional[SmsSender] = None,
        email_sender: Optional[EmailSender] = None,
    ):
        self.settings = settings
        self.artists = artist_service
        self.sms_sender = sms_sender
        self.email_sender = email_sender

    async def provision(
        self,
        db: DatabaseManager,
        request: ProvisioningRequest,
    ) -> ProvisioningResult:
        """Create a paid VIP artist and notify the customer.

        Login info is sent only after the artist row is committed. Database
        errors propagate; notification failures are logged and reported in
        the result.
        """
        temp_password = generate_temp_password()
        async with db.get_session() as session:
            artist = await self.artists.create_vip_artist(
                session,
                name=request.customer_name,
                password=temp_password,
                is_free=False,
                subscription_price=self.settings.vip_subscription_price,
                temporary=True,
            )
        url = gallery_url(self.settings.site_url, artist.link_id)

        sms_sent = False
        if self.sms_sender and request.customer_phone:
            try:
                sms_sent = await self.sms_sender.send_login_info(
                    request.customer_phone, request.customer_name, url, temp_password
                )
            except Exception:
                logger.exception("Failed to send login info SMS")

        email_sent = False
        if self.email_sender and request.customer_email:
            try:
                email_sent = await self.email_sender.send_login_info(
                    to_email=request.customer_email,
                    artist_name=request.customer_name,
                    gallery_url=url,
                    temp_password=temp_password,
                )
            except Exception:
                logger.exception("Failed to send login info email")

        logger.info(
            "Provisioned VIP gallery",
            extra={
                "artist_id": artist.id,
                "link_id": artist.link_id,
                "transaction_id": request.transaction_id,
            },
        )

        return ProvisioningResult(
            success=True,
            artist_id=artist.id,
            link_id=artist.link_id,
            gallery_url=url,
            sms_sent=sms_sent,
            email_sent=email_sent,
        )
