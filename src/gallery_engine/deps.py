"""Dependency injection singletons for Gallery-Engine."""

from gallery_engine.artists.service import ArtistService
from gallery_engine.artworks.service import ArtworkService
from gallery_engine.auth.service import AuthService
from gallery_engine.common.config import get_settings
from gallery_engine.common.database import DatabaseManager
from gallery_engine.encouragements.service import EncouragementService
from gallery_engine.inspirations.service import InspirationService
from gallery_engine.provisioning.email_delivery import EmailSender
from gallery_engine.provisioning.service import ProvisioningService
from gallery_engine.site_settings.service import SiteSettingsService
from gallery_engine.verification.service import VerificationService
from gallery_engine.verification.sms import SmsSender
from gallery_engine.visitors.service import VisitorService

_db: DatabaseManager | None = None
_artworks: ArtworkService | None = None
_site_settings: SiteSettingsService | None = None
_auth: AuthService | None = None
_artists: ArtistService | None = None
_verification: VerificationService | None = None
_sms: SmsSender | None = None
_email: EmailSender | None = None
_encouragements: EncouragementService | None = None
_inspirations: InspirationService | None = None
_visitors: VisitorService | None = None
_provisioning: ProvisioningService | None = None


def get_db() -> DatabaseManager:
    global _db
    if _db is None:
        _db = DatabaseManager(get_settings())
    return _db


def get_artwork_service() -> ArtworkService:
    global _artworks
    if _artworks is None:
        _artworks = ArtworkService()
    return _artworks


def get_site_settings_service() -> SiteSettingsService:
    global _site_settings
    if _site_settings is None:
        _site_settings = SiteSettingsService()
    return _site_settings


def get_auth_service() -> AuthService:
    global _auth
    if _auth is None:
        _auth = AuthService(get_settings())
    return _auth


def get_artist_service() -> ArtistService:
    global _artists
    if _artists is None:
        _artists = ArtistService(
            get_auth_service(), get_artwork_service(), get_inspiration_service()
        )
    return _artists


def get_verification_service() -> VerificationService:
    global _verification
    if _verification is None:
        _verification = VerificationService(get_settings())
    return _verification


def get_sms_sender() -> SmsSender:
    global _sms
    if _sms is None:
        settings = get_settings()
        _sms = SmsSender(
            api_key=settings.aligo_api_key,
            user_id=settings.aligo_user_id,
            sender=settings.aligo_sender,
        )
    return _sms


def get_email_sender() -> EmailSender:
    global _email
    if _email is None:
        settings = get_settings()
        _email = EmailSender(
            provider=settings.email_provider,
            api_key=settings.email_api_key,
            from_email=settings.email_from,
        )
    return _email


def get_encouragement_service() -> EncouragementService:
    global _encouragements
    if _encouragements is None:
        _encouragements = EncouragementService(
            get_site_settings_service(), get_artwork_service()
        )
    return _encouragements


def get_inspiration_service() -> InspirationService:
    global _inspirations
    if _inspirations is None:
        _inspirations = InspirationService()
    return _inspirations


def get_visitor_service() -> VisitorService:
    global _visitors
    if _visitors is None:
        _visitors = VisitorService()
    return _visitors


def get_provisioning_service() -> ProvisioningService:
    global _provisioning
    if _provisioning is None:
        _provisioning = ProvisioningService(
            get_settings(),
            get_artist_service(),
            sms_sender=get_sms_sender(),
            email_sender=get_email_sender(),
        )
    return _provisioning


def reset_singletons() -> None:
    """Reset all singletons (for testing)."""
    global _db, _artworks, _site_settings, _auth, _artists, _verification
    global _sms, _email, _encouragements, _inspirations, _visitors, _provisioning
    _db = None
    _artworks = None
    _site_settings = None
    _auth = None
    _artists = None
    _verification = None
    _sms = None
    _email = None
    _encouragements = None
    _inspirations = None
    _visitors = None
    _provisioning = None
