"""Gallery-Engine configuration via pydantic-settings."""

import json
import warnings
from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict

_INSECURE_DEFAULTS = {
    "secret_key": "insecure-dev-key-change-me",
    "api_key": "insecure-platform-key-change-me",
    "default_admin_password": "admin1234",
}

DEFAULT_ARTIST_ID = "-vqsk"

# Exact host -> tenant table. "localhost" is filled in from local_artist_id.
DEFAULT_HOST_MAP: dict[str, str] = {
    "grim-sil.vercel.app": "-vqsk",
    "grim-sil.com": "-vqsk",
    "www.grim-sil.com": "-vqsk",
    "hahyunju-gallery.vercel.app": "vip-gallery-01",
    "hahyunju.com": "vip-gallery-01",
    "www.hahyunju.com": "vip-gallery-01",
    "hwangmikyung-gallery.vercel.app": "-5e4p",
}

# Ordered: first fragment found in the host wins.
DEFAULT_HOST_KEYWORDS: list[tuple[str, str]] = [
    ("hahyunju", "vip-gallery-01"),
    ("artflow", "vip-gallery-01"),
    ("moonhyekyung", "-3ibp"),
    ("hwangmikyung", "-5e4p"),
    ("grim-sil", "-vqsk"),
]


def _parse_json_env(name: str, raw: str):
    try:
        return json.loads(raw)
    except (json.JSONDecodeError, TypeError) as exc:
        raise ValueError(f"GALLERY_{name.upper()} must be valid JSON, got: {raw!r}") from exc


class GallerySettings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="GALLERY_")

    environment: str = "development"
    secret_key: str = "insecure-dev-key-change-me"
    log_level: str = "INFO"

    # Database
    db_url: str = "sqlite+aiosqlite:///./data/gallery.db"
    db_echo: bool = False
    db_busy_timeout: float = 15.0  # seconds SQLite waits on a locked database

    # API
    api_title: str = "Gallery-Engine"
    api_version: str = "0.1.0"
    api_key: str = "insecure-platform-key-change-me"
    host: str = "0.0.0.0"
    port: int = 8080
    api_prefix: str = ""
    cors_origins: list[str] = ["http://localhost:3000", "http://localhost:8000"]
    site_url: str = "https://grim-sil.vercel.app"

    # Tenant resolution
    default_artist_id: str = DEFAULT_ARTIST_ID
    local_artist_id: str = ""
    # JSON object merged over DEFAULT_HOST_MAP, e.g. '{"my.domain": "-abcd"}'
    host_map_overrides: str = ""
    # JSON list of [fragment, artist_id] pairs checked before the defaults
    host_keyword_overrides: str = ""

    # Admin sessions
    default_admin_password: str = "admin1234"
    session_max_age: int = 8 * 3600  # seconds
    min_password_length: int = 4

    # VIP provisioning
    vip_subscription_price: int = 29000
    portone_webhook_secret: str = ""

    # SMS verification
    verification_ttl: int = 300  # seconds
    aligo_api_key: str = ""
    aligo_user_id: str = ""
    aligo_sender: str = ""

    # Login-info e-mail
    email_provider: str = ""
    email_api_key: str = ""
    email_from: str = "gallery@grim-sil.com"

    @property
    def host_map(self) -> dict[str, str]:
        """Return the exact host table including the localhost entry."""
        table = dict(DEFAULT_HOST_MAP)
        table["localhost"] = self.local_artist_id or self.default_artist_id
        if self.host_map_overrides:
            raw = _parse_json_env("host_map_overrides", self.host_map_overrides)
            table.update({str(k).lower(): str(v) for k, v in raw.items()})
        return table

    @property
    def host_keywords(self) -> list[tuple[str, str]]:
        """Return the ordered keyword table, configured entries first."""
        keywords: list[tuple[str, str]] = []
        if self.host_keyword_overrides:
            raw = _parse_json_env("host_keyword_overrides", self.host_keyword_overrides)
            keywords.extend(
                (str(frag).lower(), str(artist))
                for frag, artist in raw
                if str(frag).strip() and str(artist).strip()
            )
        keywords.extend(DEFAULT_HOST_KEYWORDS)
        return keywords

    @property
    def sms_configured(self) -> bool:
        return bool(self.aligo_api_key and self.aligo_user_id and self.aligo_sender)

    def validate_for_production(self) -> None:
        """Raise if insecure defaults are used in non-development environments."""
        insecure_fields = [
            field
            for field, default in _INSECURE_DEFAULTS.items()
            if getattr(self, field) == default
        ]

        if self.environment != "development" and insecure_fields:
            env_vars = ", ".join(f"GALLERY_{f.upper()}" for f in insecure_fields)
            raise RuntimeError(
                f"Insecure default values detected in '{self.environment}' environment. "
                f"Set these environment variables to secure values: {env_vars}. "
                "Generate secrets with: python -c \"import secrets; print(secrets.token_urlsafe(48))\""
            )

        if insecure_fields:
            warnings.warn(
                "Using insecure defaults - set GALLERY_SECRET_KEY, GALLERY_API_KEY, "
                "GALLERY_DEFAULT_ADMIN_PASSWORD for production",
                UserWarning,
                stacklevel=2,
            )


@lru_cache
def get_settings() -> GallerySettings:
    settings = GallerySettings()
    settings.validate_for_production()
    return settings
