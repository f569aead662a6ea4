"""Guards for tenant-scoped data access."""

from gallery_engine.common.exceptions import TenantRequiredError

_BLANK_IDS = ("undefined", "null")


def require_artist_id(artist_id: str | None) -> str:
    """Reject blank tenant ids instead of falling back to a global default."""
    if artist_id is None or not artist_id.strip() or artist_id in _BLANK_IDS:
        raise TenantRequiredError()
    return artist_id
