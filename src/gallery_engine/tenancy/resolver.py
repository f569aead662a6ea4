"""Host -> artist id resolution.

Every tenant-scoped read and write is keyed by the artist id produced here.
Resolution order, first match wins:

1. explicit override (``vipId`` query parameter, path segment, argument)
2. exact match of the normalized host
3. exact match of the host with its port stripped
4. keyword fragment contained in the host
5. the default artist id

The function is total: unknown or malformed hosts resolve to the default
tenant so a misconfigured domain shows the default gallery instead of an
error page.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Mapping, Optional

from gallery_engine.common.config import (
    DEFAULT_ARTIST_ID,
    DEFAULT_HOST_KEYWORDS,
    DEFAULT_HOST_MAP,
)

logger = logging.getLogger(__name__)

# Client pages pass these through literally when no id is available.
_EMPTY_OVERRIDES = {"", "undefined", "null"}


class ResolutionSource(str, Enum):
    """Which branch produced the artist id."""

    OVERRIDE = "override"
    HOST = "host"
    HOST_NO_PORT = "host_no_port"
    KEYWORD = "keyword"
    DEFAULT = "default"


@dataclass(frozen=True)
class TenantResolution:
    artist_id: str
    source: ResolutionSource


def normalize_host(host: Optional[str]) -> str:
    """Lower-case, trim and drop a trailing dot (``example.com.``)."""
    if not host:
        return ""
    return host.strip().lower().rstrip(".")


def strip_port(host: str) -> str:
    """Remove a ``:port`` suffix, leaving bracketed IPv6 literals intact."""
    if host.startswith("["):
        end = host.find("]")
        return host[: end + 1] if end != -1 else host
    if host.count(":") == 1:
        return host.split(":", 1)[0]
    return host


def resolve_tenant(
    host: Optional[str],
    override: Optional[str] = None,
    *,
    host_map: Optional[Mapping[str, str]] = None,
    keywords: Optional[Iterable[tuple[str, str]]] = None,
    default: Optional[str] = None,
) -> TenantResolution:
    """Resolve ``host``/``override`` to an artist id and report the branch taken."""
    if host_map is None:
        host_map = {**DEFAULT_HOST_MAP, "localhost": DEFAULT_ARTIST_ID}
    if keywords is None:
        keywords = DEFAULT_HOST_KEYWORDS
    default = default or DEFAULT_ARTIST_ID

    if override is not None:
        candidate = override.strip()
        if candidate.lower() not in _EMPTY_OVERRIDES:
            return TenantResolution(candidate, ResolutionSource.OVERRIDE)

    normalized = normalize_host(host)
    if normalized:
        artist_id = host_map.get(normalized)
        if artist_id:
            return TenantResolution(artist_id, ResolutionSource.HOST)

        bare = strip_port(normalized)
        if bare != normalized:
            artist_id = host_map.get(bare)
            if artist_id:
                return TenantResolution(artist_id, ResolutionSource.HOST_NO_PORT)

        for fragment, artist_id in keywords:
            if fragment and artist_id and fragment in normalized:
                return TenantResolution(artist_id, ResolutionSource.KEYWORD)

    logger.debug("No tenant match for host %r, using default %s", host, default)
    return TenantResolution(default, ResolutionSource.DEFAULT)


def resolve_artist_id(
    host: Optional[str],
    override: Optional[str] = None,
    *,
    host_map: Optional[Mapping[str, str]] = None,
    keywords: Optional[Iterable[tuple[str, str]]] = None,
    default: Optional[str] = None,
) -> str:
    """Return the artist id for a request. Never raises, never empty."""
    return resolve_tenant(
        host, override, host_map=host_map, keywords=keywords, default=default
    ).artist_id


def resolver_from_settings(settings=None):
    """Bind the configured tables; returns ``f(host, override) -> TenantResolution``."""
    if settings is None:
        from gallery_engine.common.config import get_settings
        settings = get_settings()

    host_map = settings.host_map
    keywords = settings.host_keywords
    default = settings.default_artist_id

    def _resolve(host: Optional[str], override: Optional[str] = None) -> TenantResolution:
        return resolve_tenant(
            host, override, host_map=host_map, keywords=keywords, default=default
        )

    return _resolve
