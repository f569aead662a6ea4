"""Gallery-Engine: multi-tenant artist gallery backend."""

from gallery_engine.tenancy.resolver import (
    ResolutionSource,
    TenantResolution,
    resolve_artist_id,
    resolve_tenant,
)

__all__ = [
    "ResolutionSource",
    "TenantResolution",
    "resolve_artist_id",
    "resolve_tenant",
]
__version__ = "0.1.0"
