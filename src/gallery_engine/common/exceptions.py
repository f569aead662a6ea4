"""Gallery-Engine exception hierarchy."""


class GalleryError(Exception):
    """Base exception for all gallery errors."""

    def __init__(self, message: str = "", code: str = "GALLERY_ERROR"):
        self.message = message
        self.code = code
        super().__init__(message)


class TenantRequiredError(GalleryError):
    """Raised when a tenant-scoped operation is called without an artist id."""

    def __init__(self, message: str = "An explicit artist id is required"):
        super().__init__(message, code="TENANT_REQUIRED")


class ArtworkNotFoundError(GalleryError):
    """Raised when an artwork does not exist for the given tenant."""

    def __init__(self, message: str = "Artwork not found"):
        super().__init__(message, code="NOT_FOUND")


class ArtistNotFoundError(GalleryError):
    """Raised when an artist (tenant) cannot be found."""

    def __init__(self, message: str = "Artist not found"):
        super().__init__(message, code="NOT_FOUND")


class DuplicatePickError(GalleryError):
    """Raised when a recommended artist is already in the picks list."""

    def __init__(self, message: str = "Artist already recommended"):
        super().__init__(message, code="DUPLICATE_PICK")


class InspirationNotFoundError(GalleryError):
    """Raised when an inspiration does not exist for the given tenant."""

    def __init__(self, message: str = "Inspiration not found"):
        super().__init__(message, code="NOT_FOUND")


class DuplicateInspirationError(GalleryError):
    """Raised when a client-chosen inspiration id is already taken."""

    def __init__(self, message: str = "Inspiration id already exists"):
        super().__init__(message, code="DUPLICATE_INSPIRATION")


class InvalidCredentialsError(GalleryError):
    """Raised when an admin password does not match."""

    def __init__(self, message: str = "Invalid password"):
        super().__init__(message, code="INVALID_CREDENTIALS")


class WeakPasswordError(GalleryError):
    """Raised when a new password fails the minimum length rule."""

    def __init__(self, message: str = "Password is too short"):
        super().__init__(message, code="WEAK_PASSWORD")


class VerificationError(GalleryError):
    """Raised when an SMS verification code check fails.

    ``code`` is one of NOT_REQUESTED, EXPIRED or MISMATCH.
    """

    def __init__(self, message: str, code: str):
        super().__init__(message, code=code)
