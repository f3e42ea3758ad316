class SigningError(Exception):
    pass


class InvalidInputError(SigningError, ValueError):
    """Raised when a request cannot be signed as given."""


class HashingError(SigningError):
    """Raised when the SHA-256 or HMAC-SHA256 primitive fails."""
