"""Security: caller authentication. No FastAPI."""

from book_archive.security.identity import FernetIdentityProvider

__all__ = [
    "FernetIdentityProvider",
]
