"""Token-based caller authentication (Fernet). Secret passed in; no global state. No FastAPI."""

import base64
import time
from typing import Callable, Optional

from cryptography.fernet import Fernet, InvalidToken
from cryptography.hazmat.primitives import hashes
from cryptography.hazmat.primitives.kdf.pbkdf2 import PBKDF2HMAC

from book_archive.domain.exceptions import UnauthenticatedError

# Fernet signs with HMAC-SHA256; we derive its key from the raw secret.
DEFAULT_SALT = b"book_archive_identity_v1"


def _derive_key(secret: str, salt: bytes = DEFAULT_SALT) -> bytes:
    """Derive a 32-byte key for Fernet from a variable-length secret."""
    kdf = PBKDF2HMAC(
        algorithm=hashes.SHA256(),
        length=32,
        salt=salt,
        iterations=480000,
    )
    return base64.urlsafe_b64encode(kdf.derive(secret.encode("utf-8")))


class FernetIdentityProvider:
    """
    Issues and verifies bearer tokens carrying the caller identity.
    A token is valid only if it was issued with the same secret and, when
    max_age_seconds is set, is not older than that.
    """

    def __init__(
        self,
        secret: str,
        max_age_seconds: Optional[int] = None,
        now: Callable[[], float] = time.time,
    ) -> None:
        if not secret or not secret.strip():
            raise ValueError("Identity secret is required. Set ARCHIVE_AUTH_SECRET in environment.")
        self._fernet = Fernet(_derive_key(secret.strip()))
        self._max_age = max_age_seconds
        self._now = now

    def issue_token(self, identity: str) -> str:
        if not identity or not identity.strip():
            raise ValueError("identity must not be empty")
        return self._fernet.encrypt(identity.strip().encode("utf-8")).decode("ascii")

    def authenticate(self, credentials: Optional[str]) -> str:
        """Return the identity in the token. Raises UnauthenticatedError if missing, forged or expired."""
        if not credentials or not credentials.strip():
            raise UnauthenticatedError("Caller credentials are required")
        try:
            token = credentials.strip().encode("ascii")
            if self._max_age is None:
                identity = self._fernet.decrypt(token)
            else:
                identity = self._fernet.decrypt_at_time(
                    token, ttl=self._max_age, current_time=int(self._now())
                )
        except (InvalidToken, UnicodeEncodeError) as e:
            raise UnauthenticatedError("Caller credentials are invalid or expired") from e
        return identity.decode("utf-8")
