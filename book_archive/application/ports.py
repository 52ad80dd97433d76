"""Collaborator protocols consumed by the archive service: identity, logical time, event delivery."""

from typing import Optional, Protocol

from book_archive.domain.models.record import BookArchived


class IdentityProvider(Protocol):
    """Resolves inbound credentials to an authenticated identity."""

    def authenticate(self, credentials: Optional[str]) -> str:
        """Return the caller identity. Raises UnauthenticatedError if it cannot be established."""
        ...


class LogicalClock(Protocol):
    """Source of monotonically non-decreasing sequence markers."""

    async def now(self) -> int:
        ...


class EventSink(Protocol):
    """Accepts archive notifications. Delivery is fire-and-forget from the caller's side."""

    async def publish(self, event: BookArchived) -> None:
        ...
