"""Archive error taxonomy. Pure domain layer: no infrastructure, no HTTP."""


class ArchiveError(Exception):
    """Base for all archive errors."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class UnauthenticatedError(ArchiveError):
    """Raised when the caller identity cannot be established."""


class AlreadyExistsInArchiveError(ArchiveError):
    """Raised when a record with the derived fingerprint is already archived."""


class InvalidFingerprintError(ArchiveError):
    """Raised when fingerprint text is not a valid hex digest of the expected width."""
