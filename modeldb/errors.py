"""Exceptions raised by the refresh pipeline and its collaborators.

Read-path code never lets these escape to callers; they surface only from
refresh, publish and trigger operations.
"""


class ModelDBError(Exception):
    """Base class for all catalog errors."""


class UpstreamError(ModelDBError):
    """The upstream feed could not be fetched or parsed.

    Aborts the refresh attempt. Nothing is published and the previous
    manifest keeps serving reads.
    """

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code


class PublishError(ModelDBError):
    """An artifact write to the durable store failed mid-publish."""

    def __init__(self, message: str, version: str, key: str | None = None):
        super().__init__(message)
        self.version = version
        self.key = key


class UnauthorizedError(ModelDBError):
    """Manual refresh trigger called without a valid admin token."""


class ConfigurationError(ModelDBError):
    """Invalid runtime configuration (usually a malformed environment value)."""
