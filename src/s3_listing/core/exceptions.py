"""Exception hierarchy for s3-listing-tools."""


class S3ListingError(Exception):
    """Base exception for all s3-listing-tools errors."""

    pass


class ValidationError(S3ListingError):
    """Raised when validation fails."""

    pass


class CommandExecutionError(S3ListingError):
    """Raised when a backend command or API call fails."""

    pass


class BackendUnavailableError(S3ListingError):
    """Raised when the listing backend cannot be used at all."""

    pass


class OutputError(S3ListingError):
    """Raised when the listing file cannot be written."""

    pass
