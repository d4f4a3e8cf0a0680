class SiteBuilderError(Exception):
    """Base class for errors that surface to API callers."""

    status_code = 500


class BadRequestError(SiteBuilderError):
    """A required field was missing or blank."""

    status_code = 400


class NotFoundError(SiteBuilderError):
    """A website or section identifier did not resolve."""

    status_code = 404


class UpstreamUnavailableError(Exception):
    """The generation provider failed. Never leaves the provider layer."""


def require_fields(message: str, *values: str | None) -> None:
    """Raise BadRequestError with `message` if any value is missing or blank."""
    if any(value is None or not str(value).strip() for value in values):
        raise BadRequestError(message)
