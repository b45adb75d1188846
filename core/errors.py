"""
Exception types for Phone Finder.

No-match results and adversarial messages are normal responses, not errors.
"""


class PhoneFinderError(Exception):
    """Base class for Phone Finder errors."""


class MalformedRequestError(PhoneFinderError, ValueError):
    """Request body is missing, unparsable, or has no string message."""


class CatalogLoadError(PhoneFinderError):
    """Catalog file is missing, unreadable, or contains an invalid record."""
