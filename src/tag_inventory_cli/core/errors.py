"""
Error kinds raised while listing and classifying tagged resources.

Per-record errors (InvalidArnFormat, MalformedResourcePath) describe a single
ARN; run-level errors (ApiError, Cancelled) abort the whole listing.
"""

from typing import Optional


class InventoryError(Exception):
    """Base class for every error the inventory pipeline raises."""


class InvalidArnFormat(InventoryError):
    def __init__(self, arn: str, reason: str):
        self.arn = arn
        self.reason = reason
        super().__init__(f"Invalid ARN {arn!r}: {reason}")


class MalformedResourcePath(InventoryError):
    def __init__(self, arn: str, service: str):
        self.arn = arn
        self.service = service
        super().__init__(
            f"Malformed resource path {arn!r} for service '{service}': "
            "expected '<product>/<identifier>'"
        )


class ApiError(InventoryError):
    """The tagging API call for a page failed."""

    def __init__(self, page_index: int, message: str, code: Optional[str] = None):
        self.page_index = page_index
        self.code = code
        self.message = message
        prefix = f"[{code}] " if code else ""
        super().__init__(f"Tagging API request for page {page_index} failed: {prefix}{message}")


class Cancelled(InventoryError):
    def __init__(self, page_index: int):
        self.page_index = page_index
        super().__init__(f"Listing cancelled before page {page_index}")
