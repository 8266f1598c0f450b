"""
Catalog exceptions.

Raised by the services when a user action cannot be carried out.
Each exception carries the HTTP status the API answers with.
"""

from fastapi import status


class CatalogError(Exception):
    """Base exception for all catalog errors."""

    status_code = status.HTTP_400_BAD_REQUEST

    def __init__(self, message: str, code: str = None):
        """
        Initialize catalog exception.

        Args:
            message: Human-readable error message
            code: Machine-readable error code
        """
        super().__init__(message)
        self.message = message
        self.code = code or self.__class__.__name__


class ProductValidationError(CatalogError):
    """Raised when a required product field is missing."""

    def __init__(self, missing_fields: list[str]):
        self.missing_fields = missing_fields
        super().__init__(
            "Please fill in SKU, Name, and Price (required fields). "
            f"Missing: {', '.join(missing_fields)}",
            code="MISSING_REQUIRED_FIELD",
        )


class EmptyCollectionError(CatalogError):
    """Raised when exporting, clearing or deleting an empty collection."""

    def __init__(self, message: str = "Nothing to process"):
        super().__init__(message, code="EMPTY_COLLECTION")


class FileFormatError(CatalogError):
    """Raised when an import file is rejected."""

    def __init__(self, message: str = "Unsupported file"):
        super().__init__(message, code="FILE_FORMAT")


class ProductNotFoundError(CatalogError):
    """Raised when a product id does not exist."""

    status_code = status.HTTP_404_NOT_FOUND

    def __init__(self, product_id: int):
        self.product_id = product_id
        super().__init__(
            f"Product with ID {product_id} not found",
            code="PRODUCT_NOT_FOUND",
        )


class ConfirmationRequired(CatalogError):
    """Raised when a destructive action was not confirmed.

    The message is the prompt that has to be answered.
    """

    status_code = status.HTTP_428_PRECONDITION_REQUIRED

    def __init__(self, prompt: str):
        super().__init__(prompt, code="CONFIRMATION_REQUIRED")


class StorageParseError(CatalogError):
    """Raised when a persisted blob cannot be decoded.

    Never reaches the user: the store falls back to the default seed.
    """

    def __init__(self, key: str, reason: str):
        self.key = key
        super().__init__(
            f"Could not parse stored value for '{key}': {reason}",
            code="STORAGE_PARSE",
        )
