"""
Domain exceptions.

Domain exceptions represent catalog-level error conditions that
the web and API layers translate into unsuccessful responses.
"""


class DomainException(Exception):
    """Base exception for all domain exceptions."""

    def __init__(self, message: str, code: str = None):
        """
        Initialize domain exception.

        Args:
            message: Human-readable error message
            code: Machine-readable error code
        """
        super().__init__(message)
        self.message = message
        self.code = code or self.__class__.__name__


class ProductException(DomainException):
    """Base exception for product-related errors."""

    pass


class ProductNotFoundError(ProductException):
    """Raised when a product is not found."""

    def __init__(self, message: str = "Product not found"):
        super().__init__(message, code="PRODUCT_NOT_FOUND")


class ImageUploadError(ProductException):
    """Raised when an uploaded image cannot be stored."""

    def __init__(self, message: str = "Error uploading product"):
        super().__init__(message, code="IMAGE_UPLOAD_FAILED")


class CatalogStoreError(DomainException):
    """Raised when the product store fails to complete an operation."""

    def __init__(self, message: str = "Server error"):
        super().__init__(message, code="CATALOG_STORE_ERROR")
