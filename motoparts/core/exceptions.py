"""
Storefront Exception Hierarchy

Every error raised by the entity store and the services carries a code, a
message and details so routes and logs can treat them uniformly.

Exception Hierarchy:
    StorefrontError
    ├── NotFoundError        (entity absent)               -> 404
    ├── ValidationError      (malformed / missing fields)  -> 400
    ├── OutOfStockError      (add-to-cart rejected)        -> 400
    └── InternalError        (backend failure)             -> 500
"""
from typing import Any, Dict, List, Optional, Sequence


class StorefrontError(Exception):
    """
    Base exception for all storefront errors.

    Attributes:
        message: Human-readable error description
        code: Machine-readable error code for programmatic handling
        details: Additional context for debugging
        status_code: HTTP status the API surfaces this error as
    """

    default_code: str = "STOREFRONT_ERROR"
    status_code: int = 500

    def __init__(
        self,
        message: str,
        code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.code = code or self.default_code
        self.details = details or {}
        super().__init__(self.message)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for logging/serialization."""
        return {
            "error_type": self.__class__.__name__,
            "code": self.code,
            "message": self.message,
            "details": self.details,
        }

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(code={self.code!r}, message={self.message!r})"


class NotFoundError(StorefrontError):
    """Requested entity does not exist."""
    default_code = "NOT_FOUND"
    status_code = 404

    def __init__(
        self,
        entity: str,
        key: Any = None,
        message: Optional[str] = None,
        **kwargs
    ):
        details = kwargs.pop("details", {})
        details.update({"entity": entity, "key": key})
        self.entity = entity
        self.key = key
        super().__init__(message or f"{entity} not found", details=details, **kwargs)


class ValidationError(StorefrontError):
    """Input is missing required fields or has the wrong types."""
    default_code = "VALIDATION_ERROR"
    status_code = 400

    def __init__(
        self,
        message: str,
        fields: Optional[List[str]] = None,
        **kwargs
    ):
        details = kwargs.pop("details", {})
        self.fields = list(fields or [])
        details["fields"] = self.fields
        super().__init__(message, details=details, **kwargs)


class OutOfStockError(StorefrontError):
    """Product exists but cannot be added to a cart."""
    default_code = "OUT_OF_STOCK"
    status_code = 400

    def __init__(
        self,
        message: str = "Product is out of stock",
        product_id: Optional[int] = None,
        **kwargs
    ):
        details = kwargs.pop("details", {})
        details["product_id"] = product_id
        self.product_id = product_id
        super().__init__(message, details=details, **kwargs)


class InternalError(StorefrontError):
    """Unexpected backend failure. The message is never shown to clients."""
    default_code = "INTERNAL_ERROR"
    status_code = 500


def field_paths(errors: Sequence[dict], prefix: Sequence[Any] = (), skip: Sequence[str] = ()) -> List[str]:
    """
    Flatten pydantic error locations into unique dotted field paths.

    ("body", "items", 1, "quantity") with skip=("body",) -> "items.1.quantity"
    """
    paths = []
    for error in errors:
        loc = list(error.get("loc", ()))
        if loc and loc[0] in skip:
            loc = loc[1:]
        path = ".".join(str(part) for part in [*prefix, *loc]) or "__root__"
        if path not in paths:
            paths.append(path)
    return paths
