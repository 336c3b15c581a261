from motoparts.core.error_handler import GENERIC_ERROR_MESSAGE, storefront_error_body
from motoparts.core.exceptions import (
    InternalError,
    NotFoundError,
    OutOfStockError,
    StorefrontError,
    ValidationError,
    field_paths,
)


def test_status_codes_and_default_codes():
    assert (NotFoundError("Order", 7).status_code, NotFoundError("Order", 7).code) == (404, "NOT_FOUND")
    assert (ValidationError("bad").status_code, ValidationError("bad").code) == (400, "VALIDATION_ERROR")
    assert OutOfStockError(product_id=3).status_code == 400
    assert InternalError("boom").status_code == 500


def test_not_found_message_and_details():
    exc = NotFoundError("Product", "ngk-c7hsa")

    assert exc.message == "Product not found"
    assert exc.to_dict() == {
        "error_type": "NotFoundError",
        "code": "NOT_FOUND",
        "message": "Product not found",
        "details": {"entity": "Product", "key": "ngk-c7hsa"},
    }


def test_custom_code_overrides_default():
    exc = StorefrontError("nope", code="CUSTOM")

    assert exc.code == "CUSTOM"
    assert repr(exc) == "StorefrontError(code='CUSTOM', message='nope')"


def test_error_body_includes_fields_for_validation_errors():
    body = storefront_error_body(ValidationError("Invalid order", fields=["order.email"]))

    assert body == {"message": "Invalid order", "code": "VALIDATION_ERROR", "fields": ["order.email"]}


def test_error_body_hides_internal_messages():
    body = storefront_error_body(InternalError("Duplicate products.slug"))

    assert body == {"message": GENERIC_ERROR_MESSAGE, "code": "INTERNAL_ERROR"}


def test_field_paths_flattens_and_dedupes():
    errors = [
        {"loc": ("body", "items", 1, "quantity")},
        {"loc": ("body", "items", 1, "quantity")},
        {"loc": ("body",)},
        {"loc": ("email",)},
    ]

    assert field_paths(errors, skip=("body",)) == ["items.1.quantity", "__root__", "email"]
    assert field_paths([{"loc": ("email",)}], prefix=("order",)) == ["order.email"]
