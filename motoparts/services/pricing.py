"""
Cart totals

Shipping is a flat fee below the free-shipping threshold, tax is a flat rate
on the subtotal. Amounts are rounded to centavos only in the returned totals.
"""
from decimal import Decimal, ROUND_HALF_UP
from typing import Iterable, Optional

from motoparts.core.config import settings
from motoparts.schemas import CartItemWithProduct, CartTotals


def round_money(amount) -> float:
    """Round half-up to two decimals."""
    return float(Decimal(str(amount)).quantize(Decimal("0.01"), rounding=ROUND_HALF_UP))


def cart_subtotal(lines: Iterable[CartItemWithProduct]) -> float:
    """Sum of price x quantity; lines whose product vanished count as zero."""
    return sum(
        line.product.price * line.quantity
        for line in lines
        if line.product is not None
    )


def calculate_totals(
    subtotal: float,
    free_shipping_threshold: Optional[float] = None,
    flat_shipping_fee: Optional[float] = None,
    tax_rate: Optional[float] = None,
) -> CartTotals:
    threshold = settings.FREE_SHIPPING_THRESHOLD if free_shipping_threshold is None else free_shipping_threshold
    fee = settings.FLAT_SHIPPING_FEE if flat_shipping_fee is None else flat_shipping_fee
    rate = settings.TAX_RATE if tax_rate is None else tax_rate

    shipping = 0.0 if subtotal >= threshold else fee
    tax = subtotal * rate
    total = subtotal + shipping + tax

    return CartTotals(
        subtotal=round_money(subtotal),
        shipping=round_money(shipping),
        tax=round_money(tax),
        total=round_money(total),
        free_shipping_threshold=round_money(threshold),
        amount_to_free_shipping=round_money(max(0.0, threshold - subtotal)),
    )
