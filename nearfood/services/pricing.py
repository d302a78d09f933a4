from dataclasses import dataclass
from decimal import Decimal, ROUND_HALF_UP
from typing import Iterable, Tuple

TWOPLACES = Decimal("0.01")
DELIVERY_FEE = Decimal("2.99")
TAX_RATE = Decimal("0.08")


def _to_money(value) -> Decimal:
    d = value if isinstance(value, Decimal) else Decimal(str(value))
    return d.quantize(TWOPLACES, rounding=ROUND_HALF_UP)


@dataclass(frozen=True)
class PriceBreakdown:
    subtotal: Decimal
    delivery_fee: Decimal
    tax: Decimal
    total: Decimal

    def to_dict(self):
        return {
            "subtotal": float(self.subtotal),
            "delivery_fee": float(self.delivery_fee),
            "tax": float(self.tax),
            "total": float(self.total),
        }


def calculate_pricing(lines: Iterable[Tuple[object, int]]) -> PriceBreakdown:
    """Price a sequence of (unit_price, quantity) pairs.

    The delivery fee is only charged on a non-empty subtotal. The total is
    rounded half-up to the cent from the unrounded tax.
    """
    subtotal = sum(
        (Decimal(str(price)) * Decimal(quantity) for price, quantity in lines),
        Decimal("0"),
    )
    delivery_fee = DELIVERY_FEE if subtotal > 0 else Decimal("0")
    tax = subtotal * TAX_RATE
    total = _to_money(subtotal + delivery_fee + tax)
    return PriceBreakdown(
        subtotal=_to_money(subtotal),
        delivery_fee=_to_money(delivery_fee),
        tax=_to_money(tax),
        total=total,
    )


__all__ = ["PriceBreakdown", "calculate_pricing", "DELIVERY_FEE", "TAX_RATE"]
