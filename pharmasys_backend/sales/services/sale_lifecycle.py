# sales/services/sale_lifecycle.py

"""
A sale is written once as Completed. The only later change is a void,
after which the record is frozen. Sale.save() and void_sale() both ask
this table before touching status.
"""

from common.exceptions import InvalidStateError
from sales.models import Sale


class InvalidSaleTransitionError(InvalidStateError):
    """Raised when a status change is not in NEXT_STATUSES."""


NEXT_STATUSES = {
    Sale.Status.COMPLETED: frozenset({Sale.Status.VOIDED}),
    Sale.Status.VOIDED: frozenset(),
}


def can_transition(*, from_status: str, to_status: str) -> bool:
    return to_status in NEXT_STATUSES.get(from_status, frozenset())


def validate_transition(*, sale: Sale, target_status: str) -> None:
    if can_transition(from_status=sale.status, to_status=target_status):
        return

    if sale.status == Sale.Status.VOIDED:
        raise InvalidSaleTransitionError(f"Sale #{sale.id} has already been voided.")
    raise InvalidSaleTransitionError(
        f"Sale #{sale.id} cannot move from {sale.status} to {target_status}."
    )
