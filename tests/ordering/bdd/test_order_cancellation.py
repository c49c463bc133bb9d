"""BDD tests for order cancellation."""

from protean import current_domain
from protean.exceptions import ValidationError
from pytest_bdd import given, parsers, scenarios, when
from storefront.ordering.order.cancellation import CancelOrder
from storefront.ordering.order.status import UpdateOrderStatus

scenarios("features/order_cancellation.feature")


def _attempt(outcome, command):
    try:
        current_domain.process(command, asynchronous=False)
    except ValidationError as exc:
        outcome["exc"] = exc


# ---------------------------------------------------------------------------
# Given / When steps
# ---------------------------------------------------------------------------
@given("the order is cancelled")
@when("the order is cancelled")
def _(order, outcome):
    _attempt(outcome, CancelOrder(order_id=order.id))


@given(parsers.cfparse('the order status is set to "{status}"'))
@when(parsers.cfparse('the order status is set to "{status}"'))
def _(order, outcome, status):
    _attempt(outcome, UpdateOrderStatus(order_id=order.id, status=status))
