"""Shared BDD fixtures and step definitions for the ordering workflows."""

import pytest
from protean import current_domain
from protean.exceptions import ValidationError
from pytest_bdd import given, parsers, then
from storefront.catalogue.product.product import Product
from storefront.ordering.order.order import Order


@pytest.fixture()
def outcome():
    """Container for the error a When step captured, if any."""
    return {"exc": None}


@given(parsers.cfparse("a product with {stock:d} units in stock"), target_fixture="product")
def _(make_product, stock):
    return make_product(stock=stock)


@given(parsers.cfparse("a paid order for {quantity:d} units of that product"), target_fixture="order")
def _(place_order, product, quantity):
    return place_order(product, quantity=quantity)


@then(parsers.cfparse('the order status is "{status}"'))
def _(order, status):
    assert current_domain.repository_for(Order).get(order.id).status == status


@then(parsers.cfparse("the product has {stock:d} units in stock"))
def _(product, stock):
    assert current_domain.repository_for(Product).get(product.id).stock == stock


@then(parsers.cfparse('the order action fails with "{message}"'))
def _(outcome, message):
    assert isinstance(outcome["exc"], ValidationError)
    assert message in str(outcome["exc"])
