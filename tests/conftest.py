import pytest

from flowtext.core.registry import IdentityRegistry
from flowtext.session import FlowDocument

ORDER_FLOW = """\
1.Receive order
2.Check stock
look in every warehouse
3.Ship
4.Refund
1->2->|in stock|3
2->|out of stock|4
"""


@pytest.fixture
def order_text():
    return ORDER_FLOW


@pytest.fixture
def registry():
    return IdentityRegistry()


@pytest.fixture
def order_document(order_text):
    doc = FlowDocument("Order")
    doc.build_from_text(order_text)
    return doc
