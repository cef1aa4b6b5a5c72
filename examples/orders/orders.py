"""Generated by oaienum. Do not edit."""

from enum import Enum

from oaienum.registrar import ExternalDocument, openapi_enum


@openapi_enum(
    renames={'Pending': 'pending', 'Paid': 'paid', 'Shipped': 'shipped', 'Canceled': 'cancelled'},
    description='Lifecycle of an order',
)
class OrderStatus(Enum):
    Pending = 0
    Paid = 1
    Shipped = 2
    Canceled = 3


@openapi_enum(
    repr='u32',
    external_docs=ExternalDocument(url='https://example.com/docs/priority', description=None),
)
class Priority(Enum):
    Low = 1
    Normal = 2
    Urgent = 10
