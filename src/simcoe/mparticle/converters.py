"""Conversion of property bags and products into mParticle objects.

The converters never fail: keys that are absent or hold a value of the wrong
type leave the corresponding field unset.
"""

from typing import Iterable, Optional

from simcoe.core.base.product import ProductConvertible
from simcoe.core.properties import Properties
from simcoe.mparticle.keys import CommerceEventKeys, TransactionAttributesKeys
from simcoe.mparticle.models import (
    MPCommerceEvent,
    MPCommerceEventAction,
    MPProduct,
    MPTransactionAttributes,
)

_RECOGNISED_COMMERCE_KEYS = frozenset(
    key.value for key in CommerceEventKeys.all_keys()
) | frozenset(key.value for key in TransactionAttributesKeys.all_keys())


def transaction_attributes_from_properties(
    properties: Optional[Properties],
    attributes: Optional[MPTransactionAttributes] = None,
) -> MPTransactionAttributes:
    """Populate transaction attributes from a property bag.

    Args:
        properties: Property bag to read from; None behaves like an empty bag
        attributes: Object to populate; a new one is created when omitted

    Returns:
        The populated attributes object
    """
    if attributes is None:
        attributes = MPTransactionAttributes()
    if not properties:
        return attributes

    for key in TransactionAttributesKeys.all_keys():
        value = key.read(properties)
        if value is not None:
            setattr(attributes, key.attribute, value)

    return attributes


def apply_commerce_event_properties(
    event: MPCommerceEvent, properties: Optional[Properties]
) -> MPCommerceEvent:
    """Populate a commerce event from a property bag.

    Recognised commerce keys set the event's fields, transaction keys set its
    transaction attributes, and every other key is carried over untouched as
    a custom attribute.
    """
    if not properties:
        return event

    for key in CommerceEventKeys.all_keys():
        value = key.read(properties)
        if value is not None:
            setattr(event, key.attribute, value)

    attributes = transaction_attributes_from_properties(
        properties, event.transaction_attributes
    )
    if not attributes.is_empty:
        event.transaction_attributes = attributes

    event.custom_attributes.update(
        (key, value)
        for key, value in properties.items()
        if key not in _RECOGNISED_COMMERCE_KEYS
    )
    return event


def product_from(product: ProductConvertible) -> MPProduct:
    """Build an MPProduct from any product convertible."""
    descriptor = product.to_simcoe_product()
    return MPProduct(
        name=descriptor.product_name,
        sku=descriptor.product_id,
        quantity=descriptor.quantity,
        price=float(descriptor.price) if descriptor.price is not None else None,
        user_defined_attributes=dict(descriptor.properties),
    )


def commerce_event(
    action: MPCommerceEventAction,
    products: Iterable[MPProduct],
    event_properties: Optional[Properties] = None,
) -> MPCommerceEvent:
    """Build a commerce event for ``action`` over already converted products."""
    event = MPCommerceEvent(action=action, products=list(products))
    return apply_commerce_event_properties(event, event_properties)
