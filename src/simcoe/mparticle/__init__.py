"""mParticle tracker.

Classes:
    MParticle: Tracker forwarding Simcoe calls to an MParticleClient
    MParticleClient: Protocol for the injected SDK instance
    MParticleConfig: Pydantic start-up configuration

Functions:
    build_event: Validate a property bag and build an MPEvent
    event_data: Build an event property bag
    transaction_attributes_from_properties: Property bag to transaction attributes
"""

from simcoe.mparticle.client import MParticleClient
from simcoe.mparticle.config import MParticleConfig
from simcoe.mparticle.converters import (
    apply_commerce_event_properties,
    commerce_event,
    product_from,
    transaction_attributes_from_properties,
)
from simcoe.mparticle.events import build_event, event_data
from simcoe.mparticle.handler import (
    MISSING_PROPERTIES_MESSAGE,
    UNKNOWN_ERROR_MESSAGE,
    MParticle,
)
from simcoe.mparticle.keys import (
    CommerceEventKeys,
    EventKeys,
    PropertyKey,
    TransactionAttributesKeys,
)
from simcoe.mparticle.models import (
    MPCommerceEvent,
    MPCommerceEventAction,
    MPEnvironment,
    MPEvent,
    MPEventType,
    MPInstallationType,
    MPProduct,
    MPTransactionAttributes,
)

__all__ = [
    # Tracker
    "MParticle",
    "MParticleClient",
    "MParticleConfig",
    "MISSING_PROPERTIES_MESSAGE",
    "UNKNOWN_ERROR_MESSAGE",
    # Conversion
    "apply_commerce_event_properties",
    "build_event",
    "commerce_event",
    "event_data",
    "product_from",
    "transaction_attributes_from_properties",
    # Keys
    "PropertyKey",
    "CommerceEventKeys",
    "EventKeys",
    "TransactionAttributesKeys",
    # Vendor models
    "MPCommerceEvent",
    "MPCommerceEventAction",
    "MPEnvironment",
    "MPEvent",
    "MPEventType",
    "MPInstallationType",
    "MPProduct",
    "MPTransactionAttributes",
]
