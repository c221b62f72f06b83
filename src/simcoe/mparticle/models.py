"""Objects handed to the mParticle client.

These mirror the shapes of the mParticle SDK's event model. The tracker
builds one per call and passes ownership to the client; it never keeps a
reference afterwards.

Enums:
    MPEventType, MPCommerceEventAction, MPInstallationType, MPEnvironment

Dataclasses:
    MPProduct, MPTransactionAttributes, MPEvent, MPCommerceEvent
"""

from dataclasses import dataclass, field, fields
from datetime import datetime
from enum import Enum
from typing import Any, Dict, List, Optional


class MPEventType(Enum):
    """Category of a custom mParticle event."""

    NAVIGATION = 1
    LOCATION = 2
    SEARCH = 3
    TRANSACTION = 4
    USER_CONTENT = 5
    USER_PREFERENCE = 6
    SOCIAL = 7
    OTHER = 8
    MEDIA = 9


class MPCommerceEventAction(Enum):
    """Product action carried by a commerce event."""

    ADD_TO_CART = "add_to_cart"
    REMOVE_FROM_CART = "remove_from_cart"
    ADD_TO_WISHLIST = "add_to_wishlist"
    REMOVE_FROM_WISHLIST = "remove_from_wishlist"
    CHECKOUT = "checkout"
    CHECKOUT_OPTIONS = "checkout_options"
    CLICK = "click"
    VIEW_DETAIL = "view_detail"
    PURCHASE = "purchase"
    REFUND = "refund"


class MPInstallationType(Enum):
    """How the SDK should classify the current installation."""

    AUTODETECT = "autodetect"
    KNOWN_INSTALL = "known_install"
    KNOWN_UPGRADE = "known_upgrade"
    KNOWN_SAME_VERSION = "known_same_version"


class MPEnvironment(Enum):
    """mParticle environment the data is sent to."""

    AUTO_DETECT = "auto_detect"
    DEVELOPMENT = "development"
    PRODUCTION = "production"


@dataclass
class MPProduct:
    """A product line inside a commerce event."""

    name: str
    sku: str
    quantity: int = 1
    price: Optional[float] = None
    user_defined_attributes: Dict[str, Any] = field(default_factory=dict)


@dataclass
class MPTransactionAttributes:
    """Transaction level attributes of a commerce event.

    Every field defaults to None (unset).
    """

    affiliation: Optional[str] = None
    coupon_code: Optional[str] = None
    revenue: Optional[float] = None
    shipping: Optional[float] = None
    tax: Optional[float] = None
    transaction_id: Optional[str] = None

    @property
    def is_empty(self) -> bool:
        return all(getattr(self, f.name) is None for f in fields(self))


@dataclass
class MPEvent:
    """A custom (non-commerce) mParticle event.

    Attributes:
        name: Event name
        event_type: Event category enum
        category: Optional free-text category
        duration: Optional duration in milliseconds
        start_time: Optional start timestamp
        end_time: Optional end timestamp
        info: Free-form event attributes
    """

    name: str
    event_type: MPEventType
    category: Optional[str] = None
    duration: Optional[float] = None
    start_time: Optional[datetime] = None
    end_time: Optional[datetime] = None
    info: Dict[str, Any] = field(default_factory=dict)


@dataclass
class MPCommerceEvent:
    """A commerce event: one product action over a list of products."""

    action: MPCommerceEventAction
    products: List[MPProduct] = field(default_factory=list)
    transaction_attributes: Optional[MPTransactionAttributes] = None
    checkout_options: Optional[str] = None
    checkout_step: Optional[int] = None
    currency: Optional[str] = None
    non_interactive: Optional[bool] = None
    product_list_name: Optional[str] = None
    product_list_source: Optional[str] = None
    screen_name: Optional[str] = None
    custom_attributes: Dict[str, Any] = field(default_factory=dict)
