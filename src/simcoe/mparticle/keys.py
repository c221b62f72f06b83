"""Property bag keys recognised by the mParticle tracker.

Each enumeration is the closed set of keys read for one kind of vendor
object. Members are ``str`` subclasses whose value is the wire key, and each
declares the value types it accepts and the attribute it populates. Keys not
listed here are never interpreted.
"""

from collections.abc import Mapping
from datetime import datetime
from enum import Enum
from numbers import Real
from typing import Any, List, Optional, Tuple, Type, TypeVar

from simcoe.core.properties import matches_type
from simcoe.mparticle.models import MPEventType

K = TypeVar("K", bound="PropertyKey")


class PropertyKey(str, Enum):
    """Base class for key enumerations.

    Members are declared as ``(wire_key, expected_types, attribute)``.
    """

    expected_types: Tuple[type, ...]
    attribute: str

    def __new__(cls, key: str, expected_types: Tuple[type, ...], attribute: str):
        obj = str.__new__(cls, key)
        obj._value_ = key
        obj.expected_types = expected_types
        obj.attribute = attribute
        return obj

    def __str__(self) -> str:
        return self.value

    @classmethod
    def all_keys(cls: Type[K]) -> List[K]:
        """Return every key of the enumeration in declaration order."""
        return list(cls)

    def read(self, properties: Mapping) -> Optional[Any]:
        """Read this key from a property bag.

        Returns None when the key is absent or holds a value of the wrong
        type. Numeric values are returned as ``float`` when the key expects
        a float.
        """
        value = properties.get(self.value)
        if value is None or not matches_type(value, self.expected_types):
            return None
        if float in self.expected_types and isinstance(value, Real):
            return float(value)
        return value


class TransactionAttributesKeys(PropertyKey):
    """Keys populating MPTransactionAttributes."""

    AFFILIATION = ("affiliation", (str,), "affiliation")
    COUPON_CODE = ("couponCode", (str,), "coupon_code")
    REVENUE = ("revenue", (float,), "revenue")
    SHIPPING = ("shipping", (float,), "shipping")
    TAX = ("tax", (float,), "tax")
    TRANSACTION_ID = ("transactionId", (str,), "transaction_id")


class CommerceEventKeys(PropertyKey):
    """Keys populating the top-level fields of an MPCommerceEvent."""

    CHECKOUT_OPTIONS = ("checkoutOptions", (str,), "checkout_options")
    CHECKOUT_STEP = ("checkoutStep", (int,), "checkout_step")
    CURRENCY = ("currency", (str,), "currency")
    NON_INTERACTIVE = ("nonInteractive", (bool,), "non_interactive")
    PRODUCT_LIST_NAME = ("productListName", (str,), "product_list_name")
    PRODUCT_LIST_SOURCE = ("productListSource", (str,), "product_list_source")
    SCREEN_NAME = ("screenName", (str,), "screen_name")


class EventKeys(PropertyKey):
    """Keys populating an MPEvent. NAME and EVENT_TYPE are required."""

    NAME = ("name", (str,), "name")
    EVENT_TYPE = ("eventType", (MPEventType,), "event_type")
    CATEGORY = ("category", (str,), "category")
    DURATION = ("duration", (float,), "duration")
    START_TIME = ("startTime", (datetime,), "start_time")
    END_TIME = ("endTime", (datetime,), "end_time")
    INFO = ("info", (Mapping,), "info")


LATITUDE_KEY = "latitude"
LONGITUDE_KEY = "longitude"
