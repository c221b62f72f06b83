"""Abstractions every tracker builds on.

Classes:
    TrackingResult: Success/error outcome of a tracking call
    TrackingStatus: Enum of tracking outcomes
    SimcoeProduct: Vendor-neutral product descriptor
    ProductConvertible: Protocol for types convertible to SimcoeProduct
    Location: Latitude/longitude pair
    AnalyticsTracking and the capability protocols (CartLogging, ...)
"""

from simcoe.core.base.product import Location, ProductConvertible, SimcoeProduct
from simcoe.core.base.protocols import (
    AnalyticsTracking,
    CartLogging,
    CheckoutTracking,
    ErrorLogging,
    EventTracking,
    LifetimeValueIncreasing,
    LocationTracking,
    PageViewTracking,
    PurchaseTracking,
    UserAttributeTracking,
    ViewDetailLogging,
    WishListLogging,
)
from simcoe.core.base.result import TrackingResult, TrackingStatus

__all__ = [
    # Results
    "TrackingResult",
    "TrackingStatus",
    # Domain inputs
    "SimcoeProduct",
    "ProductConvertible",
    "Location",
    # Capabilities
    "AnalyticsTracking",
    "CartLogging",
    "CheckoutTracking",
    "ErrorLogging",
    "EventTracking",
    "LifetimeValueIncreasing",
    "LocationTracking",
    "PageViewTracking",
    "PurchaseTracking",
    "UserAttributeTracking",
    "ViewDetailLogging",
    "WishListLogging",
]
