"""Tracking capability protocols.

Each protocol describes one tracking concern. Concrete trackers implement
the subset they support; application code depends only on the protocols, so
any tracker (or a test double) can be swapped in without changing call
sites. Every operation reports its outcome as a TrackingResult.
"""

from __future__ import annotations

from typing import Any, Optional, Protocol, Sequence, runtime_checkable

from simcoe.core.base.product import Location, ProductConvertible
from simcoe.core.base.result import TrackingResult
from simcoe.core.properties import Properties


@runtime_checkable
class AnalyticsTracking(Protocol):
    """Base protocol shared by every tracker."""

    @property
    def name(self) -> str:
        """Human-readable name of the tracker."""
        ...


@runtime_checkable
class CartLogging(AnalyticsTracking, Protocol):
    """Logs cart additions and removals."""

    def log_add_to_cart(
        self, product: ProductConvertible, event_properties: Optional[Properties] = None
    ) -> TrackingResult:
        """Log the addition of a product to the cart."""
        ...

    def log_remove_from_cart(
        self, product: ProductConvertible, event_properties: Optional[Properties] = None
    ) -> TrackingResult:
        """Log the removal of a product from the cart."""
        ...


@runtime_checkable
class CheckoutTracking(AnalyticsTracking, Protocol):
    """Tracks checkout events."""

    def track_checkout_event(
        self,
        products: Sequence[ProductConvertible],
        event_properties: Optional[Properties] = None,
    ) -> TrackingResult:
        """Track a checkout of the given products."""
        ...


@runtime_checkable
class ErrorLogging(AnalyticsTracking, Protocol):
    """Logs application errors."""

    def log_error(
        self, error: str, properties: Optional[Properties] = None
    ) -> TrackingResult:
        """Log an error message with optional additional properties."""
        ...


@runtime_checkable
class EventTracking(AnalyticsTracking, Protocol):
    """Tracks free-form named events."""

    def track_event(
        self, event: str, properties: Optional[Properties] = None
    ) -> TrackingResult:
        """Track the named event described by ``properties``."""
        ...


@runtime_checkable
class LifetimeValueIncreasing(AnalyticsTracking, Protocol):
    """Increases the user's lifetime value."""

    def increase_lifetime_value(
        self,
        amount: float,
        item: Optional[str] = None,
        properties: Optional[Properties] = None,
    ) -> TrackingResult:
        """Increase the lifetime value by ``amount``, optionally for ``item``."""
        ...


@runtime_checkable
class LocationTracking(AnalyticsTracking, Protocol):
    """Tracks the user's location."""

    def track_location(
        self, location: Location, properties: Optional[Properties] = None
    ) -> TrackingResult:
        """Track a location together with the event described by ``properties``."""
        ...


@runtime_checkable
class PageViewTracking(AnalyticsTracking, Protocol):
    """Tracks page (screen) views."""

    def track_page_view(
        self, page_view: str, properties: Optional[Properties] = None
    ) -> TrackingResult:
        """Track a view of the named page."""
        ...


@runtime_checkable
class PurchaseTracking(AnalyticsTracking, Protocol):
    """Tracks purchases."""

    def track_purchase_event(
        self,
        products: Sequence[ProductConvertible],
        event_properties: Optional[Properties] = None,
    ) -> TrackingResult:
        """Track a purchase of the given products."""
        ...


@runtime_checkable
class UserAttributeTracking(AnalyticsTracking, Protocol):
    """Sets attributes on the current user."""

    def set_user_attribute(self, key: str, value: Any) -> TrackingResult:
        """Set the user attribute ``key`` to ``value``."""
        ...


@runtime_checkable
class ViewDetailLogging(AnalyticsTracking, Protocol):
    """Logs product detail views."""

    def log_view_detail(
        self, product: ProductConvertible, event_properties: Optional[Properties] = None
    ) -> TrackingResult:
        """Log that the details of a product were viewed."""
        ...


@runtime_checkable
class WishListLogging(AnalyticsTracking, Protocol):
    """Logs wish list additions and removals."""

    def log_add_to_wishlist(
        self,
        product_name: str,
        sku: str,
        quantity: int,
        price: Optional[float] = None,
        additional_properties: Optional[Properties] = None,
    ) -> TrackingResult:
        """Log the addition of a product to the wish list."""
        ...

    def log_remove_from_wishlist(
        self,
        product_name: str,
        sku: str,
        quantity: int,
        price: Optional[float] = None,
        additional_properties: Optional[Properties] = None,
    ) -> TrackingResult:
        """Log the removal of a product from the wish list."""
        ...
