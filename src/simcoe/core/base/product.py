"""Domain inputs accepted by the tracking protocols.

Classes:
    SimcoeProduct: Vendor-neutral product descriptor
    ProductConvertible: Protocol for application types convertible to a product
    Location: Geographic coordinate passed to location tracking
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Protocol, runtime_checkable


@dataclass
class SimcoeProduct:
    """Vendor-neutral product descriptor.

    Attributes:
        product_name: Display name of the product
        product_id: Product identifier (sent to vendors as the SKU)
        quantity: Number of units
        price: Optional unit price
        properties: Extra product attributes forwarded as-is
    """

    product_name: str
    product_id: str
    quantity: int = 1
    price: Optional[float] = None
    properties: Dict[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        """Validate the descriptor after initialization."""
        if not self.product_name:
            raise ValueError("Product name cannot be empty")
        if not self.product_id:
            raise ValueError("Product id cannot be empty")
        if self.quantity < 0:
            raise ValueError(f"Quantity must be non-negative, got {self.quantity}")

    def to_simcoe_product(self) -> SimcoeProduct:
        return self


@runtime_checkable
class ProductConvertible(Protocol):
    """Protocol for application product types.

    Anything exposing ``to_simcoe_product()`` can be passed to the cart,
    checkout, purchase and view-detail tracking calls. SimcoeProduct itself
    satisfies the protocol.
    """

    def to_simcoe_product(self) -> SimcoeProduct:
        """Return the vendor-neutral descriptor for this product."""
        ...


@dataclass(frozen=True)
class Location:
    """A latitude/longitude pair in decimal degrees."""

    latitude: float
    longitude: float

    def __post_init__(self) -> None:
        """Reject coordinates outside the valid range."""
        if not -90.0 <= self.latitude <= 90.0:
            raise ValueError(f"Latitude out of range: {self.latitude}")
        if not -180.0 <= self.longitude <= 180.0:
            raise ValueError(f"Longitude out of range: {self.longitude}")
