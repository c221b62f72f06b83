"""Tracker forwarding Simcoe tracking calls to the mParticle SDK.

Each tracking method builds the vendor object for the call, hands it to the
injected MParticleClient in exactly one call and returns a TrackingResult.
Only the methods that generate an MPEvent from a property bag
(``track_event`` and ``track_location``) can report an error; the others
always report success because the client's calls return nothing to inspect.

Classes:
    MParticle: The mParticle tracker
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, Optional, Sequence, Union

from simcoe.core.base.product import Location, ProductConvertible
from simcoe.core.base.result import TrackingResult
from simcoe.core.config import ConfigLoader
from simcoe.core.exceptions import EventGenerationError
from simcoe.core.properties import Properties, copy_properties
from simcoe.mparticle.client import MParticleClient
from simcoe.mparticle.config import DEFAULT_CONFIG_FILE, ENV_PREFIX, MParticleConfig
from simcoe.mparticle.converters import commerce_event, product_from
from simcoe.mparticle.events import build_event
from simcoe.mparticle.keys import LATITUDE_KEY, LONGITUDE_KEY, EventKeys
from simcoe.mparticle.models import (
    MPCommerceEventAction,
    MPEnvironment,
    MPInstallationType,
    MPProduct,
)
from simcoe.utils.logging import StructuredLogger, get_logger

UNKNOWN_ERROR_MESSAGE = "An unknown error occurred."
MISSING_PROPERTIES_MESSAGE = "Cannot track an event without valid properties."


class MParticle:
    """Simcoe tracker for the mParticle SDK.

    Implements CartLogging, CheckoutTracking, ErrorLogging, EventTracking,
    LifetimeValueIncreasing, LocationTracking, PageViewTracking,
    PurchaseTracking, UserAttributeTracking, ViewDetailLogging and
    WishListLogging.

    The tracker holds no per-call state: concurrent calls are independent and
    rely on the client being safe to share.

    Attributes:
        name: Tracker name, always "mParticle"
        client: The injected SDK client

    Example:
        >>> tracker = MParticle(client, key="api-key", secret="api-secret")
        >>> tracker.track_event(
        ...     "Button Tapped", {"eventType": MPEventType.NAVIGATION}
        ... )
        TrackingResult(status=<TrackingStatus.SUCCESS: 'success'>, message=None)
    """

    name = "mParticle"

    def __init__(
        self,
        client: MParticleClient,
        key: str,
        secret: str,
        installation_type: MPInstallationType = MPInstallationType.AUTODETECT,
        environment: MPEnvironment = MPEnvironment.AUTO_DETECT,
        proxy_app_delegate: bool = True,
    ) -> None:
        """Start the SDK and build the tracker.

        Args:
            client: The mParticle SDK instance to forward calls to
            key: Workspace API key
            secret: Workspace API secret
            installation_type: Installation type passed to the SDK
            environment: mParticle environment passed to the SDK
            proxy_app_delegate: Whether the SDK should proxy the app delegate
        """
        self.client = client
        self._logger = self._get_logger()

        self.client.start(
            key,
            secret,
            installation_type,
            environment,
            proxy_app_delegate,
        )
        self._logger.info(
            "Started mParticle SDK",
            extra={
                "installation_type": installation_type.value,
                "environment": environment.value,
            },
        )

    def _get_logger(self) -> StructuredLogger:
        return get_logger(__name__, tracker=self.name)

    @classmethod
    def from_config(cls, client: MParticleClient, config: MParticleConfig) -> MParticle:
        """Build a tracker from a validated MParticleConfig."""
        if config.logging is not None:
            config.logging.apply()

        return cls(
            client,
            key=config.key,
            secret=config.secret.get_secret_value(),
            installation_type=config.installation_type,
            environment=config.environment,
            proxy_app_delegate=config.proxy_app_delegate,
        )

    @classmethod
    def from_environment(
        cls,
        client: MParticleClient,
        config_dir: Union[str, Path] = "config",
        environment: str = "dev",
        config_file: str = DEFAULT_CONFIG_FILE,
        overrides: Optional[Dict[str, Any]] = None,
    ) -> MParticle:
        """Build a tracker from config files, ``.env`` and MPARTICLE_* variables.

        Raises:
            ConfigurationError: If no valid key and secret can be resolved
        """
        loader = ConfigLoader(config_dir=config_dir, environment=environment)
        config = loader.load(
            MParticleConfig,
            config_file=config_file,
            overrides=overrides,
            env_prefix=ENV_PREFIX,
        )
        return cls.from_config(client, config)

    # -------------------------------------------------------------------------
    # Commerce
    # -------------------------------------------------------------------------

    def _log_commerce_event(
        self,
        action: MPCommerceEventAction,
        products: Sequence[MPProduct],
        event_properties: Optional[Properties],
    ) -> TrackingResult:
        event = commerce_event(action, products, event_properties)
        self._logger.debug(
            "Forwarding commerce event",
            extra={"action": action.value, "products": len(event.products)},
        )
        self.client.log_commerce_event(event)
        return TrackingResult.success()

    def log_add_to_cart(
        self, product: ProductConvertible, event_properties: Optional[Properties] = None
    ) -> TrackingResult:
        """Log the addition of a product to the cart."""
        return self._log_commerce_event(
            MPCommerceEventAction.ADD_TO_CART, [product_from(product)], event_properties
        )

    def log_remove_from_cart(
        self, product: ProductConvertible, event_properties: Optional[Properties] = None
    ) -> TrackingResult:
        """Log the removal of a product from the cart."""
        return self._log_commerce_event(
            MPCommerceEventAction.REMOVE_FROM_CART,
            [product_from(product)],
            event_properties,
        )

    def track_checkout_event(
        self,
        products: Sequence[ProductConvertible],
        event_properties: Optional[Properties] = None,
    ) -> TrackingResult:
        """Track a checkout event over ``products``.

        Transaction keys in ``event_properties`` (see
        TransactionAttributesKeys) become the event's transaction attributes.
        """
        return self._log_commerce_event(
            MPCommerceEventAction.CHECKOUT,
            [product_from(p) for p in products],
            event_properties,
        )

    def track_purchase_event(
        self,
        products: Sequence[ProductConvertible],
        event_properties: Optional[Properties] = None,
    ) -> TrackingResult:
        """Track a purchase event over ``products``."""
        return self._log_commerce_event(
            MPCommerceEventAction.PURCHASE,
            [product_from(p) for p in products],
            event_properties,
        )

    def log_view_detail(
        self, product: ProductConvertible, event_properties: Optional[Properties] = None
    ) -> TrackingResult:
        """Log that a product's details were viewed."""
        return self._log_commerce_event(
            MPCommerceEventAction.VIEW_DETAIL, [product_from(product)], event_properties
        )

    def log_add_to_wishlist(
        self,
        product_name: str,
        sku: str,
        quantity: int,
        price: Optional[float] = None,
        additional_properties: Optional[Properties] = None,
    ) -> TrackingResult:
        """Log the addition of a product to the wish list."""
        product = MPProduct(
            name=product_name,
            sku=sku,
            quantity=quantity,
            price=float(price) if price is not None else None,
        )
        return self._log_commerce_event(
            MPCommerceEventAction.ADD_TO_WISHLIST, [product], additional_properties
        )

    def log_remove_from_wishlist(
        self,
        product_name: str,
        sku: str,
        quantity: int,
        price: Optional[float] = None,
        additional_properties: Optional[Properties] = None,
    ) -> TrackingResult:
        """Log the removal of a product from the wish list."""
        product = MPProduct(
            name=product_name,
            sku=sku,
            quantity=quantity,
            price=float(price) if price is not None else None,
        )
        return self._log_commerce_event(
            MPCommerceEventAction.REMOVE_FROM_WISHLIST, [product], additional_properties
        )

    # -------------------------------------------------------------------------
    # Events
    # -------------------------------------------------------------------------

    def _log_generated_event(self, properties: Properties) -> TrackingResult:
        try:
            event = build_event(properties)
        except EventGenerationError as e:
            self._logger.warning(
                "Event generation failed",
                extra={"key": e.key, "reason": e.description},
            )
            return TrackingResult.error(e.description)
        except Exception:
            self._logger.exception("Unexpected failure while generating event")
            return TrackingResult.error(UNKNOWN_ERROR_MESSAGE)

        self._logger.debug(
            "Forwarding event",
            extra={"event": event.name, "event_type": event.event_type.name},
        )
        self.client.log_event(event)
        return TrackingResult.success()

    def track_event(
        self, event: str, properties: Optional[Properties] = None
    ) -> TrackingResult:
        """Track a named event.

        ``properties`` is required and must contain an ``eventType`` holding
        an MPEventType; ``event`` becomes the event's name, replacing any
        ``name`` key in the bag. Use ``event_data()`` to build the bag.

        Returns:
            An error result if ``properties`` is None or the event cannot be
            generated from it, otherwise success
        """
        if properties is None:
            self._logger.warning(
                "Event tracked without properties", extra={"event": event}
            )
            return TrackingResult.error(MISSING_PROPERTIES_MESSAGE)

        event_properties = copy_properties(properties)
        event_properties[EventKeys.NAME.value] = event
        return self._log_generated_event(event_properties)

    def track_location(
        self, location: Location, properties: Optional[Properties] = None
    ) -> TrackingResult:
        """Track the user's location as an MPEvent.

        ``properties`` must provide both ``name`` and ``eventType``. The
        location's latitude and longitude are added to the event's info.
        """
        event_properties = copy_properties(properties)
        event_properties[LATITUDE_KEY] = location.latitude
        event_properties[LONGITUDE_KEY] = location.longitude
        return self._log_generated_event(event_properties)

    # -------------------------------------------------------------------------
    # Everything else
    # -------------------------------------------------------------------------

    def log_error(
        self, error: str, properties: Optional[Properties] = None
    ) -> TrackingResult:
        """Log an error message through mParticle."""
        self._logger.debug("Forwarding error", extra={"error": error})
        self.client.log_error(error, copy_properties(properties) or None)
        return TrackingResult.success()

    def track_page_view(
        self, page_view: str, properties: Optional[Properties] = None
    ) -> TrackingResult:
        """Track a page view as an mParticle screen view."""
        self._logger.debug("Forwarding screen view", extra={"screen": page_view})
        self.client.log_screen(page_view, copy_properties(properties) or None)
        return TrackingResult.success()

    def increase_lifetime_value(
        self,
        amount: float,
        item: Optional[str] = None,
        properties: Optional[Properties] = None,
    ) -> TrackingResult:
        """Increase the user's lifetime value by ``amount``.

        A missing ``item`` is sent as an empty event name.
        """
        self._logger.debug(
            "Forwarding lifetime value increase",
            extra={"amount": amount, "item": item},
        )
        self.client.log_ltv_increase(
            amount, item or "", copy_properties(properties) or None
        )
        return TrackingResult.success()

    def set_user_attribute(self, key: str, value: Any) -> TrackingResult:
        """Set a user attribute through mParticle."""
        self._logger.debug("Forwarding user attribute", extra={"key": key})
        self.client.set_user_attribute(key, value)
        return TrackingResult.success()
