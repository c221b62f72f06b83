"""Tests for the mParticle tracker."""

from unittest.mock import Mock, patch

import pytest

from simcoe.core.base import Location, SimcoeProduct, TrackingResult
from simcoe.mparticle import (
    MISSING_PROPERTIES_MESSAGE,
    UNKNOWN_ERROR_MESSAGE,
    MParticle,
    MParticleClient,
)
from simcoe.mparticle.models import (
    MPCommerceEvent,
    MPCommerceEventAction,
    MPEnvironment,
    MPEvent,
    MPEventType,
    MPInstallationType,
    MPProduct,
)


def _logged_commerce_event(mock_client) -> MPCommerceEvent:
    mock_client.log_commerce_event.assert_called_once()
    (event,) = mock_client.log_commerce_event.call_args.args
    return event


def _logged_event(mock_client) -> MPEvent:
    mock_client.log_event.assert_called_once()
    (event,) = mock_client.log_event.call_args.args
    return event


def test_init_starts_sdk_with_defaults():
    """Test construction starts the SDK once with default settings."""
    client = Mock(spec=MParticleClient)
    tracker = MParticle(client, key="k", secret="s")

    client.start.assert_called_once_with(
        "k", "s", MPInstallationType.AUTODETECT, MPEnvironment.AUTO_DETECT, True
    )
    assert tracker.name == "mParticle"


def test_init_passes_explicit_settings():
    """Test explicit start-up settings are forwarded."""
    client = Mock(spec=MParticleClient)
    MParticle(
        client,
        key="k",
        secret="s",
        installation_type=MPInstallationType.KNOWN_UPGRADE,
        environment=MPEnvironment.PRODUCTION,
        proxy_app_delegate=False,
    )
    client.start.assert_called_once_with(
        "k", "s", MPInstallationType.KNOWN_UPGRADE, MPEnvironment.PRODUCTION, False
    )


# -----------------------------------------------------------------------------
# Event tracking
# -----------------------------------------------------------------------------


def test_track_event_success_forwards_named_event(tracker, mock_client):
    """Test a valid event is forwarded with the injected name."""
    result = tracker.track_event("Button Tapped", {"eventType": MPEventType.NAVIGATION})

    assert result == TrackingResult.success()
    event = _logged_event(mock_client)
    assert event.name == "Button Tapped"
    assert event.event_type is MPEventType.NAVIGATION


def test_track_event_without_properties_is_error(tracker, mock_client):
    """Test None properties are rejected before building an event."""
    result = tracker.track_event("Button Tapped", None)

    assert result == TrackingResult.error(MISSING_PROPERTIES_MESSAGE)
    assert "properties" in result.message
    mock_client.log_event.assert_not_called()


def test_track_event_missing_event_type_is_error(tracker, mock_client):
    """Test a generation error is reported through the result."""
    result = tracker.track_event("Button Tapped", {"screen": "home"})

    assert not result.succeeded
    assert "eventType" in result.message
    mock_client.log_event.assert_not_called()


def test_track_event_invalid_event_type_is_error(tracker, mock_client):
    """Test an eventType of the wrong type is reported."""
    result = tracker.track_event("Button Tapped", {"eventType": "navigation"})

    assert not result.succeeded
    assert "eventType" in result.message
    mock_client.log_event.assert_not_called()


def test_track_event_name_overrides_bag_and_bag_untouched(tracker, mock_client):
    """Test the event argument replaces any name key without mutating the bag."""
    properties = {"eventType": MPEventType.OTHER, "name": "stale", "screen": "home"}
    tracker.track_event("Fresh", properties)

    event = _logged_event(mock_client)
    assert event.name == "Fresh"
    assert event.info == {"screen": "home"}
    assert properties["name"] == "stale"


def test_track_event_empty_name_is_error(tracker, mock_client):
    """Test an empty event name is rejected."""
    result = tracker.track_event("", {"eventType": MPEventType.OTHER})
    assert not result.succeeded
    assert "name" in result.message


def test_track_event_unknown_failure_uses_generic_message(tracker, mock_client):
    """Test unexpected builder failures map to the generic message."""
    with patch(
        "simcoe.mparticle.handler.build_event", side_effect=RuntimeError("kaboom")
    ):
        result = tracker.track_event("Button Tapped", {"eventType": MPEventType.OTHER})

    assert result == TrackingResult.error(UNKNOWN_ERROR_MESSAGE)
    mock_client.log_event.assert_not_called()


def test_track_location_adds_coordinates(tracker, mock_client):
    """Test location coordinates are added to the event info."""
    result = tracker.track_location(
        Location(43.65, -79.38),
        {"eventType": MPEventType.LOCATION, "name": "Store Visit", "store": 12},
    )

    assert result.succeeded
    event = _logged_event(mock_client)
    assert event.name == "Store Visit"
    assert event.event_type is MPEventType.LOCATION
    assert event.info == {"store": 12, "latitude": 43.65, "longitude": -79.38}


def test_track_location_without_properties_is_error(tracker, mock_client):
    """Test a location without event properties cannot be generated."""
    result = tracker.track_location(Location(0.0, 0.0), None)

    assert not result.succeeded
    assert "eventType" in result.message
    mock_client.log_event.assert_not_called()


def test_track_location_without_name_is_error(tracker, mock_client):
    """Test a location bag must carry its own name."""
    result = tracker.track_location(
        Location(0.0, 0.0), {"eventType": MPEventType.LOCATION}
    )
    assert not result.succeeded
    assert "name" in result.message


# -----------------------------------------------------------------------------
# Commerce
# -----------------------------------------------------------------------------


@pytest.mark.parametrize(
    "method, action",
    [
        ("log_add_to_cart", MPCommerceEventAction.ADD_TO_CART),
        ("log_remove_from_cart", MPCommerceEventAction.REMOVE_FROM_CART),
        ("log_view_detail", MPCommerceEventAction.VIEW_DETAIL),
    ],
)
def test_single_product_commerce_calls(
    tracker, mock_client, sample_product, method, action
):
    """Test single product commerce calls always succeed."""
    result = getattr(tracker, method)(sample_product, {"currency": "CAD"})

    assert result == TrackingResult.success()
    event = _logged_commerce_event(mock_client)
    assert event.action is action
    assert [p.sku for p in event.products] == ["SKU-001"]
    assert event.currency == "CAD"


@pytest.mark.parametrize(
    "method, action",
    [
        ("track_checkout_event", MPCommerceEventAction.CHECKOUT),
        ("track_purchase_event", MPCommerceEventAction.PURCHASE),
    ],
)
def test_multi_product_commerce_calls(
    tracker, mock_client, sample_product, method, action
):
    """Test checkout and purchase convert every product."""
    other = SimcoeProduct(product_name="Sock", product_id="SKU-002", price=5)
    result = getattr(tracker, method)(
        [sample_product, other], {"revenue": 184.0, "transactionId": "T-1"}
    )

    assert result.succeeded
    event = _logged_commerce_event(mock_client)
    assert event.action is action
    assert [p.sku for p in event.products] == ["SKU-001", "SKU-002"]
    assert event.products[1].price == 5.0
    assert event.transaction_attributes.revenue == 184.0
    assert event.transaction_attributes.transaction_id == "T-1"


def test_purchase_without_properties_always_succeeds(
    tracker, mock_client, sample_product
):
    """Test purchase with no properties has no validation path."""
    result = tracker.track_purchase_event([sample_product], None)

    assert result == TrackingResult.success()
    event = _logged_commerce_event(mock_client)
    assert event.transaction_attributes is None


def test_purchase_with_malformed_properties_still_succeeds(
    tracker, mock_client, sample_product
):
    """Test malformed transaction keys are skipped, not reported."""
    result = tracker.track_purchase_event([sample_product], {"revenue": "lots"})

    assert result.succeeded
    assert _logged_commerce_event(mock_client).transaction_attributes is None


@pytest.mark.parametrize(
    "method, action",
    [
        ("log_add_to_wishlist", MPCommerceEventAction.ADD_TO_WISHLIST),
        ("log_remove_from_wishlist", MPCommerceEventAction.REMOVE_FROM_WISHLIST),
    ],
)
def test_wishlist_calls(tracker, mock_client, method, action):
    """Test wish list calls build the product from their arguments."""
    result = getattr(tracker, method)(
        "Trail Runner", "SKU-001", 1, 89, {"productListName": "Favourites"}
    )

    assert result.succeeded
    event = _logged_commerce_event(mock_client)
    assert event.action is action
    assert event.products == [
        MPProduct(name="Trail Runner", sku="SKU-001", quantity=1, price=89.0)
    ]
    assert event.product_list_name == "Favourites"


def test_wishlist_without_price(tracker, mock_client):
    """Test wish list price is optional."""
    tracker.log_add_to_wishlist("Mug", "M-1", 3)
    assert _logged_commerce_event(mock_client).products[0].price is None


# -----------------------------------------------------------------------------
# Other calls
# -----------------------------------------------------------------------------


def test_log_error(tracker, mock_client):
    """Test errors are forwarded with a copy of the properties."""
    properties = {"code": 500}
    result = tracker.log_error("Checkout failed", properties)

    assert result.succeeded
    mock_client.log_error.assert_called_once_with("Checkout failed", {"code": 500})
    assert mock_client.log_error.call_args.args[1] is not properties


def test_log_error_without_properties(tracker, mock_client):
    """Test errors without properties forward None."""
    assert tracker.log_error("Oops").succeeded
    mock_client.log_error.assert_called_once_with("Oops", None)


def test_track_page_view(tracker, mock_client):
    """Test page views are logged as screens."""
    assert tracker.track_page_view("Home", {"tab": "deals"}).succeeded
    mock_client.log_screen.assert_called_once_with("Home", {"tab": "deals"})


def test_increase_lifetime_value(tracker, mock_client):
    """Test lifetime value increases are forwarded."""
    assert tracker.increase_lifetime_value(25.0, "Gift Card", {"a": 1}).succeeded
    mock_client.log_ltv_increase.assert_called_once_with(25.0, "Gift Card", {"a": 1})


def test_increase_lifetime_value_without_item(tracker, mock_client):
    """Test a missing item is sent as an empty name."""
    tracker.increase_lifetime_value(10.0)
    mock_client.log_ltv_increase.assert_called_once_with(10.0, "", None)


def test_set_user_attribute(tracker, mock_client):
    """Test user attributes are forwarded."""
    assert tracker.set_user_attribute("tier", "gold").succeeded
    mock_client.set_user_attribute.assert_called_once_with("tier", "gold")


def test_each_call_makes_exactly_one_client_call(tracker, mock_client, sample_product):
    """Test the tracker issues one SDK call per tracking call."""
    tracker.log_add_to_cart(sample_product)
    tracker.track_event("E", {"eventType": MPEventType.OTHER})
    tracker.track_page_view("Home")
    assert len(mock_client.method_calls) == 3
