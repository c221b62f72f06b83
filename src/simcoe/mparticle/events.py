"""Generation of MPEvent objects from property bags.

Unlike the commerce converters, event generation validates its input: the
``eventType`` and ``name`` keys are required, and a bag missing either (or
holding a malformed value) raises an EventGenerationError naming the key.

Functions:
    build_event: Validate a property bag and build an MPEvent
    event_data: Build a property bag using the recognised event keys
"""

from collections.abc import Mapping
from datetime import datetime
from typing import Any, Dict, Optional

from simcoe.core.exceptions import InvalidEventKeyError, MissingEventKeyError
from simcoe.core.properties import Properties, matches_type
from simcoe.mparticle.keys import EventKeys
from simcoe.mparticle.models import MPEvent, MPEventType

_OPTIONAL_KEYS = (
    EventKeys.CATEGORY,
    EventKeys.DURATION,
    EventKeys.START_TIME,
    EventKeys.END_TIME,
)
_RECOGNISED_KEYS = frozenset(key.value for key in EventKeys.all_keys())


def _require(properties: Properties, key: EventKeys) -> Any:
    if key.value not in properties or properties[key.value] is None:
        raise MissingEventKeyError(key.value)

    value = properties[key.value]
    if not matches_type(value, key.expected_types):
        raise InvalidEventKeyError(key.value, value, key.expected_types)
    return value


def build_event(properties: Properties) -> MPEvent:
    """Build an MPEvent from a property bag.

    ``eventType`` is checked before ``name``. Recognised optional keys are
    applied when they hold the expected type and dropped otherwise. Every
    unrecognised key is copied into ``MPEvent.info``, on top of the mapping
    passed under ``info`` if there is one.

    Args:
        properties: The event's property bag, including its name

    Returns:
        The generated event

    Raises:
        MissingEventKeyError: If ``eventType`` or ``name`` is absent
        InvalidEventKeyError: If ``eventType`` is not an MPEventType or
            ``name`` is not a non-empty string
    """
    event_type = _require(properties, EventKeys.EVENT_TYPE)
    name = _require(properties, EventKeys.NAME)
    if not name.strip():
        raise InvalidEventKeyError(
            EventKeys.NAME.value,
            name,
            EventKeys.NAME.expected_types,
            reason="must not be empty",
        )

    event = MPEvent(name=name, event_type=event_type)

    for key in _OPTIONAL_KEYS:
        value = key.read(properties)
        if value is not None:
            setattr(event, key.attribute, value)

    info = EventKeys.INFO.read(properties)
    if info is not None:
        event.info.update(info)
    event.info.update(
        (key, value) for key, value in properties.items() if key not in _RECOGNISED_KEYS
    )

    return event


def event_data(
    event_type: Optional[MPEventType] = None,
    category: Optional[str] = None,
    duration: Optional[float] = None,
    start_time: Optional[datetime] = None,
    end_time: Optional[datetime] = None,
    info: Optional[Mapping] = None,
    **extra: Any,
) -> Properties:
    """Build a property bag for ``track_event`` / ``track_location``.

    Arguments left as None are omitted. Extra keyword arguments are added
    verbatim and end up in the event's info.

    Example:
        >>> tracker.track_event(
        ...     "Button Tapped",
        ...     event_data(event_type=MPEventType.NAVIGATION, screen="home"),
        ... )
    """
    data: Dict[str, Any] = {
        EventKeys.EVENT_TYPE.value: event_type,
        EventKeys.CATEGORY.value: category,
        EventKeys.DURATION.value: duration,
        EventKeys.START_TIME.value: start_time,
        EventKeys.END_TIME.value: end_time,
        EventKeys.INFO.value: dict(info) if info is not None else None,
    }
    data.update(extra)
    return {key: value for key, value in data.items() if value is not None}
