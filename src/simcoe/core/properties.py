"""Property bag type shared by all tracking calls.

A property bag is a mapping of string keys to loosely typed values. It is
built by the caller for a single tracking call and consumed by the tracker
while converting it into vendor objects; trackers never keep a reference to
it and never mutate the caller's mapping.
"""

from numbers import Real
from typing import Any, Dict, Mapping, Optional, Tuple

Properties = Dict[str, Any]


def copy_properties(properties: Optional[Mapping[str, Any]]) -> Properties:
    """Return a shallow, mutable copy of ``properties`` (empty for None)."""
    return dict(properties) if properties else {}


def matches_type(value: Any, expected: Tuple[type, ...]) -> bool:
    """Check ``value`` against a key's expected types.

    ``bool`` only satisfies an expectation that names ``bool`` explicitly,
    even though it subclasses ``int``.
    """
    if isinstance(value, bool):
        return bool in expected
    if float in expected and isinstance(value, Real):
        return True
    return isinstance(value, expected)
