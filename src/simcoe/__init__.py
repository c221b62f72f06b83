"""simcoe.

Analytics tracking facade: vendor-neutral tracking protocols returning a
uniform TrackingResult, plus an mParticle tracker that forwards each call to
an injected SDK client. Importing the package does not import or start any
vendor SDK.
"""

from simcoe.core.base import (
    Location,
    ProductConvertible,
    SimcoeProduct,
    TrackingResult,
    TrackingStatus,
)
from simcoe.core.properties import Properties

__version__ = "0.1.0"

__all__ = [
    "Location",
    "ProductConvertible",
    "Properties",
    "SimcoeProduct",
    "TrackingResult",
    "TrackingStatus",
    "core",
    "mparticle",
    "utils",
]
