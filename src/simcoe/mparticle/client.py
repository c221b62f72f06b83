"""Outbound interface of the mParticle tracker.

The tracker depends only on these call shapes. Production code passes an
object wrapping the vendor SDK's shared instance; tests pass a mock. Every
call is synchronous, fire-and-forget and returns nothing the tracker
inspects.
"""

from typing import Any, Optional, Protocol, runtime_checkable

from simcoe.core.properties import Properties
from simcoe.mparticle.models import (
    MPCommerceEvent,
    MPEnvironment,
    MPEvent,
    MPInstallationType,
)


@runtime_checkable
class MParticleClient(Protocol):
    """Protocol for the mParticle SDK instance."""

    def start(
        self,
        key: str,
        secret: str,
        installation_type: MPInstallationType,
        environment: MPEnvironment,
        proxy_app_delegate: bool,
    ) -> None:
        """Initialize the SDK with the workspace credentials."""
        ...

    def log_commerce_event(self, event: MPCommerceEvent) -> None:
        """Log a commerce event."""
        ...

    def log_event(self, event: MPEvent) -> None:
        """Log a custom event."""
        ...

    def log_error(self, message: str, info: Optional[Properties]) -> None:
        """Log an application error."""
        ...

    def log_screen(self, name: str, info: Optional[Properties]) -> None:
        """Log a screen (page) view."""
        ...

    def log_ltv_increase(
        self, amount: float, event_name: str, info: Optional[Properties]
    ) -> None:
        """Increase the user's lifetime value."""
        ...

    def set_user_attribute(self, key: str, value: Any) -> None:
        """Set an attribute on the current user."""
        ...
