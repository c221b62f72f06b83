"""Vendor-independent foundation of the tracking facade.

Submodules:
    base: Tracking protocols, results and domain inputs
    config: Configuration loading and validation
    exceptions: Custom exception hierarchy
    properties: Property bag type and helpers
"""

__all__ = [
    "base",
    "config",
    "exceptions",
    "properties",
]
