"""Display module for rendering diagnostic output.

This module provides:
- console: Shared Rich console instance
- CapabilityRenderer: Terminal capability tables for the probe command
"""

from cli.display.capability_renderer import CapabilityRenderer, StreamCapability
from cli.display.console import console

__all__ = [
    # Console
    "console",
    # Renderers
    "CapabilityRenderer",
    # Data classes
    "StreamCapability",
]
