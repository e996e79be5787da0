"""Full-screen board UI.

The loop is message driven: keys are mapped to messages per mode, the
router applies each message to the session state, then the screen is
redrawn from that state.
"""
from .navigator import Navigator
from .router import Router
from .state import UIState

# Import mode handlers to register them with the router
from . import modes  # noqa: E402,F401

__all__ = ["Navigator", "Router", "UIState"]
