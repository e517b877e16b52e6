"""Events, button hitboxes, context, hook state and widget layout helpers for terminal UIs."""

__version__ = "0.1.0"

__all__ = [
    "context",
    "events",
    "handles",
    "interactions",
    "layout",
    "registry",
    "scope",
]