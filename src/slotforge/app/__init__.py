from .bootstrap import GUIContext, create_context, qt_available  # noqa: F401

__all__ = ["GUIContext", "create_context", "qt_available"]
