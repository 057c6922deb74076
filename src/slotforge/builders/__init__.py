from .gui_builder import GUIBuilder  # noqa: F401

__all__ = ["GUIBuilder"]
