"""Draw shapes and bitmap-font characters as ASCII art."""

__version__ = "0.1.0"
__all__ = ["chars", "cli", "fonts", "shapes"]