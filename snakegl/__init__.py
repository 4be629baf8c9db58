"""OpenGL version parsing, extension lookup and entry-point loading up to core 3.3."""

__version__ = "0.1.0"
__all__ = ["__version__"]