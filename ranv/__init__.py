"""A small layered engine core: events, layers, a layer stack, logging and a pygame window."""

__version__ = "0.1.0"
__all__ = ["__version__"]