"""Firebase Remote Config admin client."""

__version__ = "0.1.0"

__all__ = ["__version__"]
