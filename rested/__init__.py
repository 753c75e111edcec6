"""Interactive terminal REST client with requests saved in JSON collections."""

__version__ = "0.1.0"
__all__ = ["__version__"]