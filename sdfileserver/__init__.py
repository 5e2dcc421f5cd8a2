"""Wire format, status panel model and mountable storage for a chunked TCP file server."""

__version__ = "0.1.0"
__all__ = ["__version__"]