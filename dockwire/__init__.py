"""Exception classes for a Docker Engine API client, in dockwire.errors."""

__version__ = "0.1.0"
__all__ = ["errors"]