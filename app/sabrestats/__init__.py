"""SabreStats: poll player stats, keep the latest snapshot, post it to a webhook."""

from .version import __version__

__all__ = ["__version__"]
