"""leaguestats - music league statistics engine."""

from leaguestats.__version__ import __version__

__all__ = ["__version__"]
