from .constants import KEDIT_VERSION as __version__

__all__ = ["__version__"]
