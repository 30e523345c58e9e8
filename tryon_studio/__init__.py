"""Virtual Try-On Studio."""

from .config import ConfigurationError, StudioConfig, load_config
from .studio import TryOnStudio

__version__ = "1.0.0"

__all__ = [
    "ConfigurationError",
    "StudioConfig",
    "load_config",
    "TryOnStudio",
]
