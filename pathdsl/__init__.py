"""pathdsl - parse, normalize and compose delimiter-separated paths."""
from .core import *  # noqa: F401,F403
from .core import __all__ as _core_all
from .config import PathConfig, load_config

__version__ = "0.1.0"

__all__ = list(_core_all) + ['PathConfig', 'load_config']
