"""Parse XDG Desktop Entry (.desktop) files into typed values."""

from xdgparse.parsers import *  # noqa: F401,F403
from xdgparse.parsers import __all__

__version__ = "0.1.0"
