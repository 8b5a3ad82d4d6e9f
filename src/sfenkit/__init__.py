"""sfenkit: SFEN / USI notation for shogi positions and game records."""

from sfenkit.core import *  # noqa: F403
from sfenkit.core import __all__

__version__ = "0.1.0"
