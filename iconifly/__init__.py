"""
Iconifly - build SVG icons and graphics into themeable React components.
"""

__version__ = "0.3.0"

version_info = tuple(map(int, __version__.split(".")))


from ._config import config  # noqa
from . import build  # noqa - the build pipeline
