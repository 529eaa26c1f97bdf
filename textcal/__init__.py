"""textcal - multi-year plain text calendar renderer.

Lays out Gregorian months as fixed-size text blocks tiled into rows, the
way ``cal -y`` does, with configurable columns, cell width and gaps.
"""

__version__ = "1.0.0"
__author__ = "textcal contributors"
__description__ = "Plain text multi-year calendar renderer"

# Package metadata
__all__ = [
    "__author__",
    "__description__",
    "__version__",
]
