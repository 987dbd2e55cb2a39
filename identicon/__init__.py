"""
Deterministic identicons: an input string becomes a symmetric 5x5 PNG.
"""
from .pipeline.generate_identicon import generate, render

__version__ = "1.0.0"

__all__ = ["generate", "render", "__version__"]
