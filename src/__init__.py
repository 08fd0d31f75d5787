"""
docdirectives - Component API documentation extractor

Converts per-component API documentation pages (markdown, zh/en) into
structured directive descriptors for documentation and search tooling.
"""

__version__ = "1.0.0"

from .lib import DirectiveExtractor, SectionLocator, PropertyParser, TokenStream, LOG, state_connectToLogger

__all__ = [
    "DirectiveExtractor",
    "SectionLocator",
    "PropertyParser",
    "TokenStream",
    "LOG",
    "state_connectToLogger",
    "__version__",
]
