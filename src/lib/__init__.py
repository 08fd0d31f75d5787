"""
docdirectives - Component API documentation extractor

Turns per-component API documentation pages into directive descriptors.
"""

from .. import __version__
from .extractor import DirectiveExtractor, zone_resolve
from .locator import SectionLocator
from .properties import PropertyParser
from .tokens import TokenStream
from .frontmatter import frontMatter_split
from .log import LOG, state_connectToLogger

__all__ = [
    "DirectiveExtractor",
    "SectionLocator",
    "PropertyParser",
    "TokenStream",
    "frontMatter_split",
    "zone_resolve",
    "LOG",
    "state_connectToLogger",
    "__version__",
]
