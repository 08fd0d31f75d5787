"""
Models package for docdirectives

Contains data structures and type definitions for the extraction pipeline.
"""

from .state import ProgramState, pipeline
from .directives import (
    Directive,
    DirectiveKind,
    DirectiveProperty,
    InputAttrType,
    PropertyType,
    TypeChoice,
)
from .errors import DocumentError, LocaleError
from .parser import DocumentContext, FrontMatter, NameForm, NameMatch, TypeSplit
from .rules import DEFAULT_RULES, SUPPORTED_ZONES, ExtractionRules, LibrarySource

__all__ = [
    "ProgramState",
    "pipeline",
    "Directive",
    "DirectiveKind",
    "DirectiveProperty",
    "InputAttrType",
    "PropertyType",
    "TypeChoice",
    "DocumentError",
    "LocaleError",
    "DocumentContext",
    "FrontMatter",
    "NameForm",
    "NameMatch",
    "TypeSplit",
    "DEFAULT_RULES",
    "SUPPORTED_ZONES",
    "ExtractionRules",
    "LibrarySource",
]
