"""
Parser-specific data models

Type-safe structures for extraction operations and return values.
"""

from enum import Enum
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, TYPE_CHECKING

from .directives import InputAttrType

if TYPE_CHECKING:
    from ..lib.tokens import TokenStream


class NameForm(Enum):
    """
    Syntax found in a property name cell

    NONE is the explicit "no identifier" result; rows with it are dropped.
    """
    INPUT = "[x]"
    OUTPUT = "(x)"
    INPUT_OUTPUT = "[(x)]"
    TEMPLATE_REF = "#x"
    BARE = "x"
    NONE = ""


_FORM_INPUT_TYPES = {
    NameForm.INPUT: InputAttrType.INPUT,
    NameForm.OUTPUT: InputAttrType.OUTPUT,
    NameForm.INPUT_OUTPUT: InputAttrType.INPUT_OUTPUT,
    NameForm.TEMPLATE_REF: InputAttrType.TEMPLATE_REF,
    NameForm.BARE: InputAttrType.INPUT,
}


@dataclass(frozen=True)
class NameMatch:
    """
    Result of matching a property name cell

    Returned by name_match(). `form` tells which bracket syntax matched,
    `name` is the identifier inside it.

    Example:
        For cell "`[(nzValue)]`":
        NameMatch(form=NameForm.INPUT_OUTPUT, name="nzValue")

        For cell "-":
        NameMatch(form=NameForm.NONE, name="")
    """
    form: NameForm
    name: str = ""

    @property
    def matched(self) -> bool:
        return self.form is not NameForm.NONE

    @property
    def input_type(self) -> InputAttrType:
        return _FORM_INPUT_TYPES.get(self.form, InputAttrType.INPUT)


@dataclass(frozen=True)
class TypeSplit:
    """
    Result of cleaning and splitting a property type cell

    Attributes:
        raw: Cleaned cell text, kept as the property's type_raw
        members: Union/enum members, quotes and backticks trimmed
        enum_wrapped: Cell was written as Enum{...}

    Example:
        For cell "`'small' 丨 'large'`":
        TypeSplit(raw="'small' | 'large'", members=['small', 'large'],
                  enum_wrapped=False)
    """
    raw: str
    members: List[str]
    enum_wrapped: bool = False

    @property
    def lead_token(self) -> str:
        """First whitespace-delimited token of the first member"""
        if self.enum_wrapped:
            return "Enum"
        if not self.members or not self.members[0]:
            return ""
        return self.members[0].split()[0]


@dataclass(frozen=True)
class FrontMatter:
    """
    A document split into its YAML front matter and markdown body

    Attributes:
        meta: Parsed front matter mapping (empty when absent)
        content: Markdown body following the front matter
    """
    meta: Dict[str, Any]
    content: str


@dataclass
class DocumentContext:
    """
    Per-document state threaded through every extraction call

    Attributes:
        path: Source document path
        zone: Locale zone ("zh" or "en")
        meta: Front matter mapping
        stream: Token stream over the markdown body
    """
    path: Path
    zone: str
    stream: 'TokenStream'  # Forward reference for type checking
    meta: Dict[str, Any] = field(default_factory=dict)
