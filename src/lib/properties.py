"""
Property table row parser

Turns one raw API table row (name, description, type, default cells)
into a typed DirectiveProperty.

The parser operates in three phases:
1. Name: detect the binding syntax of the name cell ([x], (x), [(x)], #x)
2. Type: clean and split the type cell, classify it, build enum choices
3. Fix-ups: empty defaults, two-way binding override, final name check

Rows that do not fit (wrong cell count, ignored names, names without an
identifier) are skipped rather than reported as errors.

Example:
    >>> parser = PropertyParser()
    >>> prop = parser.property_parse(['`[nzSize]`', 'Size', "`'small' 丨 'large'`", "`'large'`"])
    >>> prop.name, prop.type.value, [c.value for c in prop.type_definition]
    ('nzSize', 'string', ['small', 'large'])
"""

import re
from typing import Callable, List, Optional, Sequence, Tuple

from ..models.directives import DirectiveProperty, InputAttrType, PropertyType, TypeChoice, tag_clean
from ..models.parser import NameForm, NameMatch, TypeSplit
from ..models.rules import DEFAULT_RULES, ExtractionRules
from .log import LOG


ROW_WIDTH = 4

# Wider than _VALID_NAME: the first form found is final, so `[nz_foo] [nzBar]`
# captures nz_foo and the row is then dropped by the name check
_NAME_FORMS = re.compile(
    r"\[\((?P<io>[\w.$-]+)\)\]"   # [(x)]
    r"|\[(?P<i>[\w.$-]+)\]"       # [x]
    r"|\((?P<o>[\w.$-]+)\)"       # (x)
    r"|#(?P<t>[\w.$-]+)"          # #x
)
_NAME_GROUPS = {
    "io": NameForm.INPUT_OUTPUT,
    "i": NameForm.INPUT,
    "o": NameForm.OUTPUT,
    "t": NameForm.TEMPLATE_REF,
}
_IDENTIFIER_CHAR = re.compile(r"[A-Za-z0-9]")
_VALID_NAME = re.compile(r"^[-a-zA-Z0-9]+$")

# First matching rule wins
TYPE_RULES: Tuple[Tuple[Callable[[str], bool], PropertyType], ...] = (
    (lambda token: token.startswith("TemplateRef"), PropertyType.TEMPLATE_REF),
    (lambda token: token.startswith("("), PropertyType.FUNCTION),
    (lambda token: token.startswith("{"), PropertyType.OBJECT),
    (lambda token: token.startswith("EventEmitter"), PropertyType.EVENT_EMITTER),
    (lambda token: token.startswith("Array"), PropertyType.ARRAY),
    (lambda token: token.startswith("Enum"), PropertyType.ENUM),
)
LITERAL_TYPES = {
    "boolean": PropertyType.BOOLEAN,
    "number": PropertyType.NUMBER,
    "Date": PropertyType.DATE,
    "HTMLElement": PropertyType.HTML_ELEMENT,
}
# A union containing any of these is a free type, not a set of choices
UNION_BLOCKERS = frozenset({"any", "string", "EventEmitter", "HTMLElement"})


def name_match(cell: str) -> NameMatch:
    """
    Detect the binding syntax of a property name cell

    The first bracket form found anywhere in the cell wins. A cell with
    no bracket form is taken as a bare name.

    Args:
        cell: Raw name cell (e.g., "`[(nzVisible)]`")

    Returns:
        NameMatch; form is NameForm.NONE when the cell has no identifier

    Example:
        >>> name_match("`(nzClick)`")
        NameMatch(form=<NameForm.OUTPUT: '(x)'>, name='nzClick')
    """
    match = _NAME_FORMS.search(cell)
    if match:
        group = match.lastgroup
        return NameMatch(form=_NAME_GROUPS[group], name=match.group(group))

    bare = cell.strip().strip("`").strip()
    if not _IDENTIFIER_CHAR.search(bare):
        return NameMatch(form=NameForm.NONE)
    return NameMatch(form=NameForm.BARE, name=bare)


def type_clean(cell: str) -> str:
    """Remove backtick quoting and normalize pipe look-alikes"""
    text = tag_clean(cell.strip())
    return text.replace("丨", "|").replace("\\|", "|")


def member_clean(member: str) -> str:
    return member.strip().strip("`").strip().strip("'\"").strip()


def type_split(cell: str) -> TypeSplit:
    """
    Clean a type cell and split it into union/enum members

    `Enum{...}` payloads are unwrapped first. Members are separated by
    commas when the text has one, else by pipes.

    Example:
        >>> type_split("Enum{'a','b'}")
        TypeSplit(raw="Enum{'a','b'}", members=['a', 'b'], enum_wrapped=True)
    """
    raw = type_clean(cell)
    text = raw
    enum_wrapped = text.startswith("Enum")
    if enum_wrapped:
        text = tag_clean(text[len("Enum"):].strip(), "{")

    separator = "," if "," in text else "|"
    members = [member_clean(member) for member in text.split(separator)]
    return TypeSplit(raw=raw, members=members, enum_wrapped=enum_wrapped)


def type_classify(split: TypeSplit) -> PropertyType:
    """Classify a type by its lead token; defaults to string"""
    token = split.lead_token
    for predicate, property_type in TYPE_RULES:
        if predicate(token):
            return property_type
    return LITERAL_TYPES.get(token, PropertyType.STRING)


def typeDefinition_build(
    property_type: PropertyType, members: Sequence[str]
) -> Optional[List[TypeChoice]]:
    """
    Choices of an enum-like type

    Built for Enum types, and for string unions of literals, which are
    string types with several members none of which is a free type.
    Empty and "null" members are left out.
    """
    is_union = (
        property_type is PropertyType.STRING
        and len(members) > 1
        and not UNION_BLOCKERS.intersection(members)
    )
    if property_type is not PropertyType.ENUM and not is_union:
        return None
    return [
        TypeChoice(value=member, label=member)
        for member in members
        if member and member != "null"
    ]


class PropertyParser:
    """
    Parser for API table rows

    Holds the rule tables (ignored names, empty-default spellings,
    two-way binding markers); the row logic itself is stateless.
    """

    def __init__(self, rules: ExtractionRules = DEFAULT_RULES) -> None:
        self.rules = rules

    def properties_parse(self, rows: Sequence[Sequence[str]]) -> List[DirectiveProperty]:
        """
        Parse every well-formed row of a table

        Args:
            rows: Table body rows as cell texts

        Returns:
            Properties in row order; rows not exactly four cells wide and
            rows rejected by property_parse() are skipped
        """
        properties = []
        for row in rows:
            if len(row) != ROW_WIDTH:
                LOG(f"Skipping {len(row)}-cell row: {list(row)}", level=3)
                continue
            prop = self.property_parse([cell or "" for cell in row])
            if prop is not None:
                properties.append(prop)
        return properties

    def property_parse(self, cells: Sequence[str]) -> Optional[DirectiveProperty]:
        """
        Parse one four-cell row into a DirectiveProperty

        Args:
            cells: [name, description, type, default] cell texts

        Returns:
            DirectiveProperty, or None if the row is not a property
        """
        name_cell, description_cell, type_cell, default_cell = cells

        if name_cell in self.rules.ignored_properties:
            return None

        named = name_match(name_cell)
        if not named.matched:
            LOG(f"No property name in cell '{name_cell}'", level=3)
            return None

        split = type_split(type_cell)
        property_type = type_classify(split)
        description = description_cell.strip()

        input_type = named.input_type
        if self.twoWay_is(named.name, description):
            input_type = InputAttrType.INPUT_OUTPUT

        if not _VALID_NAME.match(named.name):
            LOG(f"Invalid property name '{named.name}'", level=3)
            return None

        return DirectiveProperty(
            name=named.name,
            input_type=input_type,
            description=description,
            type=property_type,
            type_raw=split.raw,
            default=self.default_normalize(default_cell),
            type_definition=typeDefinition_build(property_type, split.members),
        )

    def default_normalize(self, cell: str) -> str:
        """Empty-default spellings (`-`, 无, ...) become ''"""
        value = cell.strip()
        if value in self.rules.empty_defaults:
            return ""
        return value

    def twoWay_is(self, name: str, description: str) -> bool:
        """True for ngModel and for descriptions that mention two-way binding"""
        if name == "ngModel":
            return True
        return any(marker in description for marker in self.rules.two_way_markers)
