"""
Directive and property record models

Defines the structures extracted from component API documentation:
one Directive per documented component/attribute selector, each holding
the DirectiveProperty rows harvested from its API table.
"""

import copy
from enum import Enum
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional


class DirectiveKind(Enum):
    """
    Kind of a documented selector

    Determined by the heading syntax: `[nz-foo]` is an attribute
    directive, a bare `nz-foo` is an element component.
    """
    COMPONENT = "component"
    DIRECTIVE = "directive"


class InputAttrType(Enum):
    """Binding form of a property, from the bracket syntax of its name cell"""
    INPUT = "input"                  # [x]
    OUTPUT = "output"                # (x)
    INPUT_OUTPUT = "input-output"    # [(x)]
    TEMPLATE_REF = "template-ref"    # #x


class PropertyType(Enum):
    """Semantic category of a property's declared type"""
    STRING = "string"
    BOOLEAN = "boolean"
    NUMBER = "number"
    DATE = "Date"
    HTML_ELEMENT = "HTMLElement"
    TEMPLATE_REF = "TemplateRef"
    FUNCTION = "function"
    OBJECT = "object"
    EVENT_EMITTER = "EventEmitter"
    ARRAY = "Array"
    ENUM = "Enum"


@dataclass
class TypeChoice:
    """One allowed value of an enum-like property"""
    value: str
    label: str


@dataclass
class DirectiveProperty:
    """
    One row of a component's API table

    Attributes:
        name: Property name without binding brackets (e.g., "nzSize")
        input_type: Binding form (input, output, two-way, template ref)
        description: Description cell text
        type: Classified semantic type
        type_raw: Type cell with quoting removed (e.g., "'small' | 'large'")
        default: Default value, empty when documented as none
        type_definition: Allowed values for enum-like types, else None
    """
    name: str
    input_type: InputAttrType
    description: str
    type: PropertyType
    type_raw: str
    default: str
    type_definition: Optional[List[TypeChoice]] = None

    def dict_build(self) -> Dict[str, Any]:
        """Export as a JSON-ready dict with camelCase keys"""
        record: Dict[str, Any] = {
            "name": self.name,
            "inputType": self.input_type.value,
            "description": self.description,
            "type": self.type.value,
            "typeRaw": self.type_raw,
        }
        if self.type_definition is not None:
            record["typeDefinition"] = [
                {"value": choice.value, "label": choice.label}
                for choice in self.type_definition
            ]
        record["default"] = self.default
        return record


@dataclass
class Directive:
    """
    A documented component or attribute directive

    Attributes:
        selector: Tag or attribute name, brackets stripped (e.g., "nz-button")
        kind: Component or directive
        properties: API table rows in document order
        description: Heading description, or None until the emitter
                     falls back to the document lead paragraph
        title: Document title (front matter subtitle/title)
        source_library: Library identifier (e.g., "ng-zorro-antd")
        doc_url: Canonical documentation URL
        when_to_use: "When To Use" section text
    """
    selector: str
    kind: DirectiveKind = DirectiveKind.COMPONENT
    properties: List[DirectiveProperty] = field(default_factory=list)
    description: Optional[str] = None
    title: str = ""
    source_library: str = ""
    doc_url: str = ""
    when_to_use: str = ""

    def clone(self) -> "Directive":
        """Deep copy; the clone shares no property list or record with self"""
        return copy.deepcopy(self)

    def kind_detect(self) -> None:
        """
        Classify by bracket syntax of the raw selector

        `[nz-foo]` becomes a directive with selector `nz-foo`;
        anything else stays a component.
        """
        if self.selector.startswith("["):
            self.kind = DirectiveKind.DIRECTIVE
            self.selector = tag_clean(self.selector, "[")

    def dict_build(self) -> Dict[str, Any]:
        """Export as a JSON-ready dict with camelCase keys"""
        return {
            "selector": self.selector,
            "kind": self.kind.value,
            "properties": [prop.dict_build() for prop in self.properties],
            "description": self.description or "",
            "title": self.title,
            "sourceLibrary": self.source_library,
            "docUrl": self.doc_url,
            "whenToUse": self.when_to_use,
        }


def tag_clean(text: str, tag: str = "`") -> str:
    """
    Strip a wrapping tag from both ends of text

    Only applies when text starts with the tag; the same number of
    characters is then removed from the end.

    Example:
        >>> tag_clean("`boolean`")
        'boolean'
        >>> tag_clean("[nz-foo]", "[")
        'nz-foo'
    """
    if text.startswith(tag):
        text = text[len(tag) : len(text) - len(tag)]
    return text.strip()
