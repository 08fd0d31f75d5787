"""
Static extraction rules

Lookup tables that steer extraction: extra valid selector names, alias
fixes for stale documented names, ignore lists, shared-API merges,
dual-role selectors and per-locale section headings.

All tables are frozen. Build a new ExtractionRules (e.g., with
dataclasses.replace) to run with different rules; never mutate one.
"""

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import FrozenSet, Mapping, Tuple


SUPPORTED_ZONES: FrozenSet[str] = frozenset({"zh", "en"})


def _frozen(mapping: dict) -> Mapping:
    return MappingProxyType(mapping)


@dataclass(frozen=True)
class LibrarySource:
    """
    A documented library, recognized by a directory name in the doc path

    Attributes:
        segment: Directory name that identifies the library (e.g., "abc")
        name: Library identifier (e.g., "@delon/abc")
        url_template: Doc URL with {name} (component dir) and {zone} fields
    """
    segment: str
    name: str
    url_template: str

    def url_make(self, component: str, zone: str) -> str:
        return self.url_template.format(name=component, zone=zone)


@dataclass(frozen=True)
class ExtractionRules:
    """
    Immutable rule tables for directive extraction

    Attributes:
        valid_component_names: Accepted selectors that fail the tag pattern
        dual_role_selectors: Components also emitted as attribute directives
        split_selectors: Selectors whose tables are harvested per variant
        ignored_components: Selectors dropped from the output
        ignored_properties: Raw name cells dropped from property tables
        selector_aliases: Stale documented selector -> current selector
        merge_headings: Selector -> {zone: heading} of a shared API table
        api_headings: zone -> API section heading
        when_to_use_headings: zone -> "When To Use" section heading
        two_way_markers: Description phrases that mark a two-way binding
        empty_defaults: Default cell spellings meaning "no default"
        libraries: Known libraries, checked in order
    """
    valid_component_names: FrozenSet[str] = frozenset({"th", "td", "thead"})
    dual_role_selectors: FrozenSet[str] = frozenset({
        "se-container",
        "se-title",
        "error-collect",
        "sg-container",
        "sv-container",
        "sv-title",
        "sf",
    })
    split_selectors: FrozenSet[str] = frozenset({"th", "td"})
    ignored_components: FrozenSet[str] = frozenset({"nz-icon"})
    ignored_properties: FrozenSet[str] = frozenset({"ng-content"})
    selector_aliases: Mapping[str, str] = field(
        default_factory=lambda: _frozen({"nz-tr": "tr"})
    )
    merge_headings: Mapping[str, Mapping[str, str]] = field(
        default_factory=lambda: _frozen({
            selector: _frozen({"zh": "共同的 API", "en": "Common API"})
            for selector in (
                "nz-date-picker",
                "nz-year-picker",
                "nz-month-picker",
                "nz-range-picker",
                "nz-week-picker",
            )
        })
    )
    api_headings: Mapping[str, str] = field(
        default_factory=lambda: _frozen({"zh": "API", "en": "API"})
    )
    when_to_use_headings: Mapping[str, str] = field(
        default_factory=lambda: _frozen({"zh": "何时使用", "en": "When To Use"})
    )
    two_way_markers: Tuple[str, ...] = ("双向绑定", "double binding", "Two-way")
    empty_defaults: FrozenSet[str] = frozenset({"`-`", "-", "`无`", "无"})
    libraries: Tuple[LibrarySource, ...] = (
        LibrarySource(
            "ng-zorro-antd", "ng-zorro-antd",
            "https://ng.ant.design/components/{name}/{zone}",
        ),
        LibrarySource(
            "abc", "@delon/abc",
            "https://ng-alain.com/components/{name}/{zone}",
        ),
        LibrarySource(
            "chart", "@delon/chart",
            "https://ng-alain.com/chart/{name}/{zone}",
        ),
        LibrarySource(
            "form", "@delon/form",
            "https://ng-alain.com/form/getting-started/{zone}",
        ),
    )

    def selector_resolve(self, selector: str) -> str:
        """Apply the alias table (e.g., 'nz-tr' -> 'tr')"""
        return self.selector_aliases.get(selector, selector)

    def mergeHeading_get(self, selector: str, zone: str) -> str | None:
        """Heading of the shared API table merged into selector, if any"""
        headings = self.merge_headings.get(selector)
        if headings is None:
            return None
        return headings.get(zone)


# Default rules - import this in your code
DEFAULT_RULES = ExtractionRules()
