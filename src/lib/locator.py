"""
API section locator

Finds the API section of a documentation page and turns every
component heading inside it into Directive records.

A page looks like:

    ## API

    ### nz-button | [nz-button]

    Button component.

    | Property | Description | Type | Default |
    | --- | --- | --- | --- |
    | `[nzSize]` | size | `'large' 丨 'small'` | - |

    ### Common API
    ...

Each level-3 heading names one or more selectors (split on `|`). All
selectors of a heading share its table, and every resulting Directive
owns its own copy of the properties. Alias, merge and description rules
only apply to single-selector headings.
"""

import re
from typing import List, Optional

from ..models.directives import Directive, DirectiveProperty
from ..models.parser import DocumentContext
from ..models.rules import DEFAULT_RULES, ExtractionRules
from .log import LOG
from .properties import PropertyParser


COMPONENT_HEADING = "h3"
DESCRIPTION_OFFSET = 3

_SELECTOR_PATTERN = re.compile(r"^\[?[a-z][-a-z0-9]+\]?$")


class SectionLocator:
    """
    Extracts Directive records from the API section of one document

    Handles:
    - Multi-selector headings ("a | [b]")
    - Prose headings mixed in with component headings
    - Stale selector aliases and ignored selectors
    - Shared API tables merged into related selectors
    - Heading descriptions
    """

    def __init__(
        self,
        rules: ExtractionRules = DEFAULT_RULES,
        property_parser: Optional[PropertyParser] = None,
    ) -> None:
        self.rules = rules
        self.property_parser = property_parser or PropertyParser(rules)

    def directives_locate(self, context: DocumentContext) -> List[Directive]:
        """
        Extract all directives documented in the API section

        Args:
            context: Document being processed

        Returns:
            Directives in heading order; empty when the page has no API
            section
        """
        stream = context.stream
        api_heading = self.rules.api_headings.get(context.zone, "API")
        start = stream.heading_find(api_heading)
        if start is None:
            LOG(f"No '{api_heading}' section in {context.path}", level=3)
            return []

        end = stream.sectionClose_find(start)
        if end is None:
            end = len(stream)

        directives: List[Directive] = []
        for idx in stream.headings_list(COMPONENT_HEADING, start + 1, end):
            directives.extend(self.heading_extract(context, idx))

        return [
            directive for directive in directives
            if directive.selector not in self.rules.ignored_components
        ]

    def heading_extract(self, context: DocumentContext, idx: int) -> List[Directive]:
        """
        Build the directives documented under one heading

        Args:
            context: Document being processed
            idx: heading_open index of the component heading

        Returns:
            One directive per selector in the heading, or an empty list
            when the heading is prose rather than a selector
        """
        stream = context.stream
        selectors = [selector.strip() for selector in stream.text_get(idx).split("|")]

        if len(selectors) == 1:
            if not self.selector_valid(selectors[0]):
                LOG(f"Skipping heading '{selectors[0]}'", level=3)
                return []
            selectors = [self.rules.selector_resolve(selectors[0])]

        rows = stream.table_get(idx, selectors[0] in self.rules.split_selectors)
        properties = self.property_parser.properties_parse(rows)

        # Selectors sharing a heading get the bare shared table: no alias,
        # no merge, no heading description
        if len(selectors) > 1:
            directives = []
            for selector in selectors:
                directive = Directive(selector=selector, properties=properties).clone()
                directive.kind_detect()
                directives.append(directive)
            return directives

        directive = Directive(selector=selectors[0], properties=properties)
        directive.kind_detect()
        directive.properties = self.commonProperties_get(context, directive.selector) + directive.properties
        directive.description = self.description_find(context, idx)
        return [directive]

    def selector_valid(self, selector: str) -> bool:
        """True for tag-like selectors ('nz-button', '[nz-button]') and extra valid names"""
        return bool(_SELECTOR_PATTERN.match(selector)) or selector in self.rules.valid_component_names

    def commonProperties_get(self, context: DocumentContext, selector: str) -> List[DirectiveProperty]:
        """
        Properties of the shared API table merged into selector

        Returns:
            Parsed rows of the locale's common heading table; empty when
            selector has no merge rule or the heading is missing
        """
        heading = self.rules.mergeHeading_get(selector, context.zone)
        if heading is None:
            return []
        common_idx = context.stream.heading_find(heading)
        if common_idx is None:
            LOG(f"Merge heading '{heading}' missing for {selector}", level=3)
            return []
        return self.property_parser.properties_parse(context.stream.table_get(common_idx, False))

    def description_find(self, context: DocumentContext, idx: int) -> Optional[str]:
        """
        Description of a component heading

        The first paragraph under the heading is used when it comes
        before the heading's table. Otherwise the token at a fixed
        offset past the heading is used if it is a paragraph.
        """
        stream = context.stream
        block_end = stream.block_end(idx)
        paragraph = stream.tag_find("paragraph_open", "p", idx + 1, block_end)
        table = stream.tag_find("table_open", "table", idx + 1, block_end)

        if paragraph is not None and table is not None and paragraph < table:
            return stream.text_get(paragraph)
        if stream.paragraph_is(idx + DESCRIPTION_OFFSET):
            return stream.text_get(idx + DESCRIPTION_OFFSET)
        return None
