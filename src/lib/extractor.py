"""
Directive extraction driver

Reads documentation pages, runs the section locator on each one and
decorates every directive with the page's shared metadata (title,
library, doc URL, "When To Use" text, fallback description).

Pages are processed one at a time in the order given; the result keeps
that order, then heading order within a page. A page that cannot be
read or whose front matter is invalid aborts the batch.

Example:
    extractor = DirectiveExtractor()
    directives = extractor.directives_make('zh-CN', ['components/button/doc/index.zh-CN.md'])
    records = [directive.dict_build() for directive in directives]
"""

from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional, Union

from ..models.directives import Directive, DirectiveKind
from ..models.errors import LocaleError
from ..models.parser import DocumentContext
from ..models.rules import DEFAULT_RULES, SUPPORTED_ZONES, ExtractionRules
from .frontmatter import frontMatter_split
from .locator import SectionLocator
from .log import LOG
from .tokens import TokenStream


PathLike = Union[str, Path]


def zone_resolve(lang: str) -> str:
    """
    Zone of a locale code ('zh-CN' -> 'zh')

    Raises:
        LocaleError: If the zone is not supported
    """
    zone = lang.split("-")[0]
    if zone not in SUPPORTED_ZONES:
        raise LocaleError(
            f"Unsupported locale '{lang}' (supported zones: {', '.join(sorted(SUPPORTED_ZONES))})"
        )
    return zone


def title_get(meta: Dict[str, Any]) -> str:
    """
    Document title from front matter

    subtitle is preferred over title. A title given as a mapping
    (e.g., per locale) resolves to its first value.
    """
    title = meta.get("subtitle") or meta.get("title")
    if isinstance(title, dict):
        title = next(iter(title.values()), "")
    return str(title) if title else ""


class DirectiveExtractor:
    """
    Extracts and decorates directives from a batch of documentation pages

    Responsibilities:
    - Load pages (front matter + markdown tokens)
    - Locate directives per page
    - Duplicate dual-role components as directives
    - Attach per-page metadata
    """

    def __init__(
        self,
        rules: ExtractionRules = DEFAULT_RULES,
        locator: Optional[SectionLocator] = None,
    ) -> None:
        self.rules = rules
        self.locator = locator or SectionLocator(rules)

    def directives_make(self, lang: str, file_paths: Iterable[PathLike]) -> List[Directive]:
        """
        Extract directives from every page, in order

        Args:
            lang: Locale code of the pages (e.g., "en-US")
            file_paths: Page paths

        Returns:
            Flattened directives of all pages

        Raises:
            LocaleError: If lang is not supported
            OSError: If a page cannot be read
            DocumentError: If a page's front matter is invalid
        """
        zone = zone_resolve(lang)
        directives: List[Directive] = []
        for file_path in file_paths:
            context = self.document_load(Path(file_path), zone)
            page_directives = self.document_extract(context)
            LOG(f"{context.path}: {len(page_directives)} directives", level=2)
            directives.extend(page_directives)
        return directives

    def document_load(self, path: Path, zone: str) -> DocumentContext:
        """Read a page and build its extraction context"""
        text = path.read_text(encoding="utf-8")
        front = frontMatter_split(text)
        return DocumentContext(
            path=path,
            zone=zone,
            stream=TokenStream.markdown_parse(front.content),
            meta=front.meta,
        )

    def document_extract(self, context: DocumentContext) -> List[Directive]:
        """
        Extract and decorate the directives of one page

        Args:
            context: Loaded page

        Returns:
            Directives with dual-role twins following their component
        """
        directives: List[Directive] = []
        for directive in self.locator.directives_locate(context):
            directives.append(directive)
            if self.dualRole_is(directive):
                twin = directive.clone()
                twin.kind = DirectiveKind.DIRECTIVE
                directives.append(twin)

        metadata = self.metadata_build(context)
        for directive in directives:
            self.metadata_attach(directive, **metadata)
        return directives

    def dualRole_is(self, directive: Directive) -> bool:
        return (
            directive.kind is DirectiveKind.COMPONENT
            and directive.selector in self.rules.dual_role_selectors
        )

    def metadata_build(self, context: DocumentContext) -> Dict[str, str]:
        """Shared metadata of a page"""
        when_to_use_heading = self.rules.when_to_use_headings.get(context.zone, "")
        return {
            "title": title_get(context.meta),
            "source_library": self.library_get(context.path),
            "doc_url": self.url_get(context.path, context.zone),
            "when_to_use": context.stream.paragraph_get(when_to_use_heading),
            "lead": context.stream.paragraph_first(),
        }

    @staticmethod
    def metadata_attach(
        directive: Directive,
        title: str,
        source_library: str,
        doc_url: str,
        when_to_use: str,
        lead: str,
    ) -> None:
        directive.title = title
        directive.source_library = source_library
        directive.doc_url = doc_url
        directive.when_to_use = when_to_use
        if directive.description is None:
            directive.description = lead

    def library_get(self, path: Path) -> str:
        """
        Library a page belongs to, by directory names in its path

        Example:
            components/ng-zorro-antd/button/doc/index.en-US.md -> 'ng-zorro-antd'
        """
        parts = path.parent.parts
        for library in self.rules.libraries:
            if library.segment in parts:
                return library.name
        return ""

    def url_get(self, path: Path, zone: str) -> str:
        """
        Canonical documentation URL of a page

        The component name is the page's directory, or its parent when
        the page lives in a `doc` directory.

        Example:
            ng-zorro-antd/button/doc/index.zh-CN.md -> https://ng.ant.design/components/button/zh
        """
        parts = list(path.parent.parts)
        if not parts:
            return ""
        component = parts.pop()
        if component == "doc" and parts:
            component = parts.pop()
        for library in self.rules.libraries:
            if library.segment in parts:
                return library.url_make(component, zone)
        return ""
