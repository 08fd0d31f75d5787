"""
Section locator tests

Tests API section detection, heading filtering, multi-selector headings,
aliases, shared API merges, descriptions and the ignore list.
"""

from pathlib import Path

import pytest

from docdirectives.lib.locator import SectionLocator
from docdirectives.lib.tokens import TokenStream
from docdirectives.models import DirectiveKind, DocumentContext, InputAttrType


TABLE = """
| Property | Description | Type | Default |
| --- | --- | --- | --- |
| `[nzA]` | A | `boolean` | `false` |
| `(nzB)` | B | `EventEmitter<void>` | - |
"""


def context_make(body: str, zone: str = "en") -> DocumentContext:
    return DocumentContext(
        path=Path("components/demo/doc/index.en-US.md"),
        zone=zone,
        stream=TokenStream.markdown_parse(body),
    )


@pytest.fixture
def locator():
    return SectionLocator()


class TestSection:
    """Test API section boundaries"""

    def test_no_api_section(self, locator):
        body = "## Usage\n\n### nz-demo\n" + TABLE
        assert locator.directives_locate(context_make(body)) == []

    def test_headings_outside_section_ignored(self, locator):
        body = (
            "## Examples\n\n### nz-before\n" + TABLE
            + "\n## API\n\n### nz-demo\n" + TABLE
            + "\n## FAQ\n\n### nz-after\n" + TABLE
        )
        directives = locator.directives_locate(context_make(body))
        assert [d.selector for d in directives] == ["nz-demo"]

    def test_section_runs_to_end(self, locator):
        body = "## API\n\n### nz-one\n" + TABLE + "\n### nz-two\n" + TABLE
        directives = locator.directives_locate(context_make(body))
        assert [d.selector for d in directives] == ["nz-one", "nz-two"]

    def test_only_level_three_headings(self, locator):
        body = "## API\n\n#### nz-deep\n" + TABLE + "\n### nz-demo\n" + TABLE
        directives = locator.directives_locate(context_make(body))
        assert [d.selector for d in directives] == ["nz-demo"]


class TestHeadingFilter:
    """Test prose headings and extra valid names"""

    @pytest.mark.parametrize("heading", ["Common API", "NzModalService", "Methods", "a"])
    def test_prose_rejected(self, locator, heading):
        body = f"## API\n\n### {heading}\n" + TABLE
        assert locator.directives_locate(context_make(body)) == []

    @pytest.mark.parametrize("heading", ["th", "td", "thead"])
    def test_extra_valid_names(self, locator, heading):
        body = f"## API\n\n### {heading}\n" + TABLE
        directives = locator.directives_locate(context_make(body))
        assert [d.selector for d in directives] == [heading]

    def test_bracketed_directive(self, locator):
        body = "## API\n\n### [nz-tooltip]\n" + TABLE
        directive = locator.directives_locate(context_make(body))[0]
        assert directive.selector == "nz-tooltip"
        assert directive.kind is DirectiveKind.DIRECTIVE

    def test_component(self, locator):
        body = "## API\n\n### nz-tooltip\n" + TABLE
        directive = locator.directives_locate(context_make(body))[0]
        assert directive.kind is DirectiveKind.COMPONENT


class TestMultiSelector:
    """Test headings naming several selectors"""

    def test_shared_table(self, locator):
        body = "## API\n\n### a | [foo]\n" + TABLE
        directives = locator.directives_locate(context_make(body))

        assert [(d.selector, d.kind) for d in directives] == [
            ("a", DirectiveKind.COMPONENT),
            ("foo", DirectiveKind.DIRECTIVE),
        ]
        assert directives[0].properties == directives[1].properties
        assert [p.name for p in directives[0].properties] == ["nzA", "nzB"]

    def test_copies_are_independent(self, locator):
        body = "## API\n\n### a | [foo]\n" + TABLE
        first, second = locator.directives_locate(context_make(body))

        assert first.properties is not second.properties
        first.properties[0].name = "changed"
        first.properties.pop()
        assert [p.name for p in second.properties] == ["nzA", "nzB"]

    def test_multi_selector_skips_pattern_check(self, locator):
        body = "## API\n\n### nz-a | NzB\n" + TABLE
        directives = locator.directives_locate(context_make(body))
        assert [d.selector for d in directives] == ["nz-a", "NzB"]

    def test_merge_selector_keeps_shared_table(self, locator):
        """A merge-mapped selector in a shared heading gets no common rows"""
        body = (
            "## API\n\n### Common API\n"
            "\n| Property | Description | Type | Default |\n"
            "| --- | --- | --- | --- |\n"
            "| `[nzAllowClear]` | Clear | `boolean` | `true` |\n"
            "\n### nz-date-picker | [foo]\n\nHeading prose.\n" + TABLE
        )
        picker, foo = locator.directives_locate(context_make(body))

        assert (picker.selector, foo.selector) == ("nz-date-picker", "foo")
        assert picker.properties == foo.properties
        assert [p.name for p in picker.properties] == ["nzA", "nzB"]
        assert picker.description is None and foo.description is None

    def test_split_follows_first_selector(self, locator):
        body = "## API\n\n### th | [foo]\n\nCheckbox\n" + TABLE + "\nSort\n" + TABLE.replace("nzA", "nzSort")
        th, foo = locator.directives_locate(context_make(body))

        assert [p.name for p in th.properties] == ["nzA", "nzB", "nzSort", "nzB"]
        assert th.properties == foo.properties

    def test_split_not_applied_for_other_first_selector(self, locator):
        body = "## API\n\n### [foo] | th\n\nCheckbox\n" + TABLE + "\nSort\n" + TABLE.replace("nzA", "nzSort")
        foo, th = locator.directives_locate(context_make(body))
        assert [p.name for p in th.properties] == ["nzA", "nzB"]

    def test_alias_not_applied(self, locator):
        body = "## API\n\n### nz-tr | [foo]\n" + TABLE
        directives = locator.directives_locate(context_make(body))
        assert [d.selector for d in directives] == ["nz-tr", "foo"]


class TestRules:
    """Test alias, ignore and merge rules"""

    def test_alias(self, locator):
        body = "## API\n\n### nz-tr\n" + TABLE
        directive = locator.directives_locate(context_make(body))[0]
        assert directive.selector == "tr"

    def test_ignored_component(self, locator):
        body = "## API\n\n### nz-icon\n" + TABLE + "\n### nz-demo\n" + TABLE
        directives = locator.directives_locate(context_make(body))
        assert [d.selector for d in directives] == ["nz-demo"]

    def test_common_api_prepended(self, locator):
        body = (
            "## API\n\n### Common API\n"
            "\n| Property | Description | Type | Default |\n"
            "| --- | --- | --- | --- |\n"
            "| `[nzAllowClear]` | Clear | `boolean` | `true` |\n"
            "\n### nz-date-picker\n" + TABLE
            + "\n### nz-demo\n" + TABLE
        )
        picker, demo = locator.directives_locate(context_make(body))
        assert [p.name for p in picker.properties] == ["nzAllowClear", "nzA", "nzB"]
        assert [p.name for p in demo.properties] == ["nzA", "nzB"]

    def test_common_api_localized(self, locator):
        body = (
            "## API\n\n### 共同的 API\n"
            "\n| 参数 | 说明 | 类型 | 默认值 |\n"
            "| --- | --- | --- | --- |\n"
            "| `[nzSize]` | 尺寸 | `'large' 丨 'small'` | - |\n"
            "\n### nz-range-picker\n" + TABLE
        )
        picker = locator.directives_locate(context_make(body, zone="zh"))[0]
        assert [p.name for p in picker.properties] == ["nzSize", "nzA", "nzB"]

    def test_common_api_missing(self, locator):
        body = "## API\n\n### nz-week-picker\n" + TABLE
        picker = locator.directives_locate(context_make(body))[0]
        assert [p.name for p in picker.properties] == ["nzA", "nzB"]

    def test_split_selector_harvests_all_tables(self, locator):
        body = "## API\n\n### th\n\nCheckbox\n" + TABLE + "\nSort\n" + TABLE.replace("nzA", "nzSort")
        directive = locator.directives_locate(context_make(body))[0]
        assert [p.name for p in directive.properties] == ["nzA", "nzB", "nzSort", "nzB"]

    def test_regular_selector_uses_first_table(self, locator):
        body = "## API\n\n### nz-demo\n" + TABLE + "\nMore\n" + TABLE.replace("nzA", "nzSort")
        directive = locator.directives_locate(context_make(body))[0]
        assert [p.name for p in directive.properties] == ["nzA", "nzB"]


class TestDescription:
    """Test heading description resolution"""

    def test_paragraph_before_table(self, locator):
        body = "## API\n\n### nz-demo\n\nDemo component.\n" + TABLE
        directive = locator.directives_locate(context_make(body))[0]
        assert directive.description == "Demo component."

    def test_no_paragraph(self, locator):
        body = "## API\n\n### nz-demo\n" + TABLE
        directive = locator.directives_locate(context_make(body))[0]
        assert directive.description is None

    def test_paragraph_without_table(self, locator):
        body = "## API\n\n### nz-demo\n\nOnly words here.\n"
        directive = locator.directives_locate(context_make(body))[0]
        assert directive.description == "Only words here."
        assert directive.properties == []

    def test_paragraph_after_table_ignored(self, locator):
        body = "## API\n\n### nz-demo\n" + TABLE + "\nAfterwards.\n"
        directive = locator.directives_locate(context_make(body))[0]
        assert directive.description is None

    def test_multi_selector_has_no_description(self, locator):
        """Shared headings leave description to the page lead paragraph"""
        body = "## API\n\n### a | [foo]\n\nShared.\n" + TABLE
        directives = locator.directives_locate(context_make(body))
        assert [d.description for d in directives] == [None, None]


class TestProperties:
    """Test properties reach the directive intact"""

    def test_input_types(self, locator):
        body = "## API\n\n### nz-demo\n" + TABLE
        directive = locator.directives_locate(context_make(body))[0]
        assert [p.input_type for p in directive.properties] == [
            InputAttrType.INPUT,
            InputAttrType.OUTPUT,
        ]
