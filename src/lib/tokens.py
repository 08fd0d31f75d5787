"""
Indexed token stream over a markdown document

Wraps the flat token list produced by markdown-it-py and answers the
positional questions extraction needs: where a heading is, where its
section ends, which table and paragraphs belong to it.

Token layout reminder (markdown-it):

    idx     heading_open  (tag h3)
    idx+1   inline        (content "nz-button")
    idx+2   heading_close (tag h3)
    idx+3   paragraph_open / table_open / ...

Lookups return None when nothing is found.
"""

from functools import lru_cache
from typing import List, Optional, Tuple

from markdown_it import MarkdownIt
from markdown_it.token import Token


@lru_cache(maxsize=None)
def _markdown_get(preset: str) -> MarkdownIt:
    return MarkdownIt(preset)


class TokenStream:
    """
    Read-only, index-addressed view over markdown-it-py block tokens

    Example:
        >>> stream = TokenStream.markdown_parse("## API\\n\\n### nz-button\\n")
        >>> stream.heading_find("API")
        0
        >>> stream.headings_list("h3", 1, len(stream))
        [3]
    """

    def __init__(self, tokens: List[Token]) -> None:
        self.tokens = tokens

    @classmethod
    def markdown_parse(cls, content: str, preset: Optional[str] = None) -> "TokenStream":
        """
        Tokenize a markdown body

        Args:
            content: Markdown text (front matter already removed)
            preset: markdown-it-py preset, defaults to the configured one

        Returns:
            TokenStream over the parsed block tokens
        """
        from ..config import appsettings

        md = _markdown_get(preset or appsettings.markdown_preset)
        return cls(md.parse(content))

    def __len__(self) -> int:
        return len(self.tokens)

    def index_valid(self, idx: Optional[int]) -> bool:
        return idx is not None and 0 <= idx < len(self.tokens)

    def heading_level(self, idx: int) -> int:
        """Level of a heading token (h2 -> 2)"""
        return int(self.tokens[idx].tag[1:])

    def heading_find(self, text: str, start: int = 0) -> Optional[int]:
        """Index of the first heading_open whose text is exactly `text`"""
        for idx in range(max(start, 0), len(self.tokens)):
            if self.tokens[idx].type == "heading_open" and self.text_get(idx) == text:
                return idx
        return None

    def tag_find(
        self, token_type: str, tag: str, start: int, end: Optional[int] = None
    ) -> Optional[int]:
        """
        Index of the first token of the given type and tag in [start, end)

        Example:
            stream.tag_find("paragraph_open", "p", idx + 1)
        """
        stop = len(self.tokens) if end is None else min(end, len(self.tokens))
        for idx in range(max(start, 0), stop):
            token = self.tokens[idx]
            if token.type == token_type and token.tag == tag:
                return idx
        return None

    def headings_list(self, tag: str, start: int, end: int) -> List[int]:
        """All heading_open indices with the given tag in [start, end)"""
        stop = min(end, len(self.tokens))
        return [
            idx for idx in range(max(start, 0), stop)
            if self.tokens[idx].type == "heading_open" and self.tokens[idx].tag == tag
        ]

    def sectionClose_find(self, idx: int) -> Optional[int]:
        """
        Closing token of the next heading at the same or a higher level

        Searches from idx + 3, past the heading's own inline and close
        tokens. Used to bound a section such as "## API".
        """
        level = self.heading_level(idx)
        for pos in range(idx + 3, len(self.tokens)):
            token = self.tokens[pos]
            if token.type == "heading_close" and int(token.tag[1:]) <= level:
                return pos
        return None

    def block_end(self, idx: int) -> int:
        """
        End (exclusive) of the content under a heading

        The block stops at the next heading of the same or a higher
        level, or at the end of the stream.
        """
        level = self.heading_level(idx)
        for pos in range(idx + 1, len(self.tokens)):
            token = self.tokens[pos]
            if token.type == "heading_open" and int(token.tag[1:]) <= level:
                return pos
        return len(self.tokens)

    def text_get(self, idx: Optional[int]) -> str:
        """
        Text content at idx

        For an opening token (heading_open, paragraph_open) the content
        of the inline token that follows it is returned.
        """
        if not self.index_valid(idx):
            return ""
        token = self.tokens[idx]
        if token.type != "inline" and self.index_valid(idx + 1):
            follower = self.tokens[idx + 1]
            if follower.type == "inline":
                token = follower
        return token.content.strip()

    def paragraph_is(self, idx: Optional[int]) -> bool:
        return self.index_valid(idx) and self.tokens[idx].type == "paragraph_open"

    def paragraph_get(self, heading_text: str) -> str:
        """
        First paragraph under the heading titled heading_text

        Returns:
            Paragraph text, empty when the heading or paragraph is absent
        """
        idx = self.heading_find(heading_text)
        if idx is None:
            return ""
        para = self.tag_find("paragraph_open", "p", idx + 1, self.block_end(idx))
        return self.text_get(para) if para is not None else ""

    def paragraph_first(self) -> str:
        """Lead paragraph of the document, empty when there is none"""
        return self.text_get(self.tag_find("paragraph_open", "p", 0))

    def table_get(self, idx: int, split: bool = False) -> List[List[str]]:
        """
        Body rows of the table belonging to a heading

        Args:
            idx: heading_open index
            split: Harvest every table under the heading as a variant row
                   set, and cut rows holding several property column groups
                   side by side into one row per group

        Returns:
            Rows of cell texts; the header row is not included
        """
        end = self.block_end(idx)
        rows: List[List[str]] = []
        pos = idx + 1
        while True:
            table_idx = self.tag_find("table_open", "table", pos, end)
            if table_idx is None:
                break
            table_rows, pos = self.tableRows_collect(table_idx)
            if not split:
                return table_rows
            for row in table_rows:
                rows.extend(self.row_split(row))
        return rows

    def tableRows_collect(self, table_idx: int) -> Tuple[List[List[str]], int]:
        """
        Collect tbody rows of the table opening at table_idx

        Returns:
            (rows, index just past table_close)
        """
        rows: List[List[str]] = []
        row: Optional[List[str]] = None
        in_body = False
        for pos in range(table_idx + 1, len(self.tokens)):
            token = self.tokens[pos]
            if token.type == "table_close":
                return rows, pos + 1
            if token.type == "tbody_open":
                in_body = True
            elif token.type == "tr_open" and in_body:
                row = []
            elif token.type == "tr_close" and row is not None:
                rows.append(row)
                row = None
            elif token.type == "inline" and row is not None:
                row.append(token.content.strip())
        return rows, len(self.tokens)

    @staticmethod
    def row_split(row: List[str], width: int = 4) -> List[List[str]]:
        """
        Cut a row holding several column groups into one row per group

        Rows whose length is not a multiple of width come back unchanged.

        Example:
            >>> TokenStream.row_split(['[a]', 'A', 'boolean', '-', '[b]', 'B', 'number', '0'])
            [['[a]', 'A', 'boolean', '-'], ['[b]', 'B', 'number', '0']]
        """
        if len(row) > width and len(row) % width == 0:
            return [row[pos : pos + width] for pos in range(0, len(row), width)]
        return [row]
