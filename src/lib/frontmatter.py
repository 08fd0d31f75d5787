"""
YAML front matter splitting

Documentation pages open with a `---` delimited YAML block holding
per-locale metadata (title, subtitle, category, ...) followed by the
markdown body:

    ---
    category: Components
    title: Button
    subtitle: 按钮
    ---

    To trigger an operation.
"""

import re

import yaml

from ..models.errors import DocumentError
from ..models.parser import FrontMatter


_FRONT_MATTER = re.compile(r"\A\ufeff?---[ \t]*\r?\n(.*?)^---[ \t]*(?:\r?\n|\Z)", re.DOTALL | re.MULTILINE)


def frontMatter_split(text: str) -> FrontMatter:
    """
    Split document text into front matter and markdown body.

    Args:
        text: Full document text

    Returns:
        FrontMatter with parsed meta (empty dict when the document has
        no front matter block) and the remaining body

    Raises:
        DocumentError: If the block is not valid YAML or not a mapping

    Example:
        >>> frontMatter_split("---\\ntitle: Button\\n---\\nBody").meta
        {'title': 'Button'}
    """
    match = _FRONT_MATTER.match(text)
    if not match:
        return FrontMatter(meta={}, content=text)

    try:
        meta = yaml.safe_load(match.group(1))
    except yaml.YAMLError as e:
        raise DocumentError(f"Failed to parse front matter: {e}")

    if meta is None:
        meta = {}
    if not isinstance(meta, dict):
        raise DocumentError(
            f"Front matter must be a mapping, got {type(meta).__name__}"
        )
    return FrontMatter(meta=meta, content=text[match.end():])
