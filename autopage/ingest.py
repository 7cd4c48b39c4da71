"""
Helpers that turn editor HTML into a flat block stream.
"""

from __future__ import annotations

import re
from pathlib import Path
from typing import List

from bs4 import BeautifulSoup
from bs4.element import (
    Comment,
    Declaration,
    Doctype,
    NavigableString,
    ProcessingInstruction,
    Tag,
)

from .cleaning import is_blank, normalize_whitespace
from .models import Block, GenericBlock, HeadingBlock, ListBlock, ParagraphBlock

_HEADING_TAGS = {"h1", "h2", "h3", "h4", "h5", "h6"}
_LIST_TAGS = {"ul", "ol"}
_SKIPPED_TAGS = {"script", "style", "head", "meta", "link", "title", "template"}
_SKIPPED_STRINGS = (Comment, Declaration, Doctype, ProcessingInstruction)
_PX_VALUE = re.compile(r"^\s*(\d+(?:\.\d+)?)\s*(?:px)?\s*$", re.IGNORECASE)
_STYLE_HEIGHT = re.compile(
    r"(?:^|;)\s*height\s*:\s*(\d+(?:\.\d+)?)\s*px\s*(?:;|$)", re.IGNORECASE
)


def blocks_from_html(markup: str) -> List[Block]:
    """Return the blocks found in an HTML fragment or document.

    Containers such as ``div`` are unwrapped, loose text becomes a
    paragraph, and tables and empty unknown elements are kept as generic
    blocks.

    Example:
        >>> blocks_from_html("<div><h2>Intro</h2>Hello</div>")
        [HeadingBlock(text='Intro', level=2), ParagraphBlock(text='Hello')]
    """

    soup = BeautifulSoup(markup, "html.parser")
    root = soup.body if soup.body is not None else soup
    blocks: List[Block] = []
    for node in root.children:
        _collect(node, blocks)
    return blocks


def blocks_from_file(path: Path) -> List[Block]:
    """Read ``path`` and return its blocks."""

    return blocks_from_html(Path(path).read_text(encoding="utf-8"))


def _collect(node: object, blocks: List[Block]) -> None:
    """Append the blocks represented by ``node`` to ``blocks``.

    Args:
        node: BeautifulSoup node.
        blocks: Output list.
    Returns:
        None.
    """

    if isinstance(node, _SKIPPED_STRINGS):
        return
    if isinstance(node, NavigableString):
        if not is_blank(str(node)):
            blocks.append(ParagraphBlock(normalize_whitespace(str(node))))
        return
    if not isinstance(node, Tag):
        return
    name = node.name.lower()
    if name in _SKIPPED_TAGS:
        return
    if name == "p":
        blocks.append(ParagraphBlock(_text_of(node)))
    elif name in _HEADING_TAGS:
        blocks.append(HeadingBlock(_text_of(node), level=int(name[1])))
    elif name in _LIST_TAGS:
        blocks.append(_list_block(node))
    elif name == "table":
        blocks.append(
            GenericBlock(
                text=_text_of(node, separator=" "),
                tag=name,
                height=_fixed_height(node),
            )
        )
    elif node.contents:
        for child in list(node.children):
            _collect(child, blocks)
    else:
        blocks.append(GenericBlock(tag=name, height=_fixed_height(node)))


def _list_block(node: Tag) -> ListBlock:
    """Return a ListBlock for a ``ul``/``ol`` element.

    Args:
        node: List element.
    Returns:
        ListBlock with one item per direct ``li`` child.
    """

    items = tuple(_text_of(item) for item in node.find_all("li", recursive=False))
    ordered = node.name.lower() == "ol"
    start = _list_start(node) if ordered else 1
    return ListBlock(items=items, ordered=ordered, start=start)


def _list_start(node: Tag) -> int:
    """Return the ``start`` attribute of an ordered list, defaulting to 1."""

    try:
        return int(node.get("start", 1))
    except (TypeError, ValueError):
        return 1


def _text_of(node: Tag, separator: str = "") -> str:
    return normalize_whitespace(node.get_text(separator))


def _fixed_height(node: Tag) -> float | None:
    """Return the pixel height declared on ``node``, if any.

    The ``height`` attribute wins over an inline ``style`` height. Only
    plain numbers and ``px`` values count; percentages and other units
    leave the height to measurement.

    Example:
        >>> _fixed_height(BeautifulSoup('<img height="120">', "html.parser").img)
        120.0
    """

    match = _PX_VALUE.match(str(node.get("height", "")))
    if match is None:
        match = _STYLE_HEIGHT.search(str(node.get("style", "")))
    if match is None:
        return None
    return float(match.group(1))
