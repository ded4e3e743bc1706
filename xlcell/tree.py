# ruff: noqa:D102, D105
from __future__ import annotations

__all__ = ["xml_node", "xml_tree"]

from typing import TYPE_CHECKING

from pyexpat import ParserCreate

from .core import as_dataclass

if TYPE_CHECKING:
    from typing import IO, Iterator


def local_name(tag: str) -> str:
    return tag.rsplit(":", 1)[-1]


class xml_tree:  # noqa: N801
    """
    Arena of XML elements, addressed by index (root element has index 0).

    Every `xml_node` keeps a reference to its tree, so the tree lives at least as long as any node.
    """

    __slots__ = ("attrs", "children", "parents", "tags", "texts")

    def __init__(self) -> None:
        self.tags: list[str] = []
        self.attrs: list[dict[str, str]] = []
        self.texts: list[list[str]] = []
        self.parents: list[int] = []
        self.children: list[list[int]] = []

    def __len__(self) -> int:
        return len(self.tags)

    @staticmethod
    def parse(data: bytes | str | IO[bytes]) -> xml_tree:
        """Build tree from XML document. Namespace prefixes of tags are dropped, attribute names kept as is."""
        tree = xml_tree()
        stack: list[int] = []

        def el_sh(tag: str, attrs: dict[str, str]) -> None:
            nonlocal tree, stack
            idx = len(tree.tags)
            tree.tags.append(local_name(tag))
            tree.attrs.append(attrs)
            tree.texts.append([])
            tree.children.append([])
            if stack:
                tree.parents.append(stack[-1])
                tree.children[stack[-1]].append(idx)
            else:
                tree.parents.append(-1)
            stack.append(idx)

        def el_th(txt: str) -> None:
            nonlocal tree, stack
            if stack:
                tree.texts[stack[-1]].append(txt)

        def el_eh(_: str) -> None:
            nonlocal stack
            stack.pop()

        parser = ParserCreate()
        parser.StartElementHandler = el_sh
        parser.EndElementHandler = el_eh
        parser.CharacterDataHandler = el_th
        parser.buffer_text = True

        if isinstance(data, (bytes, str)):
            parser.Parse(data, True)
        else:
            parser.ParseFile(data)

        if not tree.tags:
            msg = "XML document has no root element"
            raise ValueError(msg)

        return tree

    @property
    def root(self) -> xml_node:
        return xml_node(self, 0)

    def iter(self, tag: str) -> Iterator[xml_node]:
        """All elements with given tag, in document order."""
        for i, t in enumerate(self.tags):
            if t == tag:
                yield xml_node(self, i)


@as_dataclass(readonly=True)
class xml_node:  # noqa: N801
    """Borrowed view of one element of `xml_tree`."""

    tree: xml_tree
    index: int

    @property
    def tag(self) -> str:
        return self.tree.tags[self.index]

    @property
    def text(self) -> str:
        """Character data placed directly inside of the element."""
        return "".join(self.tree.texts[self.index])

    @property
    def parent(self) -> xml_node | None:
        p = self.tree.parents[self.index]
        return xml_node(self.tree, p) if p >= 0 else None

    def attr(self, name: str) -> str | None:
        return self.tree.attrs[self.index].get(name)

    def first(self, tag: str) -> xml_node | None:
        """First child element with given tag."""
        tags = self.tree.tags
        for i in self.tree.children[self.index]:
            if tags[i] == tag:
                return xml_node(self.tree, i)
        return None

    def iter(self, tag: str | None = None) -> Iterator[xml_node]:
        """Child elements (optionally only with given tag), in sibling order."""
        tags = self.tree.tags
        for i in self.tree.children[self.index]:
            if tag is None or tags[i] == tag:
                yield xml_node(self.tree, i)
