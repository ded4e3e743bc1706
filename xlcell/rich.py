from __future__ import annotations

__all__ = ["parse_string"]

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .tree import xml_node


def parse_string(node: xml_node) -> str | None:
    """
    Text of `<si>` (shared string) or `<is>` (inline string) element, `None` if no text found.

    Schema allows a single `<t>` together with any number of `<r>` runs, but producers disagree:
    Excel writes either `<t>` alone or runs alone, yet reads `<t>` followed by runs as their
    concatenation, and MacOSX Preview skips runs without `<t>`. So `<t>` is read first (if any),
    then text of every run is appended. An empty `<t/>` gives `""`, not `None`.
    """
    found = False
    out: list[str] = []

    t = node.first("t")
    if t is not None:
        out.append(t.text)
        found = True

    for r in node.iter("r"):
        t = r.first("t")
        if t is not None:
            out.append(t.text)
            found = True

    return "".join(out) if found else None
