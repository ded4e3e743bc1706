# ruff: noqa:S101, PLR2004
from pyexpat import ExpatError

import pytest

from xlcell import xml_tree


def test_navigation() -> None:
    tree = xml_tree.parse(b'<row r="1"><c r="A1"><v>1</v></c><c r="B1" t="s"><v>0</v></c><x/></row>')
    root = tree.root

    assert len(tree) == 6
    assert root.tag == "row"
    assert root.attr("r") == "1"
    assert root.attr("missing") is None
    assert root.parent is None

    cells = list(root.iter("c"))
    assert [c.attr("r") for c in cells] == ["A1", "B1"]
    assert [n.tag for n in root.iter()] == ["c", "c", "x"]

    v = cells[1].first("v")
    assert v is not None
    assert v.text == "0"
    assert v.parent == cells[1]
    assert cells[0].first("is") is None


def test_text_preserved() -> None:
    root = xml_tree.parse('<t xml:space="preserve">  a &amp; b  </t>').root
    assert root.text == "  a & b  "


def test_tree_iter() -> None:
    tree = xml_tree.parse("<a><b><c/></b><c/></a>")
    assert [n.index for n in tree.iter("c")] == [2, 3]


def test_prefixes_dropped() -> None:
    root = xml_tree.parse('<x:a xmlns:x="urn:x" xmlns:r="urn:r" r:id="rId1"><x:b/></x:a>').root
    assert root.tag == "a"
    assert root.first("b") is not None
    assert root.attr("r:id") == "rId1"


def test_empty_document() -> None:
    with pytest.raises(ExpatError):
        xml_tree.parse(b"")
