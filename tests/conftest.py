from __future__ import annotations

from pathlib import Path
from typing import Callable
from zipfile import ZipFile

import pytest

MAIN_NS = "http://schemas.openxmlformats.org/spreadsheetml/2006/main"
REL_NS = "http://schemas.openxmlformats.org/officeDocument/2006/relationships"

RELS = f"""<?xml version="1.0" encoding="UTF-8" standalone="yes"?>
<Relationships xmlns="http://schemas.openxmlformats.org/package/2006/relationships">
  <Relationship Id="rId1" Type="{REL_NS}/worksheet" Target="worksheets/sheet1.xml"/>
  <Relationship Id="rId2" Type="{REL_NS}/worksheet" Target="/xl/worksheets/sheet2.xml"/>
  <Relationship Id="rId3" Type="{REL_NS}/styles" Target="styles.xml"/>
  <Relationship Id="rId4" Type="{REL_NS}/sharedStrings" Target="sharedStrings.xml"/>
</Relationships>
"""

WORKBOOK = f"""<?xml version="1.0" encoding="UTF-8" standalone="yes"?>
<workbook xmlns="{MAIN_NS}" xmlns:r="{REL_NS}">
  <workbookPr{{date1904}}/>
  <sheets>
    <sheet name="Data" sheetId="1" r:id="rId1"/>
    <sheet name="Empty" sheetId="2" r:id="rId2"/>
  </sheets>
</workbook>
"""

STYLES = f"""<?xml version="1.0" encoding="UTF-8" standalone="yes"?>
<styleSheet xmlns="{MAIN_NS}">
  <numFmts count="2">
    <numFmt numFmtId="164" formatCode="yyyy\\-mm\\-dd"/>
    <numFmt numFmtId="165" formatCode="&quot;days&quot;\\ 0.00"/>
  </numFmts>
  <cellStyleXfs count="1">
    <xf numFmtId="0" fontId="0" fillId="0" borderId="0"/>
  </cellStyleXfs>
  <cellXfs count="5">
    <xf numFmtId="0" fontId="0" fillId="0" borderId="0" xfId="0"/>
    <xf numFmtId="14" fontId="0" fillId="0" borderId="0" xfId="0" applyNumberFormat="1"/>
    <xf numFmtId="164" fontId="0" fillId="0" borderId="0" xfId="0" applyNumberFormat="1"/>
    <xf numFmtId="165" fontId="0" fillId="0" borderId="0" xfId="0" applyNumberFormat="1"/>
    <xf numFmtId="4" fontId="0" fillId="0" borderId="0" xfId="0" applyNumberFormat="1"/>
  </cellXfs>
</styleSheet>
"""

SHARED_STRINGS = f"""<?xml version="1.0" encoding="UTF-8" standalone="yes"?>
<sst xmlns="{MAIN_NS}" count="4" uniqueCount="4">
  <si><t>name</t></si>
  <si><t>when</t></si>
  <si><r><rPr><b/></rPr><t>rich</t></r><r><t xml:space="preserve"> text</t></r></si>
  <si><t>NA</t></si>
</sst>
"""

SHEET1 = f"""<?xml version="1.0" encoding="UTF-8" standalone="yes"?>
<worksheet xmlns="{MAIN_NS}">
  <sheetData>
    <row r="1">
      <c r="A1" t="s"><v>0</v></c>
      <c r="B1" t="s"><v>1</v></c>
      <c r="C1" t="inlineStr"><is><t>value</t></is></c>
      <c r="D1" t="inlineStr"><is><t>mixed</t></is></c>
    </row>
    <row r="2">
      <c r="A2" t="s"><v>2</v></c>
      <c r="B2" s="1"><v>25570</v></c>
      <c r="C2" s="4"><v>1.5</v></c>
      <c r="D2"><v>7</v></c>
    </row>
    <row r="3">
      <c r="A3" t="s"><v>3</v></c>
      <c r="B3" s="2"><v>25569.5</v></c>
      <c r="C3"><v>NA</v></c>
      <c r="D3" t="str"><f>"x"</f><v>x</v></c>
      <c r="E3" t="e"><v>#N/A</v></c>
    </row>
    <row r="4">
      <c r="A4" t="inlineStr"><is><t>inline</t></is></c>
      <c r="C4" s="3"><v>2</v></c>
      <c r="D4" t="s"><v>99</v></c>
      <c r="F4" t="q"><v>?</v></c>
    </row>
  </sheetData>
</worksheet>
"""

SHEET2 = f"""<?xml version="1.0" encoding="UTF-8" standalone="yes"?>
<worksheet xmlns="{MAIN_NS}"><sheetData/></worksheet>
"""


@pytest.fixture
def make_xlsx(tmp_path: Path) -> Callable[..., Path]:
    def make(*, date1904: bool = False, sheet1: str = SHEET1) -> Path:
        path = tmp_path / "book.xlsx"
        with ZipFile(path, "w") as zf:
            zf.writestr("xl/_rels/workbook.xml.rels", RELS)
            zf.writestr(
                "xl/workbook.xml",
                WORKBOOK.replace("{date1904}", ' date1904="1"' if date1904 else ""),
            )
            zf.writestr("xl/styles.xml", STYLES)
            zf.writestr("xl/sharedStrings.xml", SHARED_STRINGS)
            zf.writestr("xl/worksheets/sheet1.xml", sheet1)
            zf.writestr("xl/worksheets/sheet2.xml", SHEET2)
        return path

    return make
