# ruff: noqa:D101, D102
from __future__ import annotations

__all__ = ["Relationship"]

from typing import IO

from pyexpat import ParserCreate

from .core import as_dataclass


@as_dataclass
class Relationship:
    Id: str
    Type: str
    Target: str

    @staticmethod
    def scan_xml(io: IO[bytes]) -> list[Relationship]:
        ret = []

        def rs_handler(tag: str, attr: dict[str, str]) -> None:
            nonlocal ret

            if tag == "Relationship":
                ret.append(
                    Relationship(
                        attr["Id"],
                        attr["Type"].rsplit("/", 1)[-1],
                        attr["Target"],
                    ),
                )

        parser = ParserCreate()
        parser.StartElementHandler = rs_handler
        parser.ParseFile(io)

        return ret

    def part_name(self, base: str = "xl") -> str:
        """Zip member name of relationship target, relative to `base` directory unless absolute."""
        if self.Target.startswith("/"):
            return self.Target[1:]
        return f"{base}/{self.Target}"
