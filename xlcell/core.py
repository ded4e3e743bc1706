from __future__ import annotations

__all__ = [
    "NUMBA_AVAILABLE",
    "PERFORMANCE_WARNINGS",
    "as_dataclass",
    "cached",
]

import os
import warnings
from typing import TYPE_CHECKING

from recordclass import as_dataclass as _as_dataclass
from typing_extensions import dataclass_transform

if TYPE_CHECKING:
    from typing import Callable, TypeVar

    from typing_extensions import ParamSpec

    T = TypeVar("T")
    P = ParamSpec("P")

    def cached(f: Callable[P, T]) -> Callable[P, T]:
        raise NotImplementedError

else:
    from functools import cache as cached

PERFORMANCE_WARNINGS: bool = os.environ.get("XLCELL_PERFORMANCE_WARNINGS", "0") == "1"

try:
    import numba  # noqa: F401

    NUMBA_AVAILABLE = True

except ImportError:
    NUMBA_AVAILABLE = False

    if PERFORMANCE_WARNINGS:
        warnings.warn(
            "Numba acceleration of cell reference parsing is unavailable",
            UserWarning,
            stacklevel=2,
        )


@dataclass_transform()
def as_dataclass(
    cls: type[T] | None = None,
    *,
    use_dict: bool = False,
    use_weakref: bool = False,
    hashable: bool = False,
    sequence: bool = False,
    mapping: bool = False,
    iterable: bool = False,
    readonly: bool = False,
    fast_new: bool = True,
    rename: bool = False,
    gc: bool = False,
) -> Callable[[type[T]], type[T]]:
    options = {
        "use_dict": use_dict,
        "use_weakref": use_weakref,
        "hashable": hashable,
        "sequence": sequence,
        "mapping": mapping,
        "iterable": iterable,
        "readonly": readonly,
        "fast_new": fast_new,
        "rename": rename,
        "gc": gc,
    }

    if cls is not None:
        return _as_dataclass(**options)(cls)  # type: ignore

    def wrapper(cls: type[T]) -> type[T]:
        return _as_dataclass(**options)(cls)  # type: ignore

    return wrapper
