"""Defensive field extraction from loosely shaped lookup responses.

The three lookup services answer with mutually incompatible JSON documents and
may omit fields (or return ``null``) for names they do not know. Every read
goes through :func:`decode`, which walks a path one step at a time and returns
either :class:`Found` with a typed value or :class:`Missing` with the reason the
walk stopped. :func:`extract` collapses that into a value or a default.
"""

import math
from dataclasses import dataclass
from typing import Any, Generic, Mapping, Sequence, Tuple, TypeVar, Union

from pes.core.constraints import MAX_INT32

T = TypeVar("T")

PathStep = Union[str, int]
Path = Tuple[PathStep, ...]


@dataclass(frozen=True)
class Found(Generic[T]):
    value: T


@dataclass(frozen=True)
class Missing:
    reason: str


Decoded = Union[Found[T], Missing]


def _step(current: Any, step: PathStep) -> Union[Found[Any], Missing]:
    if isinstance(step, str):
        if not isinstance(current, Mapping):
            return Missing(f"expected an object to read {step!r}")
        if step not in current:
            return Missing(f"field {step!r} is absent")
        return Found(current[step])

    if isinstance(current, (str, bytes)) or not isinstance(current, Sequence):
        return Missing(f"expected an array to read index {step}")
    if not current:
        return Missing("array is empty")
    if not -len(current) <= step < len(current):
        return Missing(f"index {step} is out of range")
    return Found(current[step])


def _as_int(value: Any) -> Union[Found[int], Missing]:
    # bool is an int subclass but never a valid number here
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return Missing(f"expected a number, got {type(value).__name__}")
    if isinstance(value, float) and not math.isfinite(value):
        return Missing("number is not finite")
    if value < 0:
        return Missing("number is negative")
    if value > MAX_INT32:
        return Missing("number is out of range")
    return Found(int(value))


def _as_str(value: Any) -> Union[Found[str], Missing]:
    if not isinstance(value, str):
        return Missing(f"expected a string, got {type(value).__name__}")
    return Found(value)


_DECODERS = {
    int: _as_int,
    str: _as_str,
}


def decode(document: Any, path: Path, kind: type) -> Decoded:
    """Walk ``path`` through ``document`` and decode the leaf as ``kind``.

    Args:
        document: Parsed JSON value, or None when the lookup produced nothing
        path: Field names (mapping access) and integer indexes (array access)
        kind: ``int`` or ``str``; the type of the value to produce

    Returns:
        Found with the decoded value, or Missing describing where the walk stopped
    """
    try:
        decoder = _DECODERS[kind]
    except KeyError:
        raise TypeError(f"Unsupported field kind: {kind!r}") from None

    if document is None:
        return Missing("no document")

    current = document
    for step in path:
        result = _step(current, step)
        if isinstance(result, Missing):
            return result
        current = result.value

    return decoder(current)


def extract(document: Any, path: Path, default: T) -> T:
    """Return the value at ``path`` or ``default``; the default's type picks the decoder."""
    result = decode(document, path, type(default))
    if isinstance(result, Found):
        return result.value
    return default
