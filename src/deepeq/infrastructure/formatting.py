"""Default value formatter: value + FormatMode → display text.

FRIENDLY prefers a type's own __str__ (exceptions, enums, paths, decimals).
Strings and bytes always use repr() so quoting and escapes stay visible.
EXACT_TYPE wraps repr() in the concrete type name: "int(30)", "app.models.Id('x')".

Never raises: a failing __str__/__repr__ renders as a sentinel.
"""

from __future__ import annotations

from deepeq.domain.model.enums import FormatMode
from deepeq.domain.model.value_pair import MISSING

DEFAULT_MAX_LENGTH = 512
NON_EXISTENT = "<non-existent>"
_ELLIPSIS = "..."


def format_value(value: object, mode: FormatMode, *, max_length: int = DEFAULT_MAX_LENGTH) -> str:
    """Render value for a diff line.

    Args:
        value: Value to render (MISSING renders as NON_EXISTENT)
        mode: Rendering mode
        max_length: Longer renderings are clipped with "..." (must be > len("..."))

    Returns:
        Display text, at most max_length characters

    Raises:
        ValueError: max_length too small.
        TypeError: mode is not a FormatMode.
    """
    if max_length <= len(_ELLIPSIS):
        raise ValueError(f"max_length must be > {len(_ELLIPSIS)}, got {max_length}")

    if value is MISSING:
        return NON_EXISTENT

    match mode:
        case FormatMode.FRIENDLY:
            text = _friendly(value)
        case FormatMode.EXACT_TYPE:
            text = f"{qualified_type_name(type(value))}({_safe_repr(value)})"
        case _:
            raise TypeError(f"mode must be FormatMode, got {type(mode).__name__}")

    return _clip(text, max_length)


def qualified_type_name(cls: type) -> str:
    """Type name with module prefix, builtins unprefixed."""
    module = getattr(cls, "__module__", None)
    if module is None or module == "builtins":
        return cls.__qualname__
    return f"{module}.{cls.__qualname__}"


def has_custom_str(cls: type) -> bool:
    """True if some class in the MRO other than object defines __str__."""
    for base in cls.__mro__:
        if base is object:
            return False
        if "__str__" in vars(base):
            return True
    return False


def _friendly(value: object) -> str:
    if isinstance(value, str | bytes | bytearray):
        return _safe_repr(value)
    if has_custom_str(type(value)):
        return _safe_str(value)
    return _safe_repr(value)


def _safe_str(value: object) -> str:
    try:
        return str(value)
    except Exception as error:  # noqa: BLE001 - formatting must never fail
        return _failed(value, error)


def _safe_repr(value: object) -> str:
    try:
        return repr(value)
    except Exception as error:  # noqa: BLE001 - formatting must never fail
        return _failed(value, error)


def _failed(value: object, error: Exception) -> str:
    prefix = f"<{type(value).__qualname__} formatting failed: {type(error).__name__}"
    try:
        message = str(error)
    except Exception:  # noqa: BLE001 - the error message itself may fail
        return f"{prefix}>"
    return f"{prefix}: {message}>"


def _clip(text: str, max_length: int) -> str:
    if len(text) <= max_length:
        return text
    return text[: max_length - len(_ELLIPSIS)] + _ELLIPSIS
