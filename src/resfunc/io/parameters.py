"""Parameter-file readers for resolution coefficients.

Readers are selected by file suffix. The plain text format is a list of
whitespace separated numbers (``#`` starts a comment), which is how
resolution parameterisations are traditionally shipped::

    # mu1
    -0.012  0.0004
    # sigma1
     0.081  0.0011
    ...

TOML and JSON files hold either a flat ``parameters`` array or a ``groups``
table mapping shape-parameter names to coefficient arrays.
"""

from __future__ import annotations

import json
import math
import tomllib
from collections.abc import Callable, Iterable, Mapping, Sequence
from pathlib import Path
from typing import Any

from resfunc.core.shared.exceptions import ParameterLoadError

Reader = Callable[[Path, Sequence[str] | None], list[float]]

READERS: dict[str, Reader] = {}


def register_reader(file_types: str | Iterable[str]) -> Callable[[Reader], Reader]:
    """Decorator to register a reader function for specific file suffixes."""
    if isinstance(file_types, str):
        file_types = [file_types]

    def decorator(fn: Reader) -> Reader:
        for ft in file_types:
            READERS[ft] = fn
        return fn

    return decorator


def _to_float(token: Any, where: str) -> float:
    if isinstance(token, bool):
        msg = f"Expected a number {where}, got {token!r}"
        raise ParameterLoadError(msg)
    try:
        value = float(token)
    except (TypeError, ValueError) as exc:
        msg = f"Expected a number {where}, got {token!r}"
        raise ParameterLoadError(msg) from exc
    if not math.isfinite(value):
        msg = f"Non-finite coefficient {where}: {token!r}"
        raise ParameterLoadError(msg)
    return value


@register_reader(["txt", "dat", "par"])
def read_text_parameters(path: Path, group_names: Sequence[str] | None = None) -> list[float]:
    """Read whitespace separated coefficients from a text file."""
    values: list[float] = []
    with path.open(encoding="utf-8") as f:
        for lineno, line in enumerate(f, start=1):
            content = line.split("#", 1)[0]
            for token in content.split():
                values.append(_to_float(token, f"at {path.name}:{lineno}"))
    return values


def _from_mapping(
    data: Mapping[str, Any], path: Path, group_names: Sequence[str] | None
) -> list[float]:
    if "parameters" in data and "groups" in data:
        msg = f"{path.name}: use either 'parameters' or 'groups', not both"
        raise ParameterLoadError(msg)

    if "parameters" in data:
        flat = data["parameters"]
        if not isinstance(flat, list):
            msg = f"{path.name}: 'parameters' must be an array of numbers"
            raise ParameterLoadError(msg)
        return [_to_float(v, f"in {path.name} parameters[{i}]") for i, v in enumerate(flat)]

    if "groups" in data:
        groups = data["groups"]
        if not isinstance(groups, Mapping):
            msg = f"{path.name}: 'groups' must be a table of coefficient arrays"
            raise ParameterLoadError(msg)
        names = list(group_names) if group_names is not None else list(groups)
        missing = [name for name in names if name not in groups]
        if missing:
            msg = f"{path.name}: missing parameter groups {missing}"
            raise ParameterLoadError(msg)
        unknown = [name for name in groups if name not in names]
        if unknown:
            msg = f"{path.name}: unknown parameter groups {unknown}"
            raise ParameterLoadError(msg)
        values: list[float] = []
        for name in names:
            coefs = groups[name]
            if not isinstance(coefs, list):
                coefs = [coefs]
            values.extend(
                _to_float(v, f"in {path.name} groups.{name}[{i}]") for i, v in enumerate(coefs)
            )
        return values

    msg = f"{path.name}: expected a 'parameters' array or a 'groups' table"
    raise ParameterLoadError(msg)


@register_reader("toml")
def read_toml_parameters(path: Path, group_names: Sequence[str] | None = None) -> list[float]:
    """Read coefficients from a TOML file."""
    with path.open("rb") as f:
        try:
            data = tomllib.load(f)
        except tomllib.TOMLDecodeError as exc:
            msg = f"Invalid TOML in {path}: {exc}"
            raise ParameterLoadError(msg) from exc
    return _from_mapping(data, path, group_names)


@register_reader("json")
def read_json_parameters(path: Path, group_names: Sequence[str] | None = None) -> list[float]:
    """Read coefficients from a JSON file."""
    with path.open(encoding="utf-8") as f:
        try:
            data = json.load(f)
        except json.JSONDecodeError as exc:
            msg = f"Invalid JSON in {path}: {exc}"
            raise ParameterLoadError(msg) from exc
    if isinstance(data, list):
        data = {"parameters": data}
    if not isinstance(data, Mapping):
        msg = f"{path.name}: expected a JSON object or array"
        raise ParameterLoadError(msg)
    return _from_mapping(data, path, group_names)


def load_parameters(
    path: str | Path,
    expected: int | None = None,
    group_names: Sequence[str] | None = None,
) -> list[float]:
    """Load resolution coefficients from a file.

    Args:
        path: Parameter file; the reader is picked from its suffix (text by default)
        expected: Required number of coefficients, if known
        group_names: Shape-parameter names, used to order TOML/JSON ``groups`` tables

    Returns
    -------
        Coefficients in layout order

    Raises
    ------
        ParameterLoadError: If the file is missing, malformed, empty, or holds
            a number of coefficients other than ``expected``
    """
    path = Path(path)
    if not path.is_file():
        msg = f"Parameter file not found: {path}"
        raise ParameterLoadError(msg)

    reader = READERS.get(path.suffix.lstrip(".").lower(), read_text_parameters)
    try:
        values = reader(path, group_names)
    except UnicodeDecodeError as exc:
        msg = f"Parameter file {path} is not a text file"
        raise ParameterLoadError(msg) from exc
    except OSError as exc:
        msg = f"Cannot read parameter file {path}: {exc}"
        raise ParameterLoadError(msg) from exc

    if not values:
        msg = f"No coefficients found in {path}"
        raise ParameterLoadError(msg)
    if expected is not None and len(values) != expected:
        msg = f"Expected {expected} coefficients in {path}, found {len(values)}"
        raise ParameterLoadError(msg)
    return values


def save_parameters(
    path: str | Path,
    values: Sequence[float],
    *,
    per_line: int | None = None,
    comment: str | None = None,
) -> None:
    """Write coefficients in the plain text format.

    Args:
        path: Destination file
        values: Coefficients in layout order
        per_line: Coefficients per line (e.g. ``order + 1`` for one group per line)
        comment: Optional header, written as ``#`` comment lines
    """
    path = Path(path)
    width = per_line or len(values) or 1
    lines = [f"# {line}" for line in comment.splitlines()] if comment else []
    for start in range(0, len(values), width):
        lines.append("  ".join(repr(float(v)) for v in values[start : start + width]))
    path.write_text("\n".join(lines) + "\n", encoding="utf-8")


__all__ = [
    "READERS",
    "load_parameters",
    "read_json_parameters",
    "read_text_parameters",
    "read_toml_parameters",
    "register_reader",
    "save_parameters",
]
