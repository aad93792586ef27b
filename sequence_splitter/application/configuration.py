"""Building splitters from configuration files and CLI overrides."""
from __future__ import annotations

import json
import string
from dataclasses import replace
from pathlib import Path
from typing import Any, Callable, Dict, Mapping, Optional, Type, TypeVar

from sequence_splitter.application.strategies import (
    condense,
    drop_blanks,
    drop_final_blank,
    drop_init_blank,
    on_sublist,
    one_of,
    when_elt,
)
from sequence_splitter.domain.models import (
    DEFAULT_SPLITTER,
    DelimiterDisposition,
    EndPolicy,
    RunPolicy,
    Splitter,
)

DELIMITER_KEYS = ("on", "one_of", "when")

CHARACTER_CLASSES: Dict[str, Callable[[str], bool]] = {
    "space": str.isspace,
    "digit": str.isdigit,
    "alpha": str.isalpha,
    "upper": str.isupper,
    "lower": str.islower,
    "punctuation": lambda char: char in string.punctuation,
}

E = TypeVar("E", DelimiterDisposition, RunPolicy, EndPolicy)


class ConfigurationError(ValueError):
    """Raised when a splitter description cannot be understood."""


def _parse_enum(enum_type: Type[E], value: Any, key: str) -> E:
    try:
        return enum_type(value)
    except ValueError:
        choices = ", ".join(member.value for member in enum_type)
        raise ConfigurationError(f"Invalid {key} {value!r}; expected one of: {choices}") from None


def character_class(name: str) -> Callable[[str], bool]:
    try:
        return CHARACTER_CLASSES[name]
    except KeyError:
        choices = ", ".join(sorted(CHARACTER_CLASSES))
        raise ConfigurationError(f"Unknown character class {name!r}; expected one of: {choices}") from None


def splitter_for_delimiter(
    on: Optional[str] = None,
    one_of_chars: Optional[str] = None,
    when: Optional[str] = None,
) -> Splitter:
    """Build a basic splitter from exactly one delimiter description."""
    given = [value for value in (on, one_of_chars, when) if value is not None]
    if len(given) != 1:
        raise ConfigurationError(
            f"Exactly one delimiter must be given ({', '.join(DELIMITER_KEYS)}), got {len(given)}"
        )
    if not isinstance(given[0], str):
        raise ConfigurationError(
            f"Delimiter must be a string, got {type(given[0]).__name__}: {given[0]!r}"
        )
    if on is not None:
        return on_sublist(on)
    if one_of_chars is not None:
        return one_of(one_of_chars)
    return when_elt(character_class(when))


def splitter_from_dict(data: Mapping[str, Any]) -> Splitter:
    """Create a splitter from a plain mapping such as a parsed JSON file.

    Example payload::

        {"one_of": ":;", "run_policy": "condense", "leading_blank_policy": "drop_blank"}
    """
    unknown = set(data) - set(DELIMITER_KEYS) - {
        "delimiter_disposition",
        "run_policy",
        "leading_blank_policy",
        "trailing_blank_policy",
    }
    if unknown:
        raise ConfigurationError(f"Unknown configuration keys: {', '.join(sorted(unknown))}")

    splitter = splitter_for_delimiter(
        on=data.get("on"), one_of_chars=data.get("one_of"), when=data.get("when")
    )
    return replace(
        splitter,
        delimiter_disposition=_parse_enum(
            DelimiterDisposition,
            data.get("delimiter_disposition", DEFAULT_SPLITTER.delimiter_disposition.value),
            "delimiter_disposition",
        ),
        run_policy=_parse_enum(
            RunPolicy, data.get("run_policy", DEFAULT_SPLITTER.run_policy.value), "run_policy"
        ),
        leading_blank_policy=_parse_enum(
            EndPolicy,
            data.get("leading_blank_policy", DEFAULT_SPLITTER.leading_blank_policy.value),
            "leading_blank_policy",
        ),
        trailing_blank_policy=_parse_enum(
            EndPolicy,
            data.get("trailing_blank_policy", DEFAULT_SPLITTER.trailing_blank_policy.value),
            "trailing_blank_policy",
        ),
    )


def load_config(path: Optional[Path]) -> Splitter:
    if not path:
        return DEFAULT_SPLITTER
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        raise ConfigurationError(f"Invalid JSON in {path}: {exc}") from exc
    if not isinstance(data, dict):
        raise ConfigurationError(f"Configuration in {path} must be a JSON object")
    return splitter_from_dict(data)


def with_cli_overrides(base: Splitter, overrides: Mapping[str, Any]) -> Splitter:
    """Create a new splitter with CLI overrides applied.

    ``None`` and ``False`` values leave the base untouched.
    """
    splitter = base
    if overrides.get("delimiter_disposition") is not None:
        splitter = replace(
            splitter,
            delimiter_disposition=_parse_enum(
                DelimiterDisposition, overrides["delimiter_disposition"], "delimiter_disposition"
            ),
        )
    if overrides.get("condense"):
        splitter = condense(splitter)
    if overrides.get("drop_init_blank"):
        splitter = drop_init_blank(splitter)
    if overrides.get("drop_final_blank"):
        splitter = drop_final_blank(splitter)
    if overrides.get("drop_blanks"):
        splitter = drop_blanks(splitter)
    return splitter
