"""
Query-string encoding for endpoint options.

Options are pydantic models. The alias of a field is the query parameter name and a field is only sent when it is set
to something other than its default or an empty value. Fields holding another options model are flattened into the
same query string.
"""

__all__ = ("QueryOptions", "build_query")

from typing import Any
from urllib.parse import urlencode, urlsplit, urlunsplit

from pydantic import BaseModel, ConfigDict

from .errors import InvalidOptionsError


def _is_empty(value: Any) -> bool:
    # bool is an int, so False is covered as well
    return value is None or (isinstance(value, str | int) and not value)


def _format_value(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


class QueryOptions(BaseModel):
    model_config = ConfigDict(populate_by_name=True, frozen=True, use_enum_values=True)

    def to_query(self) -> list[tuple[str, str]]:
        pairs: list[tuple[str, str]] = []
        for name, field in type(self).model_fields.items():
            value = getattr(self, name)
            if isinstance(value, QueryOptions):
                pairs.extend(value.to_query())
                continue
            if _is_empty(value):
                continue
            if not field.is_required() and value == field.get_default(call_default_factory=True):
                continue
            pairs.append((field.alias or name, _format_value(value)))
        return pairs


def build_query(path: str, options: QueryOptions | None) -> str:
    """Replace the query string of `path` with the encoded options. No options leaves the path untouched."""
    if options is None:
        return path
    if not isinstance(options, QueryOptions):
        raise InvalidOptionsError(f"Options must be a QueryOptions model, got {type(options).__name__}")
    try:
        parts = urlsplit(path)
    except ValueError as e:
        raise InvalidOptionsError(f"Unable to add options to '{path}': {e}") from e
    return urlunsplit(parts._replace(query=urlencode(options.to_query(), safe="$")))
