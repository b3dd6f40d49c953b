from collections.abc import Mapping, Sequence
from urllib.parse import quote

from httpx import URL, InvalidURL

from .errors import InvalidRequestPathError, MalformedHeadersError

PATH_SAFE_CHARACTERS: str = "@:!$&'()*+,;="
"""Characters left unescaped in path arguments; everything else, including '/', is percent-encoded."""


def ensure_trailing_slash(base_url: URL | str) -> URL:
    """Relative resolution only keeps the last segment of the base when the base ends with a slash."""
    url = str(base_url)
    return URL(url if url.endswith("/") else f"{url}/")


def resolve_url(base_url: URL, path: str) -> URL:
    """
    Resolve a relative path (optionally carrying a query string) against the base URL.

    A leading slash is ignored so that the base path is always preserved.
    """
    try:
        return base_url.join(path.lstrip("/"))
    except InvalidURL as e:
        raise InvalidRequestPathError(f"Unable to resolve '{path}' against '{base_url}': {e}") from e


def pair_headers(header_kv: Sequence[str]) -> list[tuple[str, str]]:
    """Turn a flat key, value, key, value... sequence into (key, value) pairs."""
    if len(header_kv) % 2 != 0:
        raise MalformedHeadersError
    return [(header_kv[i], header_kv[i + 1]) for i in range(0, len(header_kv), 2)]


def format_path(template: str, path_args: Mapping[str, str] | None = None) -> str:
    """Fill the `{name}` placeholders of a path template with percent-escaped arguments."""
    if path_args is None:
        return template
    try:
        return template.format(**{k: quote(str(v), safe=PATH_SAFE_CHARACTERS) for k, v in path_args.items()})
    except KeyError as k:
        raise InvalidRequestPathError(f"Missing path argument {k} for '{template}'") from k
