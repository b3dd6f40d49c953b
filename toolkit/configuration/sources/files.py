import tomllib
from functools import cache
from logging import getLogger
from pathlib import Path
from typing import cast

LOGGER = getLogger(__name__)


def _first_existing(potential_paths: tuple[Path | str, ...]) -> Path | None:
    return next((f for f in map(Path, potential_paths) if f.exists()), None)


@cache
def read_configuration_file(*potential_paths: Path | str, section: str, missing_ok: bool = False) -> dict:
    """
    Read one section of the first TOML file found among the potential paths, so the order of the paths matters.

    missing_ok: return an empty dictionary when no file or no such section is found instead of raising.
    """
    if (found := _first_existing(potential_paths)) is None:
        if missing_ok:
            return {}
        raise FileNotFoundError(
            f"Could not find configuration file. Searched: '{','.join(str(p) for p in potential_paths)}'",
        )

    content = tomllib.loads(found.read_text())
    LOGGER.info("Loaded toml file: %s", found.absolute())
    if section in content:
        return cast(dict, content[section])
    if missing_ok:
        return {}
    raise KeyError(f"section '{section}' is not found in configuration file '{found}'")
