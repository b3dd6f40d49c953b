import os
from collections.abc import Iterator, Mapping
from contextlib import contextmanager
from unittest.mock import patch

from pydantic import ValidationError

from toolkit import parse_validation_error


@contextmanager
def better_validation_message() -> Iterator[None]:
    """Print the readable rendition of a ValidationError before letting it fail the test."""
    try:
        yield
    except ValidationError as e:
        print(parse_validation_error(e))  # noqa: T201
        raise


@contextmanager
def settings_environment(prefix: str, values: Mapping[str, object]) -> Iterator[dict[str, str]]:
    """Expose settings values as <PREFIX><KEY> environment variables for the duration of the block."""
    environment = {f"{prefix}{key.upper()}": str(value) for key, value in values.items()}
    with patch.dict(os.environ, environment):
        yield environment
