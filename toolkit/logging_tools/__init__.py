from .configure_logging import logging_init
from .parsing import parse_validation_error

__all__ = ("logging_init", "parse_validation_error")
