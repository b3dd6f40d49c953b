from .logging_tools import parse_validation_error

__all__ = ("parse_validation_error",)
