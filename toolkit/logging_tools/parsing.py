__all__ = ["parse_validation_error"]

from pprint import pformat

from pydantic import ValidationError


def parse_validation_error(ex: ValidationError) -> str:
    """
    The traceback of a ValidationError is verbose and hard to read in a log. This renders one line per invalid field
    followed by the offending input.
    """
    errors = ex.errors()
    lines = [f"{ex.title} configuration validation error"]
    lines.extend(f"{','.join(str(loc) for loc in e['loc'])} - {e['msg']}" for e in errors)
    lines.append("Input: " + pformat(errors[0]["input"]))
    return "\n".join(lines)
