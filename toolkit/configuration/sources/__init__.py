from .files import read_configuration_file

__all__ = ("read_configuration_file",)
