from .json import JSON, JSON_DICT, JSON_LIST

__all__ = ("JSON", "JSON_DICT", "JSON_LIST")
