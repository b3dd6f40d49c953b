"""
Contains premade type-hints related to JSONs.

They are built on pydantic's JsonValue so they can be used as model fields as well as plain hints.
"""
from typing import TypeAlias

from pydantic import JsonValue

JSON: TypeAlias = JsonValue

JSON_DICT: TypeAlias = dict[str, JsonValue]
"""
A JSON type that is a complete object, i.e., {"foo": "bar"}
"""

JSON_LIST: TypeAlias = list[JsonValue]
"""
A type-hint for lists of JSONs. i.e., "[{"foo": "bar"}]"
"""
