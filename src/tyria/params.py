"""
Query parameter encoding.

The API filters bulk endpoints with ``id=<value>`` or a comma separated
``ids=<v1>,<v2>`` list. Commas are the separator the API expects and are
never escaped. String values are percent-encoded element by element, so a
comma inside a value cannot be mistaken for a separator.
"""

from operator import index
from typing import Iterable
from urllib.parse import quote


def _quote(value: str) -> str:
    return quote(value, safe="")


def _join(param: str, values: Iterable[str]) -> str:
    values = list(values)
    if not values:
        raise ValueError(f"'{param}' requires at least one value")
    return f"{param}={','.join(values)}"


def number_to_param(param: str, value: int) -> str:
    """
    Make a parameter out of a number.

    Example:
        >>> number_to_param("id", 42)
        'id=42'

    Raises:
        TypeError: If ``value`` is not an integer (e.g. a float)
    """
    return f"{param}={index(value)}"


def numbers_to_param(param: str, values: Iterable[int]) -> str:
    """
    Make a parameter out of a list of numbers.

    Example:
        >>> numbers_to_param("ids", [1, 2, 3])
        'ids=1,2,3'

    Raises:
        ValueError: If ``values`` is empty
        TypeError: If an element is not an integer
    """
    return _join(param, (str(index(value)) for value in values))


def string_to_param(param: str, value: str) -> str:
    """
    Make a parameter out of a string.

    Example:
        >>> string_to_param("id", "Guardian")
        'id=Guardian'
    """
    return f"{param}={_quote(value)}"


def strings_to_param(param: str, values: Iterable[str]) -> str:
    """
    Make a parameter out of a list of strings.

    Example:
        >>> strings_to_param("ids", ["Asura", "Human"])
        'ids=Asura,Human'

    Raises:
        ValueError: If ``values`` is empty
    """
    return _join(param, (_quote(value) for value in values))
