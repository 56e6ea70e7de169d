"""
Shape decoders for the service's JSON responses.

Each decoder takes the raw body text produced by the transport, parses it
and extracts one typed value. Any parse failure or shape mismatch raises
MalformedResponseError with the original cause chained.
"""
import json
from typing import Any, List, Optional
from apertium_translator.clients.errors import MalformedResponseError

INT32_MIN = -(2 ** 31)
INT32_MAX = 2 ** 31 - 1


def _parse(text: str) -> Any:
    try:
        return json.loads(text)
    except (TypeError, ValueError) as e:
        raise MalformedResponseError(f"Response is not valid JSON: {text[:80]!r}") from e


def _expect(value: Any, expected_type: type, what: str) -> Any:
    if not isinstance(value, expected_type):
        raise MalformedResponseError(
            f"Expected {what}, got {type(value).__name__}"
        )
    return value


def _to_text(value: Any) -> Optional[str]:
    """Strings are returned as-is; other JSON values are rendered back to JSON text."""
    if value is None:
        return None
    if isinstance(value, str):
        return value
    return json.dumps(value, ensure_ascii=False, separators=(",", ":"))


def as_string(text: str) -> str:
    return _expect(_parse(text), str, "a JSON string")


def as_string_array(text: str, key: Optional[str] = None) -> List[Optional[str]]:
    """
    Reads a JSON array into a list of the same length and order.
    With a key, every element must be an object and the value under key is taken;
    an element without the key leaves its slot as None.
    """
    elements = _expect(_parse(text), list, "a JSON array")
    values: List[Optional[str]] = []
    for element in elements:
        if key:
            obj = _expect(element, dict, "an array of JSON objects")
            values.append(_to_text(obj.get(key)))
        else:
            values.append(_to_text(element))
    return values


def as_nested_string(text: str, key: str, sub_key: str) -> str:
    """
    Looks up key in the top-level object, parses that value AGAIN as JSON text,
    then returns the value at sub_key.

    The service ships some payloads as JSON encoded inside a JSON string, so the
    value is always round-tripped through text rather than walked structurally.
    """
    obj = _expect(_parse(text), dict, "a JSON object")
    if key not in obj or obj[key] is None:
        raise MalformedResponseError(f"Response has no '{key}' property")

    inner = obj[key]
    nested = _expect(
        _parse(inner if isinstance(inner, str) else _to_text(inner)),
        dict,
        f"'{key}' to hold a JSON object",
    )
    value = _to_text(nested.get(sub_key))
    if value is None:
        raise MalformedResponseError(f"'{key}' has no '{sub_key}' property")
    return value


def as_int_array(text: str) -> List[int]:
    elements = _expect(_parse(text), list, "a JSON array")
    values: List[int] = []
    for element in elements:
        # bool is a subclass of int but is not a JSON number
        if isinstance(element, bool) or not isinstance(element, (int, float)):
            raise MalformedResponseError(f"Expected an integer, got {element!r}")
        if isinstance(element, float) and not element.is_integer():
            raise MalformedResponseError(f"Expected an integer, got {element!r}")
        number = int(element)
        if not INT32_MIN <= number <= INT32_MAX:
            raise MalformedResponseError(f"Integer {number} is outside the 32-bit range")
        values.append(number)
    return values
