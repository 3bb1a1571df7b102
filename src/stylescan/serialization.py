"""Token serialization: JSON round-trip for stylescan tokens.

Converts tokens, flat or tree form, to/from JSON-compatible dicts. Useful
for caching token streams and for debugging.

All output is deterministic (sorted keys, sorted modifiers).

Example:
    from stylescan import tree
    from stylescan.serialization import from_json, to_json

    tokens = tree("a { color: red; }")
    assert from_json(to_json(tokens)) == tokens

Thread Safety:
    All functions are pure.

"""

import json
from collections.abc import Sequence
from dataclasses import fields
from typing import Any

from stylescan.tokens import AtRule, BlockEnd, BlockStart, Code, Rule, Token

# Registry of type names to classes for deserialization
_TOKEN_TYPES: dict[str, type] = {
    "Code": Code,
    "BlockStart": BlockStart,
    "BlockEnd": BlockEnd,
    "Rule": Rule,
    "AtRule": AtRule,
}


def to_dict(token: Token | AtRule, *, include_offsets: bool = True) -> dict[str, Any]:
    """Convert a token to a JSON-compatible dict.

    Includes a ``_type`` discriminator field for deserialization. Children
    of tree-form blocks are serialized recursively.

    Args:
        token: Any stylescan token.
        include_offsets: Keep ``offset`` fields. Without them two token
            streams compare equal regardless of formatting.

    Returns:
        Dict with ``_type`` and all token fields.

    """
    result: dict[str, Any] = {"_type": type(token).__name__}

    for f in fields(token):
        if f.name == "offset" and not include_offsets:
            continue
        result[f.name] = _serialize_value(getattr(token, f.name), include_offsets)

    return result


def _serialize_value(value: Any, include_offsets: bool) -> Any:
    if isinstance(value, Token | AtRule):
        return to_dict(value, include_offsets=include_offsets)
    if isinstance(value, tuple):
        return [_serialize_value(item, include_offsets) for item in value]
    if isinstance(value, frozenset):
        return sorted(value)
    # Primitives: str, int, bool, None
    return value


def from_dict(data: dict[str, Any]) -> Token | AtRule:
    """Reconstruct a token from a dict produced by to_dict().

    Raises:
        ValueError: If ``_type`` is missing or unknown.

    """
    type_name = data.get("_type")
    if type_name is None:
        msg = "Missing '_type' field in serialized token"
        raise ValueError(msg)

    token_cls = _TOKEN_TYPES.get(type_name)
    if token_cls is None:
        msg = f"Unknown token type: {type_name!r}"
        raise ValueError(msg)

    kwargs: dict[str, Any] = {}
    for f in fields(token_cls):
        if f.name not in data:
            continue
        raw = data[f.name]
        if f.name == "modifiers":
            kwargs[f.name] = frozenset(raw)
        else:
            kwargs[f.name] = _deserialize_value(raw)

    return token_cls(**kwargs)


def _deserialize_value(value: Any) -> Any:
    if isinstance(value, dict):
        return from_dict(value)
    if isinstance(value, list):
        return tuple(_deserialize_value(item) for item in value)
    return value


def to_json(
    tokens: Sequence[Token], *, indent: int | None = None, include_offsets: bool = True
) -> str:
    """Serialize a token sequence to a JSON array.

    Args:
        tokens: Flat or tree-form tokens.
        indent: JSON indentation level (None for compact).
        include_offsets: Keep ``offset`` fields.

    """
    data = [to_dict(token, include_offsets=include_offsets) for token in tokens]
    return json.dumps(data, sort_keys=True, indent=indent)


def from_json(data: str) -> list[Token]:
    """Deserialize a token sequence from a JSON string.

    Raises:
        ValueError: If the JSON is not an array of tokens.

    """
    raw = json.loads(data)
    if not isinstance(raw, list):
        msg = f"Expected a JSON array, got {type(raw).__name__}"
        raise ValueError(msg)

    tokens: list[Token] = []
    for item in raw:
        token = from_dict(item)
        if not isinstance(token, Token):
            msg = f"Expected a token, got {type(token).__name__}"
            raise ValueError(msg)
        tokens.append(token)
    return tokens
