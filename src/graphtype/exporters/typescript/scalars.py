from collections.abc import Iterable, Mapping
from types import MappingProxyType

NUMBER_ALIAS = "number"
DEFAULT_SCALAR_ALIAS = "string"

BUILTIN_SCALAR_ALIASES: Mapping[str, str] = MappingProxyType(
    {
        "Boolean": "boolean",
        "Int": NUMBER_ALIAS,
        "Float": NUMBER_ALIAS,
        "String": "string",
    }
)


def parse_alias_pair(pair: str) -> tuple[str, str]:
    """Split a ``Name=expression`` pair, e.g. ``UnsignedInt=number``."""
    name, found, expression = pair.partition("=")
    name, expression = name.strip(), expression.strip()
    if not found or not name or not expression:
        raise ValueError(f"Invalid scalar alias '{pair}', expected 'Name=expression'")
    return name, expression


def build_scalar_aliases(
    numbers: Iterable[str] = (),
    aliases: Iterable[str] = (),
    overrides: Mapping[str, str] | None = None,
) -> Mapping[str, str]:
    """
    Build the read-only scalar alias table for one translation run.

    Sources are applied in order, so later ones win for the same scalar name:
    built-in aliases, ``overrides``, ``numbers``, then ``aliases``.

    Args:
        numbers: Scalar names represented as ``number``
        aliases: ``Name=expression`` pairs
        overrides: Name-to-expression mapping, typically from a config file

    Returns:
        Mapping[str, str]: Immutable scalar name to TypeScript expression mapping

    Raises:
        ValueError: If an alias pair is malformed
    """
    table = dict(BUILTIN_SCALAR_ALIASES)
    table.update(overrides or {})
    table.update(dict.fromkeys(numbers, NUMBER_ALIAS))
    table.update(parse_alias_pair(pair) for pair in aliases)
    return MappingProxyType(table)
