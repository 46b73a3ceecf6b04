from collections.abc import Mapping

from graphtype import log
from graphtype.introspection.models import Schema

from .emitter import translate


def transform(
    schema: Schema,
    scalar_aliases: Mapping[str, str] | None = None,
    skip_introspection_types: bool = False,
) -> str:
    """
    Transform an introspection schema to TypeScript declarations.

    Args:
        schema: The introspection schema
        scalar_aliases: Scalar name to TypeScript expression table, built-ins when omitted
        skip_introspection_types: Leave out ``__``-prefixed introspection types

    Returns:
        str: TypeScript declarations
    """
    log.info(f"Transforming GraphQL schema to TypeScript with {len(schema.types)} types")

    result = translate(schema, scalar_aliases, skip_introspection_types)

    log.info("Successfully converted GraphQL schema to TypeScript")

    return result


def translate_to_typescript(
    schema: Schema,
    scalar_aliases: Mapping[str, str] | None = None,
    skip_introspection_types: bool = False,
) -> str:
    """
    Translate an introspection schema to TypeScript declarations.

    Args:
        schema: The introspection schema
        scalar_aliases: Scalar name to TypeScript expression table, built-ins when omitted
        skip_introspection_types: Leave out ``__``-prefixed introspection types

    Returns:
        str: TypeScript declarations
    """
    return transform(schema, scalar_aliases, skip_introspection_types)
