from graphtype.errors import MalformedTypeRefError
from graphtype.introspection.models import TypeKind, TypeRef


def _wrapped(type_ref: TypeRef, context: str | None) -> TypeRef:
    if type_ref.of_type is None:
        raise MalformedTypeRefError(f"{type_ref.kind} wrapper has no inner type", context)
    return type_ref.of_type


def resolve_type_ref(type_ref: TypeRef, non_null: bool = False, context: str | None = None) -> str:
    """
    Translate a GraphQL type reference into the equivalent TypeScript type.

    Examples:
        T      -> Optional<T>
        T!     -> NonNull<T>
        [T]!   -> NonNull<List<Optional<T>>>
        [T!]   -> List<NonNull<T>>
        [T!]!  -> NonNull<List<NonNull<T>>>

    Args:
        type_ref: The reference to translate
        non_null: Whether the enclosing reference is NON_NULL
        context: Location used in error messages, e.g. ``Box.value``

    Raises:
        MalformedTypeRefError: If the reference is neither named nor a valid wrapper
    """
    if type_ref.kind == TypeKind.LIST:
        return f"List<{resolve_type_ref(_wrapped(type_ref, context), False, context)}>"

    if type_ref.kind == TypeKind.NON_NULL:
        inner = _wrapped(type_ref, context)
        if inner.kind == TypeKind.NON_NULL:
            raise MalformedTypeRefError("NON_NULL wraps another NON_NULL", context)
        return f"NonNull<{resolve_type_ref(inner, True, context)}>"

    if not type_ref.name:
        raise MalformedTypeRefError(f"{type_ref.kind} reference has no name", context)

    return type_ref.name if non_null else f"Optional<{type_ref.name}>"
