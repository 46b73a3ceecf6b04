class TranslationError(ValueError):
    """Base class for every failure raised while translating an introspection schema."""


class IntrospectionError(TranslationError):
    """Raised when the introspection payload is missing or structurally invalid."""


class UnknownKindError(TranslationError):
    """Raised when a schema entity carries a kind no renderer handles."""

    def __init__(self, kind: str, type_name: str | None = None) -> None:
        self.kind = kind
        self.type_name = type_name
        where = f" on type '{type_name}'" if type_name else ""
        super().__init__(f"Unexpected type kind '{kind}'{where}")


class MalformedTypeRefError(TranslationError):
    """Raised when a type reference is neither a named type nor a LIST/NON_NULL wrapper."""

    def __init__(self, reason: str, context: str | None = None) -> None:
        self.reason = reason
        self.context = context
        prefix = f"{context}: " if context else ""
        super().__init__(f"{prefix}malformed type reference, {reason}")
