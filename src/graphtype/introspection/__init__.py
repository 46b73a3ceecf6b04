"""Introspection document model and loaders."""

from .loader import (
    fetch_introspection,
    load_introspection_file,
    load_schema_source,
    load_sdl_files,
    parse_introspection,
)
from .models import EnumValue, InputValue, NamedRef, Schema, SchemaField, SchemaType, TypeKind, TypeRef

__all__ = [
    "EnumValue",
    "InputValue",
    "NamedRef",
    "Schema",
    "SchemaField",
    "SchemaType",
    "TypeKind",
    "TypeRef",
    "fetch_introspection",
    "load_introspection_file",
    "load_schema_source",
    "load_sdl_files",
    "parse_introspection",
]
