"""Pydantic models for GraphQL introspection documents."""

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator


class TypeKind(str, Enum):
    SCALAR = "SCALAR"
    OBJECT = "OBJECT"
    INTERFACE = "INTERFACE"
    UNION = "UNION"
    ENUM = "ENUM"
    INPUT_OBJECT = "INPUT_OBJECT"
    LIST = "LIST"
    NON_NULL = "NON_NULL"


class IntrospectionModel(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)


class TypeRef(IntrospectionModel):
    """A named type, or a LIST / NON_NULL wrapper around another reference."""

    kind: str
    name: str | None = None
    of_type: "TypeRef | None" = Field(None, alias="ofType")


class NamedRef(IntrospectionModel):
    """Reference by name, as used for interfaces, union members and root types."""

    name: str
    kind: str | None = None
    description: str | None = None


class InputValue(IntrospectionModel):
    name: str
    description: str | None = None
    type: TypeRef
    default_value: str | int | float | bool | None = Field(None, alias="defaultValue")
    is_deprecated: bool = Field(False, alias="isDeprecated")
    deprecation_reason: str | None = Field(None, alias="deprecationReason")


class SchemaField(IntrospectionModel):
    name: str
    description: str | None = None
    args: tuple[InputValue, ...] = ()
    type: TypeRef
    is_deprecated: bool = Field(False, alias="isDeprecated")
    deprecation_reason: str | None = Field(None, alias="deprecationReason")

    @field_validator("args", mode="before")
    @classmethod
    def none_as_empty(cls, value: Any) -> Any:
        return () if value is None else value


class EnumValue(IntrospectionModel):
    name: str
    description: str | None = None
    is_deprecated: bool = Field(False, alias="isDeprecated")
    deprecation_reason: str | None = Field(None, alias="deprecationReason")


class SchemaType(IntrospectionModel):
    """
    A named schema entity.

    ``kind`` stays a plain string so that an unsupported kind is reported by the
    renderer dispatch instead of being rejected while parsing. Children that do
    not apply to the kind are null in introspection results and become empty here.
    """

    kind: str
    name: str
    description: str | None = None
    fields: tuple[SchemaField, ...] = ()
    input_fields: tuple[InputValue, ...] = Field((), alias="inputFields")
    interfaces: tuple[NamedRef, ...] = ()
    enum_values: tuple[EnumValue, ...] = Field((), alias="enumValues")
    possible_types: tuple[NamedRef, ...] = Field((), alias="possibleTypes")

    @field_validator("fields", "input_fields", "interfaces", "enum_values", "possible_types", mode="before")
    @classmethod
    def none_as_empty(cls, value: Any) -> Any:
        return () if value is None else value


class Directive(IntrospectionModel):
    name: str
    description: str | None = None
    locations: tuple[str, ...] = ()
    args: tuple[InputValue, ...] = ()
    is_repeatable: bool = Field(False, alias="isRepeatable")


class Schema(IntrospectionModel):
    query_type: NamedRef | None = Field(None, alias="queryType")
    mutation_type: NamedRef | None = Field(None, alias="mutationType")
    subscription_type: NamedRef | None = Field(None, alias="subscriptionType")
    types: tuple[SchemaType, ...]
    directives: tuple[Directive, ...] = ()

    @field_validator("types", mode="before")
    @classmethod
    def drop_null_types(cls, value: Any) -> Any:
        if isinstance(value, list | tuple):
            return [type_ for type_ in value if type_ is not None]
        return value

    @field_validator("directives", mode="before")
    @classmethod
    def none_as_empty(cls, value: Any) -> Any:
        return () if value is None else value

    @model_validator(mode="after")
    def validate_root_types(self) -> "Schema":
        type_names = {type_.name for type_ in self.types}
        for root_name in self.root_type_names():
            if root_name not in type_names:
                raise ValueError(f"Root type '{root_name}' is not defined in the schema types")
        return self

    def root_type_names(self) -> list[str]:
        """Names of the query, mutation and subscription root types that are present, in that order."""
        return [
            root_type.name
            for root_type in (self.query_type, self.mutation_type, self.subscription_type)
            if root_type is not None
        ]
