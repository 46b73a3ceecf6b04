from collections.abc import Callable, Mapping

from graphtype.errors import UnknownKindError
from graphtype.introspection.models import EnumValue, InputValue, SchemaField, SchemaType, TypeKind

from .comments import comment_for
from .resolver import resolve_type_ref
from .scalars import BUILTIN_SCALAR_ALIASES, DEFAULT_SCALAR_ALIAS

INDENT = "    "
REQUIRED_SEPARATOR = ": "
OPTIONAL_SEPARATOR = "?: "


class TypeScriptRenderer:
    """
    Renders introspection schema types into TypeScript declaration blocks.

    Each block ends without a trailing newline; joining blocks is left to the emitter.
    """

    def __init__(self, scalar_aliases: Mapping[str, str] | None = None):
        self.scalar_aliases = BUILTIN_SCALAR_ALIASES if scalar_aliases is None else scalar_aliases
        self._renderers: dict[str, Callable[[SchemaType], str]] = {
            TypeKind.SCALAR.value: self.render_scalar,
            TypeKind.ENUM.value: self.render_enum,
            TypeKind.UNION.value: self.render_union,
            TypeKind.INTERFACE.value: self.render_interface,
            TypeKind.OBJECT.value: self.render_object,
            TypeKind.INPUT_OBJECT.value: self.render_input_object,
        }

    def render_type(self, type_def: SchemaType) -> str:
        """Render one schema type, dispatching on its kind."""
        renderer = self._renderers.get(type_def.kind)
        if renderer is None:
            raise UnknownKindError(type_def.kind, type_def.name)
        return renderer(type_def)

    def render_scalar(self, type_def: SchemaType) -> str:
        alias = self.scalar_aliases.get(type_def.name, DEFAULT_SCALAR_ALIAS)
        return self._with_comment(type_def, [f"type {type_def.name} = {alias};"])

    def render_enum(self, type_def: SchemaType) -> str:
        if not type_def.enum_values:
            return self._with_comment(type_def, [f"export type {type_def.name} = never;"])

        values = " |\n".join(self._render_enum_value(value) for value in type_def.enum_values)
        return self._with_comment(type_def, [f"export type {type_def.name} = (", values, ");"])

    def render_union(self, type_def: SchemaType) -> str:
        members = " | ".join(member.name for member in type_def.possible_types) or "never"
        return self._with_comment(type_def, [f"export type {type_def.name} = {members};"])

    def render_interface(self, type_def: SchemaType) -> str:
        return self._render_structure(type_def, f"export interface {type_def.name} {{", type_def.fields)

    def render_object(self, type_def: SchemaType) -> str:
        heading = f"export interface {type_def.name}"
        if type_def.interfaces:
            heading += " extends " + ", ".join(interface.name for interface in type_def.interfaces)
        return self._render_structure(type_def, heading + " {", type_def.fields)

    def render_input_object(self, type_def: SchemaType) -> str:
        return self._render_structure(type_def, f"export interface {type_def.name} {{", type_def.input_fields)

    def render_member(self, owner: SchemaType, member: SchemaField | InputValue) -> str:
        """Render a field or input field, preceded by a blank line and its comment block."""
        separator = REQUIRED_SEPARATOR if member.type.kind == TypeKind.NON_NULL else OPTIONAL_SEPARATOR
        type_expression = resolve_type_ref(member.type, context=f"{owner.name}.{member.name}")

        lines = [""]
        comment = comment_for(member, INDENT)
        if comment:
            lines.append(comment)
        lines.append(f"{INDENT}{member.name}{separator}{type_expression};")

        return "\n".join(lines)

    def _render_enum_value(self, value: EnumValue) -> str:
        lines = [""]
        comment = comment_for(value, INDENT)
        if comment:
            lines.append(comment)
        lines.append(f'{INDENT}"{value.name}"')

        return "\n".join(lines)

    def _render_structure(
        self, type_def: SchemaType, heading: str, members: tuple[SchemaField, ...] | tuple[InputValue, ...]
    ) -> str:
        lines = [heading]
        lines.extend(self.render_member(type_def, member) for member in members)
        lines.append("}")

        return self._with_comment(type_def, lines)

    def _with_comment(self, type_def: SchemaType, lines: list[str]) -> str:
        comment = comment_for(type_def)
        return "\n".join([comment, *lines] if comment else lines)
