import pytest

from graphtype.errors import MalformedTypeRefError, UnknownKindError
from graphtype.exporters.typescript.renderers import TypeScriptRenderer
from graphtype.exporters.typescript.scalars import build_scalar_aliases
from graphtype.introspection import Schema, SchemaType
from tests.conftest import field, input_value, list_of, named, non_null, schema_type


def make_type(**kwargs: object) -> SchemaType:
    kind = kwargs.pop("kind")
    name = kwargs.pop("name")
    return SchemaType.model_validate(schema_type(str(kind), str(name), **kwargs))


@pytest.fixture
def renderer() -> TypeScriptRenderer:
    return TypeScriptRenderer(build_scalar_aliases(aliases=["DateTime=Date"]))


class TestScalarRenderer:
    def test_builtin_alias(self, renderer: TypeScriptRenderer) -> None:
        assert renderer.render_type(make_type(kind="SCALAR", name="Int")) == "type Int = number;"

    def test_caller_alias(self, renderer: TypeScriptRenderer) -> None:
        assert renderer.render_type(make_type(kind="SCALAR", name="DateTime")) == "type DateTime = Date;"

    def test_unmapped_scalar_falls_back_to_string(self, renderer: TypeScriptRenderer) -> None:
        assert renderer.render_type(make_type(kind="SCALAR", name="ID")) == "type ID = string;"

    def test_description_comment(self, renderer: TypeScriptRenderer) -> None:
        scalar = make_type(kind="SCALAR", name="JSON", description="Arbitrary JSON value.")
        assert renderer.render_type(scalar) == "/**\n * Arbitrary JSON value.\n */\ntype JSON = string;"


class TestEnumRenderer:
    def test_members_with_comments(self, renderer: TypeScriptRenderer) -> None:
        enum = make_type(
            kind="ENUM",
            name="Carrier",
            enumValues=[
                {"name": "POST", "description": "Postal service.", "isDeprecated": False},
                {"name": "COURIER", "isDeprecated": False},
                {"name": "PIGEON", "isDeprecated": True, "deprecationReason": "Too slow."},
            ],
        )
        assert renderer.render_type(enum) == (
            "export type Carrier = (\n"
            "\n"
            "    /**\n"
            "     * Postal service.\n"
            "     */\n"
            '    "POST" |\n'
            "\n"
            '    "COURIER" |\n'
            "\n"
            "    /**\n"
            "     * @deprecated Too slow.\n"
            "     */\n"
            '    "PIGEON"\n'
            ");"
        )


class TestUnionRenderer:
    def test_members_keep_input_order(self, renderer: TypeScriptRenderer) -> None:
        union = make_type(
            kind="UNION",
            name="Item",
            possibleTypes=[{"kind": "OBJECT", "name": "B"}, {"kind": "OBJECT", "name": "A"}],
        )
        assert renderer.render_type(union) == "export type Item = B | A;"

    def test_union_description(self, renderer: TypeScriptRenderer) -> None:
        union = make_type(kind="UNION", name="Item", description="Anything.", possibleTypes=[{"name": "A"}])
        assert renderer.render_type(union) == "/**\n * Anything.\n */\nexport type Item = A;"


class TestStructureRenderers:
    def test_interface(self, renderer: TypeScriptRenderer) -> None:
        interface = make_type(
            kind="INTERFACE",
            name="Parcel",
            fields=[
                field("id", non_null(named("ID"))),
                field("weight", named("UnsignedInt"), description="Weight in grams."),
            ],
        )
        assert renderer.render_type(interface) == (
            "export interface Parcel {\n"
            "\n"
            "    id: NonNull<ID>;\n"
            "\n"
            "    /**\n"
            "     * Weight in grams.\n"
            "     */\n"
            "    weight?: Optional<UnsignedInt>;\n"
            "}"
        )

    def test_object_extends_interfaces_in_order(self, renderer: TypeScriptRenderer) -> None:
        obj = make_type(
            kind="OBJECT",
            name="Box",
            interfaces=[{"name": "Parcel"}, {"name": "Node"}],
            fields=[field("labels", non_null(list_of(non_null(named("String")))))],
        )
        assert renderer.render_type(obj) == (
            "export interface Box extends Parcel, Node {\n\n    labels: NonNull<List<NonNull<String>>>;\n}"
        )

    def test_deprecated_field(self, renderer: TypeScriptRenderer) -> None:
        obj = make_type(
            kind="OBJECT",
            name="Box",
            fields=[field("carrier", named("Carrier", "ENUM"), isDeprecated=True)],
        )
        assert "    /**\n     * @deprecated\n     */\n    carrier?: Optional<Carrier>;" in renderer.render_type(obj)

    def test_input_object_with_default(self, renderer: TypeScriptRenderer) -> None:
        input_object = make_type(
            kind="INPUT_OBJECT",
            name="ShipmentInput",
            inputFields=[
                input_value("address", non_null(named("String"))),
                input_value("copies", named("Int"), defaultValue="0"),
            ],
        )
        assert renderer.render_type(input_object) == (
            "export interface ShipmentInput {\n"
            "\n"
            "    address: NonNull<String>;\n"
            "\n"
            "    /**\n"
            "     * @default 0\n"
            "     */\n"
            "    copies?: Optional<Int>;\n"
            "}"
        )

    def test_empty_structure(self, renderer: TypeScriptRenderer) -> None:
        assert renderer.render_type(make_type(kind="INPUT_OBJECT", name="Empty")) == "export interface Empty {\n}"

    def test_malformed_member_reports_location(self, renderer: TypeScriptRenderer) -> None:
        obj = make_type(kind="OBJECT", name="Box", fields=[field("value", {"kind": "NON_NULL", "ofType": None})])
        with pytest.raises(MalformedTypeRefError, match=r"^Box\.value: "):
            renderer.render_type(obj)


class TestDispatch:
    @pytest.mark.parametrize("kind", ["LIST", "NON_NULL", "DIRECTIVE"])
    def test_unknown_kind(self, renderer: TypeScriptRenderer, kind: str) -> None:
        with pytest.raises(UnknownKindError) as excinfo:
            renderer.render_type(make_type(kind=kind, name="Strange"))
        assert excinfo.value.kind == kind
        assert "Strange" in str(excinfo.value)

    def test_every_sdl_type_renders(self, renderer: TypeScriptRenderer, sdl_schema: Schema) -> None:
        for type_def in sdl_schema.types:
            assert type_def.name in renderer.render_type(type_def)
