import json
from collections.abc import Callable
from pathlib import Path
from typing import Any

import pytest
from graphql import build_schema, introspection_from_schema
from hypothesis import strategies as st
from hypothesis.strategies import composite

from graphtype.introspection import Schema, TypeRef, parse_introspection

KIND_NAMES = ["SCALAR", "ENUM", "UNION", "INTERFACE", "OBJECT", "INPUT_OBJECT"]


class TestSchemaData:
    TESTS_DATA_DIR: Path = Path(__file__).parent / "data"
    SCHEMA1: Path = TESTS_DATA_DIR / "schema1.graphql"


def named(name: str, kind: str = "SCALAR") -> dict[str, Any]:
    return {"kind": kind, "name": name, "ofType": None}


def non_null(of_type: dict[str, Any]) -> dict[str, Any]:
    return {"kind": "NON_NULL", "name": None, "ofType": of_type}


def list_of(of_type: dict[str, Any]) -> dict[str, Any]:
    return {"kind": "LIST", "name": None, "ofType": of_type}


def field(name: str, type_ref: dict[str, Any], **extra: Any) -> dict[str, Any]:
    return {"name": name, "args": [], "type": type_ref, "isDeprecated": False, "deprecationReason": None, **extra}


def input_value(name: str, type_ref: dict[str, Any], **extra: Any) -> dict[str, Any]:
    return {"name": name, "type": type_ref, "defaultValue": None, **extra}


def schema_type(kind: str, name: str, **extra: Any) -> dict[str, Any]:
    return {
        "kind": kind,
        "name": name,
        "description": None,
        "fields": None,
        "inputFields": None,
        "interfaces": None,
        "enumValues": None,
        "possibleTypes": None,
        **extra,
    }


def introspection_document(
    types: list[dict[str, Any]],
    query_type: str | None = None,
    mutation_type: str | None = None,
) -> dict[str, Any]:
    return {
        "data": {
            "__schema": {
                "queryType": {"name": query_type} if query_type else None,
                "mutationType": {"name": mutation_type} if mutation_type else None,
                "subscriptionType": None,
                "types": types,
                "directives": [],
            }
        }
    }


def make_schema(types: list[dict[str, Any]], query_type: str | None = None) -> Schema:
    return parse_introspection(introspection_document(types, query_type))


def make_type_ref(type_ref: dict[str, Any]) -> TypeRef:
    return TypeRef.model_validate(type_ref)


@pytest.fixture
def box_schema() -> Schema:
    """scalar Token; type Box { value: Token! }; schema { query: Box }"""
    return make_schema(
        [
            schema_type("OBJECT", "Box", fields=[field("value", non_null(named("Token")))], interfaces=[]),
            schema_type("SCALAR", "Token"),
        ],
        query_type="Box",
    )


@pytest.fixture(scope="module")
def sdl_schema() -> Schema:
    assert TestSchemaData.SCHEMA1.exists(), f"Missing test file: {TestSchemaData.SCHEMA1}"
    graphql_schema = build_schema(TestSchemaData.SCHEMA1.read_text())
    return parse_introspection(introspection_from_schema(graphql_schema))


@pytest.fixture
def introspection_file(tmp_path: Path) -> Path:
    graphql_schema = build_schema(TestSchemaData.SCHEMA1.read_text())
    path = tmp_path / "schema.json"
    path.write_text(json.dumps({"data": introspection_from_schema(graphql_schema)}))
    return path


@pytest.fixture
def write_document(tmp_path: Path) -> Callable[[Any], Path]:
    def _write(document: Any) -> Path:
        path = tmp_path / "document.json"
        path.write_text(json.dumps(document))
        return path

    return _write


@composite
def type_ref_strategy(draw: st.DrawFn, max_depth: int = 4) -> tuple[dict[str, Any], str]:
    """Draw a well-formed type reference together with its expected TypeScript expression."""
    leaf_name = draw(st.from_regex(r"[A-Z][A-Za-z0-9]{0,8}", fullmatch=True))
    wrappers = draw(st.lists(st.booleans(), max_size=max_depth))

    type_ref = named(leaf_name)
    non_null_leaf = draw(st.booleans())
    expected = leaf_name if non_null_leaf else f"Optional<{leaf_name}>"
    if non_null_leaf:
        type_ref = non_null(type_ref)
        expected = f"NonNull<{expected}>"

    for wrap_non_null in wrappers:
        type_ref = list_of(type_ref)
        expected = f"List<{expected}>"
        if wrap_non_null:
            type_ref = non_null(type_ref)
            expected = f"NonNull<{expected}>"

    return type_ref, expected


@composite
def schema_types_strategy(draw: st.DrawFn) -> list[dict[str, Any]]:
    names = draw(
        st.lists(st.from_regex(r"[A-Za-z][A-Za-z0-9_]{0,10}", fullmatch=True), min_size=1, max_size=12, unique=True)
    )
    types = []
    for name in names:
        kind = draw(st.sampled_from(KIND_NAMES))
        if kind == "ENUM":
            types.append(schema_type(kind, name, enumValues=[{"name": "VALUE", "isDeprecated": False}]))
        elif kind == "UNION":
            types.append(schema_type(kind, name, possibleTypes=[{"kind": "OBJECT", "name": "Member"}]))
        elif kind in ("OBJECT", "INTERFACE"):
            types.append(schema_type(kind, name, fields=[field("id", non_null(named("ID")))], interfaces=[]))
        elif kind == "INPUT_OBJECT":
            types.append(schema_type(kind, name, inputFields=[input_value("id", named("ID"))]))
        else:
            types.append(schema_type(kind, name))
    return types
