import json
import urllib.error
import urllib.parse
import urllib.request
from pathlib import Path
from typing import Any

from ariadne import load_schema_from_path
from ariadne.exceptions import GraphQLFileSyntaxError
from graphql import GraphQLError, build_schema, get_introspection_query, introspection_from_schema
from pydantic import ValidationError

from graphtype import log
from graphtype.errors import IntrospectionError

from .models import Schema

DEFAULT_TIMEOUT = 30.0


def parse_introspection(document: Any) -> Schema:
    """
    Build a Schema from a parsed introspection document.

    The payload may be wrapped in a response envelope (``data.__schema``), in a
    bare ``__schema`` object, or be the schema mapping itself.

    Args:
        document: Parsed JSON document

    Returns:
        Schema: The validated introspection schema

    Raises:
        IntrospectionError: If the payload is absent or structurally invalid
    """
    if not isinstance(document, dict):
        raise IntrospectionError(f"Introspection document must be an object, got {type(document).__name__}")

    payload: Any = document
    if "data" in payload or "errors" in payload:
        data = payload.get("data")
        if not data:
            errors = payload.get("errors") or []
            if not isinstance(errors, list):
                errors = [errors]
            messages = [
                str(error.get("message", error)) if isinstance(error, dict) else str(error) for error in errors
            ]
            detail = f": {'; '.join(messages)}" if messages else ""
            raise IntrospectionError(f"Introspection response carries no data{detail}")
        payload = data

    if "__schema" in payload:
        payload = payload["__schema"]

    if not isinstance(payload, dict) or "types" not in payload:
        raise IntrospectionError("Introspection payload has no '__schema.types' list")

    try:
        schema = Schema.model_validate(payload)
    except ValidationError as e:
        raise IntrospectionError(f"Invalid introspection schema: {e}") from e

    log.debug(f"Parsed introspection schema with {len(schema.types)} types")
    return schema


def load_introspection_file(path: Path) -> Schema:
    """Load a JSON introspection document from disk."""
    try:
        document = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        raise IntrospectionError(f"{path} is not valid JSON: {e}") from e

    log.info(f"Loaded introspection document from {path}")
    return parse_introspection(document)


def resolve_graphql_files(paths: list[Path]) -> list[Path]:
    """Resolve files and directories into a sorted list of unique GraphQL files."""
    resolved_files: set[Path] = set()

    for path in paths:
        if path.is_file():
            resolved_files.add(path)
        elif path.is_dir():
            resolved_files.update(path.rglob("*.graphql"))

    return sorted(resolved_files)


def load_sdl_files(paths: list[Path]) -> Schema:
    """
    Build an introspection Schema from GraphQL SDL files or directories.

    Args:
        paths: GraphQL files or directories containing ``*.graphql`` files

    Returns:
        Schema: Introspection schema derived from the SDL
    """
    graphql_files = resolve_graphql_files(paths)
    if not graphql_files:
        raise IntrospectionError("No GraphQL schema files found")

    try:
        schema_str = "\n".join(load_schema_from_path(graphql_file) for graphql_file in graphql_files)
        graphql_schema = build_schema(schema_str)
    except (GraphQLFileSyntaxError, GraphQLError, TypeError) as e:
        raise IntrospectionError(f"Invalid GraphQL schema: {e}") from e

    log.info(f"Built GraphQL schema from {len(graphql_files)} file(s)")
    return parse_introspection(introspection_from_schema(graphql_schema))


def load_schema_source(paths: list[Path]) -> Schema:
    """Load a schema from a single JSON introspection file, or from SDL files otherwise."""
    if len(paths) == 1 and paths[0].is_file() and paths[0].suffix.lower() == ".json":
        return load_introspection_file(paths[0])

    return load_sdl_files(paths)


def _parse_pairs(items: list[str], separator: str, what: str) -> dict[str, str]:
    pairs: dict[str, str] = {}
    for item in items:
        name, found, value = item.partition(separator)
        if not found or not name.strip():
            raise ValueError(f"Invalid {what} '{item}', expected 'name{separator}value'")
        pairs[name.strip()] = value.strip()
    return pairs


def fetch_introspection(
    endpoint: str,
    headers: list[str] | None = None,
    query_params: list[str] | None = None,
    timeout: float = DEFAULT_TIMEOUT,
) -> Schema:
    """
    Run the introspection query against a live GraphQL endpoint.

    Args:
        endpoint: GraphQL HTTP endpoint
        headers: Request headers formatted as ``"Name: value"``
        query_params: Query-string pairs formatted as ``"name=value"``
        timeout: Socket timeout in seconds

    Returns:
        Schema: The introspection schema returned by the server

    Raises:
        IntrospectionError: On network, HTTP or decoding failures
        ValueError: If a header or query-string pair is malformed
    """
    request_headers = {"Content-Type": "application/json", "Accept": "application/json"}
    request_headers.update(_parse_pairs(headers or [], ":", "header"))

    url = endpoint
    params = _parse_pairs(query_params or [], "=", "query parameter")
    if params:
        url += ("&" if urllib.parse.urlsplit(endpoint).query else "?") + urllib.parse.urlencode(params)

    body = json.dumps({"query": get_introspection_query(descriptions=True)}).encode("utf-8")
    request = urllib.request.Request(url, data=body, headers=request_headers, method="POST")

    log.info(f"Fetching introspection schema from {endpoint}")
    try:
        with urllib.request.urlopen(request, timeout=timeout) as response:
            document = json.load(response)
    except urllib.error.HTTPError as e:
        raise IntrospectionError(f"Endpoint {endpoint} answered with HTTP {e.code}: {e.reason}") from e
    except urllib.error.URLError as e:
        raise IntrospectionError(f"Could not reach {endpoint}: {e.reason}") from e
    except TimeoutError as e:
        raise IntrospectionError(f"Timed out after {timeout}s waiting for {endpoint}") from e
    except json.JSONDecodeError as e:
        raise IntrospectionError(f"Endpoint {endpoint} did not return JSON: {e}") from e

    return parse_introspection(document)
