"""Ordering and emission of the TypeScript translation, eagerly or chunk by chunk."""

from collections.abc import Callable, Iterable, Iterator, Mapping
from functools import partial
from typing import Protocol, TextIO

from jinja2 import Environment, PackageLoader, select_autoescape

from graphtype.errors import UnknownKindError
from graphtype.exporters.utils.graphql_type import is_introspection_type
from graphtype.introspection.models import Schema, SchemaType, TypeKind

from .renderers import TypeScriptRenderer
from .scalars import build_scalar_aliases

KIND_ORDER = (
    TypeKind.SCALAR,
    TypeKind.ENUM,
    TypeKind.UNION,
    TypeKind.INTERFACE,
    TypeKind.OBJECT,
    TypeKind.INPUT_OBJECT,
)
KIND_PRECEDENCE = {kind.value: rank for rank, kind in enumerate(KIND_ORDER)}

CHUNK_SEPARATOR = "\n\n"

env = Environment(
    loader=PackageLoader("graphtype.exporters.typescript", "templates"),
    autoescape=select_autoescape(),
    trim_blocks=True,
    lstrip_blocks=True,
)


class ChunkSink(Protocol):
    """Consumer of pushed chunks.

    ``write`` returns False when the sink is not ready for more; no further chunk
    is produced until ``wait_ready`` returns.
    """

    def write(self, chunk: str) -> bool: ...

    def wait_ready(self) -> None: ...


class TextStreamSink:
    """ChunkSink over a text stream such as stdout or an open file."""

    def __init__(self, stream: TextIO):
        self.stream = stream

    def write(self, chunk: str) -> bool:
        self.stream.write(chunk)
        return True

    def wait_ready(self) -> None:
        self.stream.flush()


def render_utility_types() -> str:
    return env.get_template("utility_types.ts.j2").render()


def render_response_types(root_type_names: list[str]) -> str:
    return env.get_template("response_types.ts.j2").render(data_types=[*root_type_names, "null"])


def _ordering_key(type_def: SchemaType) -> tuple[int, str, str, str]:
    rank = KIND_PRECEDENCE.get(type_def.kind)
    if rank is None:
        raise UnknownKindError(type_def.kind, type_def.name)
    name = type_def.name
    return rank, name.casefold(), name.swapcase(), name


def order_types(types: Iterable[SchemaType]) -> list[SchemaType]:
    """
    Sort schema types by kind precedence, then by name.

    Kinds go SCALAR, ENUM, UNION, INTERFACE, OBJECT, INPUT_OBJECT. Names are collated
    alphabetically ignoring case, lowercase first on ties, without consulting the
    process locale.

    Raises:
        UnknownKindError: If any type has a kind outside that list
    """
    return sorted(types, key=_ordering_key)


def build_work_list(
    schema: Schema,
    scalar_aliases: Mapping[str, str] | None = None,
    skip_introspection_types: bool = False,
) -> list[Callable[[], str]]:
    """Return one deferred render call per output unit: the two preamble units, then each type in order."""
    renderer = TypeScriptRenderer(build_scalar_aliases() if scalar_aliases is None else scalar_aliases)

    types = [
        type_def
        for type_def in schema.types
        if not (skip_introspection_types and is_introspection_type(type_def.name))
    ]

    work: list[Callable[[], str]] = [render_utility_types, partial(render_response_types, schema.root_type_names())]
    work.extend(partial(renderer.render_type, type_def) for type_def in order_types(types))
    return work


def iter_chunks(
    schema: Schema,
    scalar_aliases: Mapping[str, str] | None = None,
    skip_introspection_types: bool = False,
) -> Iterator[str]:
    """
    Lazily produce the translation, one unit per chunk, each ending with a blank line.

    Nothing is rendered before the first chunk is requested, and a failure in
    any unit is raised from the ``next()`` call that reaches it.
    """
    for unit in build_work_list(schema, scalar_aliases, skip_introspection_types):
        yield unit() + CHUNK_SEPARATOR


def translate(
    schema: Schema,
    scalar_aliases: Mapping[str, str] | None = None,
    skip_introspection_types: bool = False,
) -> str:
    """Produce the whole translation as a single string."""
    return "".join(iter_chunks(schema, scalar_aliases, skip_introspection_types))


def write_chunks(
    schema: Schema,
    sink: ChunkSink,
    scalar_aliases: Mapping[str, str] | None = None,
    skip_introspection_types: bool = False,
) -> int:
    """
    Push the translation into ``sink`` chunk by chunk, honouring its backpressure.

    Returns:
        int: Number of chunks written
    """
    written = 0
    for chunk in iter_chunks(schema, scalar_aliases, skip_introspection_types):
        ready = sink.write(chunk)
        written += 1
        if not ready:
            sink.wait_ready()
    return written
