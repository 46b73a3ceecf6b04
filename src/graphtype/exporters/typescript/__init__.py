"""TypeScript exporter module for graphtype."""

from .emitter import ChunkSink, TextStreamSink, iter_chunks, order_types, translate, write_chunks
from .scalars import build_scalar_aliases
from .typescript import translate_to_typescript

__all__ = [
    "ChunkSink",
    "TextStreamSink",
    "build_scalar_aliases",
    "iter_chunks",
    "order_types",
    "translate",
    "translate_to_typescript",
    "write_chunks",
]
