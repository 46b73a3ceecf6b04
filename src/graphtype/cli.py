import logging
import sys
from pathlib import Path

import rich_click as click
import yaml
from rich.traceback import install

from graphtype import __version__, log
from graphtype.exporters.typescript import TextStreamSink, build_scalar_aliases, write_chunks
from graphtype.exporters.utils.alias_config import load_alias_config
from graphtype.introspection import fetch_introspection, load_schema_source
from graphtype.introspection.models import Schema

schema_option = click.option(
    "--schema",
    "-s",
    "schemas",
    type=click.Path(exists=True, path_type=Path),
    multiple=True,
    help="JSON introspection file, or GraphQL SDL file or directory. Can be specified multiple times for SDL.",
)


endpoint_option = click.option(
    "--endpoint",
    "-e",
    type=str,
    help='GraphQL HTTP endpoint, e.g. "https://domain.com/graphql".',
)


header_option = click.option(
    "--header",
    "-x",
    "headers",
    type=str,
    multiple=True,
    help='HTTP header for the introspection request (use with --endpoint), e.g. "Authorization: Token cb8795e7".',
)


query_option = click.option(
    "--query",
    "-q",
    "queries",
    type=str,
    multiple=True,
    help='Query-string pair for the introspection request (use with --endpoint), e.g. "token=cb8795e7".',
)


optional_output_option = click.option(
    "--output",
    "-o",
    type=click.Path(dir_okay=False, writable=True, path_type=Path),
    required=False,
    help="Output file, stdout when omitted",
)


number_alias_option = click.option(
    "--number-alias",
    "-n",
    "number_aliases",
    type=str,
    multiple=True,
    help='Scalar that must be represented as number, e.g. "UnsignedInt".',
)


alias_option = click.option(
    "--alias",
    "-a",
    "aliases",
    type=str,
    multiple=True,
    help='Scalar represented as an alias of another type, e.g. "UnsignedInt=number". Wins over --number-alias.',
)


alias_config_option = click.option(
    "--alias-config",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="YAML file with 'numbers' and 'aliases' scalar overrides",
)


def get_schema(schemas: tuple[Path, ...], endpoint: str | None, headers: list[str], queries: list[str]) -> Schema:
    if endpoint:
        return fetch_introspection(endpoint, headers, queries)
    return load_schema_source(list(schemas))


@click.group(context_settings={"auto_envvar_prefix": "graphtype"})
@click.option(
    "-l",
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"], case_sensitive=False),
    default="INFO",
    help="Log level",
    show_default=True,
)
@click.option(
    "--log-file",
    type=click.Path(dir_okay=False, writable=True, path_type=Path),
    help="Log file",
)
@click.version_option(__version__)
def cli(log_level: str, log_file: Path | None) -> None:
    if log_file:
        file_handler = logging.FileHandler(log_file, mode="w")
        file_handler.setFormatter(logging.Formatter("%(asctime)s:%(levelname)s:%(message)s"))
        log.addHandler(file_handler)

    log.setLevel(log_level.upper())
    if log_level.upper() == "DEBUG":
        _ = install(show_locals=True)


@click.group()
def export() -> None:
    """Export commands."""
    pass


# Export -> typescript
# ----------
@export.command
@schema_option
@endpoint_option
@header_option
@query_option
@optional_output_option
@number_alias_option
@alias_option
@alias_config_option
@click.option(
    "--skip-introspection-types",
    is_flag=True,
    default=False,
    help="Leave out the __-prefixed introspection types",
)
def typescript(
    schemas: tuple[Path, ...],
    endpoint: str | None,
    headers: tuple[str, ...],
    queries: tuple[str, ...],
    output: Path | None,
    number_aliases: tuple[str, ...],
    aliases: tuple[str, ...],
    alias_config: Path | None,
    skip_introspection_types: bool,
) -> None:
    """Generate TypeScript declarations from a GraphQL introspection schema."""
    if bool(schemas) == bool(endpoint):
        log.error("Exactly one of endpoint (--endpoint, -e) or schema file (--schema, -s) is required.")
        sys.exit(1)

    try:
        config = load_alias_config(alias_config)
        scalar_aliases = build_scalar_aliases(
            number_aliases, aliases, config.as_overrides() if config is not None else None
        )
        schema = get_schema(schemas, endpoint, list(headers), list(queries))

        if output:
            with output.open("w", encoding="utf-8") as f:
                chunks = write_chunks(schema, TextStreamSink(f), scalar_aliases, skip_introspection_types)
            log.success(f"Wrote {chunks} declaration blocks to {output}")
        else:
            write_chunks(schema, TextStreamSink(sys.stdout), scalar_aliases, skip_introspection_types)

    except OSError as e:
        log.error(f"File I/O error: {e}")
        sys.exit(1)
    except yaml.YAMLError as e:
        log.error(f"Invalid alias config: {e}")
        sys.exit(1)
    except (TypeError, ValueError) as e:
        log.error(f"Translation failed: {e}")
        sys.exit(1)


cli.add_command(export)

if __name__ == "__main__":
    cli()
