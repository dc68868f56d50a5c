"""The `get` command: print persisted resources as a table, JSON or YAML."""

import sys
from pathlib import Path
from typing import Optional

import click
from rich.console import Console
from rich.markup import escape

from ..config import DEFAULT_DB_PATH, load_settings
from ..errors import EdgeDebugError
from ..logging_config import configure_cli_logging
from ..repositories.database import Database
from ..repositories.meta_repository import MetaRepository
from ..services.get_service import build_get_request, run_get

console = Console(stderr=True)


def open_meta_repository(db_path: Path) -> MetaRepository:
    return MetaRepository(Database(db_path))


@click.command()
@click.argument("resource_type", nargs=-1)
@click.option(
    "-i",
    "--input",
    "input_path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help=f"Edge node database path. Defaults to $EDGECORE_DB_PATH or {DEFAULT_DB_PATH}.",
)
@click.option(
    "-o",
    "--output",
    "output_format",
    default="",
    help="Output format: json or yaml. A pod table is printed when omitted.",
)
@click.option(
    "-n",
    "--namespace",
    default="default",
    show_default=True,
    help="List the requested resources in this namespace.",
)
@click.option(
    "-A",
    "--all-namespaces",
    is_flag=True,
    default=False,
    help="List the requested resources across all namespaces.",
)
@click.pass_context
def get(
    ctx: click.Context,
    resource_type: tuple[str, ...],
    input_path: Optional[Path],
    output_format: str,
    namespace: str,
    all_namespaces: bool,
):
    """Get resources of RESOURCE_TYPE from the local database.

    RESOURCE_TYPE is one of all, pod, node, service, secret, configmap, endpoint.
    """
    try:
        settings = load_settings()
        configure_cli_logging(settings)
        request = build_get_request(
            resource_type,
            namespace=namespace,
            all_namespaces=all_namespaces,
            output_format=output_format,
            db_path=input_path if input_path is not None else settings.db_path,
        )
        run_get(open_meta_repository(request.db_path), request, sys.stdout)
    except EdgeDebugError as exc:
        console.print(f"[red]error:[/red] {escape(str(exc))}", soft_wrap=True)
        ctx.exit(exc.exit_code)
