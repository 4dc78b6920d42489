"""Azure CDN tools."""
from __future__ import annotations

from typing import Annotated, Any, Callable, ParamSpec, TypeVar

import rich
import typer
from typer import Option

from azure_cdn_tools.delivery import AzureDeliveryService
from azure_cdn_tools.models.settings import AzureSettings, load_settings
from azure_cdn_tools.utils import uris
from azure_cdn_tools.utils.log import setup_logging
from azure_cdn_tools.utils.path_service import UrlPathService
from azure_cdn_tools.utils.spinners import spinner

T = TypeVar("T")
P = ParamSpec("P")

VerboseType = Annotated[bool, Option("--verbose", "-v", help="Show debug logs and tracebacks")]

app = typer.Typer(no_args_is_help=True)
cp = rich.print


def attempt(func: Callable[P, T], *args: Any, verbose: bool = False) -> T:
    try:
        return func(*args)
    except Exception as e:
        if verbose:
            raise
        else:
            cp(f"❌  [red]Error:[/red] {e}")
            raise SystemExit(1)


def make_service(settings: AzureSettings) -> AzureDeliveryService:
    return AzureDeliveryService(UrlPathService(), settings)


def display_url(settings: AzureSettings, path: str) -> str:
    if settings.public_root:
        return uris.join(settings.public_root, path)
    return path


@app.command()
def purge(
    urls: Annotated[list[str], typer.Argument(help="Urls or paths to purge")],
    dry_run: Annotated[bool, Option("--dry-run", help="Only show the paths")] = False,
    verbose: VerboseType = False,
):
    """Purge urls from the Azure CDN endpoint."""
    settings = attempt(load_settings, verbose=verbose)
    verbose = verbose or settings.verbose
    setup_logging(verbose)

    service = make_service(settings)
    paths = service.collect_urls(urls)

    for path in paths:
        cp(f"  {display_url(settings, path)}")

    if dry_run:
        cp(f"Dry run, {len(paths)} path(s) not purged.")
        return

    with spinner(f"Purging {len(paths)} path(s) from {settings.endpoint_name!r}..."):
        attempt(service.purge_urls, paths, verbose=verbose)

    typer.echo(f"✅  Purged {len(paths)} path(s)")


@app.command(name="settings")
def show_settings(verbose: VerboseType = False):
    """Show the effective settings, secrets masked."""
    settings = attempt(load_settings, verbose=verbose)
    setup_logging(verbose or settings.verbose)
    rich.print_json(data=settings.masked())
