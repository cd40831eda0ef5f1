"""
Command-line interface for managing Artifactory repositories.
"""

import logging
import sys
from pathlib import Path
from typing import Dict, NoReturn, Optional, Tuple

import click
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.table import Table

from . import __version__
from .api import ArtifactoryClient
from .config import Settings
from .errors import ArtifactoryError
from .models import RepoConfig, decode_repo_config

# Create console for output
console = Console()

logging.basicConfig(
    level=logging.INFO,
    format="%(message)s",
    datefmt="[%X]",
    handlers=[RichHandler(console=console, show_path=False)]
)

logger = logging.getLogger("artifactory_client")


@click.group()
@click.version_option(version=__version__)
def cli():
    """Artifactory repository management - list, inspect, create and update repositories."""
    pass


def common_options(function):
    """Connection options shared by every command."""
    function = click.option(
        "--url",
        help="Artifactory base URL (defaults to ARTIFACTORY_URL)",
    )(function)
    function = click.option(
        "--token",
        help="Artifactory API key (defaults to ARTIFACTORY_TOKEN)",
    )(function)
    function = click.option(
        "--username",
        help="Username for basic auth (defaults to ARTIFACTORY_USERNAME)",
    )(function)
    function = click.option(
        "--password",
        help="Password for basic auth (defaults to ARTIFACTORY_PASSWORD)",
    )(function)
    function = click.option(
        "--verify-ssl/--no-verify-ssl",
        default=None,
        help="Verify TLS certificates (defaults to ARTIFACTORY_VERIFY_SSL)",
    )(function)
    function = click.option(
        "--debug/--no-debug",
        default=False,
        help="Enable debug mode for more verbose output",
    )(function)
    return function


def write_options(function):
    """Options for commands sending a repository configuration."""
    function = click.option(
        "--file",
        "config_file",
        type=click.Path(exists=True, dir_okay=False, path_type=Path),
        required=True,
        help="JSON file holding the repository configuration",
    )(function)
    function = click.option(
        "--param",
        "params",
        multiple=True,
        help="Extra query parameter as key=value (can be specified multiple times)",
    )(function)
    return function


def build_client(
    url: Optional[str] = None,
    token: Optional[str] = None,
    username: Optional[str] = None,
    password: Optional[str] = None,
    verify_ssl: Optional[bool] = None,
    debug: bool = False,
) -> ArtifactoryClient:
    """Create a client from the environment, overridden by command-line values."""
    logger.setLevel(logging.DEBUG if debug else logging.INFO)

    api_config = Settings().to_api_config(
        url=url,
        token=token,
        username=username,
        password=password,
        verify_ssl=verify_ssl,
    )
    logger.debug(f"Using Artifactory at {api_config.url} ({api_config.auth_method} auth)")
    return ArtifactoryClient(api_config)


def parse_params(params: Tuple[str, ...]) -> Dict[str, str]:
    """Turn key=value pairs into a query parameter mapping."""
    parsed = {}
    for param in params:
        key, sep, value = param.partition("=")
        if not sep or not key:
            raise click.BadParameter(f"expected key=value, got {param!r}", param_hint="--param")
        parsed[key] = value
    return parsed


def load_config_file(config_file: Path) -> RepoConfig:
    """Read a repository configuration from a JSON file."""
    return decode_repo_config(config_file.read_bytes())


def fail(message: str) -> NoReturn:
    console.print(f"[red]Error: {escape(message)}[/red]")
    sys.exit(1)


@cli.command("list")
@common_options
@click.option(
    "--type",
    "rtype",
    type=click.Choice(["all", "local", "remote", "virtual"]),
    default="all",
    help="Only list repositories of this kind",
)
def list_repos(rtype, **kwargs):
    """List repositories."""
    client = build_client(**kwargs)
    try:
        repos = client.get_repos(rtype)
    except ArtifactoryError as e:
        fail(str(e))

    table = Table(title=f"Repositories ({rtype})")
    table.add_column("Key", style="cyan", no_wrap=True)
    table.add_column("Type")
    table.add_column("URL")
    table.add_column("Description")
    for repo in repos:
        table.add_row(repo.key, repo.rtype, repo.url or "", repo.description or "")
    console.print(table)


@cli.command("get")
@common_options
@click.argument("key")
def get_repo(key, **kwargs):
    """Show the configuration of repository KEY as JSON."""
    client = build_client(**kwargs)
    try:
        config = client.get_repo(key)
        console.print_json(config.to_json().decode("utf-8"))
    except ArtifactoryError as e:
        fail(str(e))


@cli.command("create")
@common_options
@write_options
@click.argument("key")
def create_repo(key, config_file, params, **kwargs):
    """Create repository KEY from a JSON configuration file."""
    query = parse_params(params)
    client = build_client(**kwargs)
    try:
        client.create_repo(key, load_config_file(config_file), query)
    except ArtifactoryError as e:
        fail(str(e))
    console.print(f"[bold green]Created repository {key}[/bold green]")


@cli.command("update")
@common_options
@write_options
@click.argument("key")
def update_repo(key, config_file, params, **kwargs):
    """Update repository KEY from a JSON configuration file."""
    query = parse_params(params)
    client = build_client(**kwargs)
    try:
        client.update_repo(key, load_config_file(config_file), query)
    except ArtifactoryError as e:
        fail(str(e))
    console.print(f"[bold green]Updated repository {key}[/bold green]")


def main():
    """Entry point for the CLI."""
    try:
        cli()
    except Exception as e:
        logger.exception("Unhandled exception")
        console.print(f"[red]Unhandled error: {escape(str(e))}[/red]")
        sys.exit(1)
