"""confchain CLI entrypoint.

Command-line interface for resolving configuration keys through a chain
of providers.
"""

from __future__ import annotations

import functools
import logging
import sys
from pathlib import Path

import click

from confchain.adapters.factory import ProviderFactory
from confchain.adapters.file.file_config_provider import (
    load_store,
    resolve_config_path,
)
from confchain.core.errors import ConfchainCliError
from confchain.domain.exceptions import ConfigError, ConfigUnresolvableError
from confchain.version import __version__

VALUE_TYPES = ("string", "float", "bool")


def handle_cli_errors(command_name: str):
    """Decorator to handle common CLI errors.

    Converts configuration errors into ConfchainCliError so click prints
    them with their hint and exits with status 1. Unexpected exceptions
    are reported generically, with a traceback in verbose mode.

    Args:
        command_name: Name of the command for error messages.
    """

    def decorator(func):
        @functools.wraps(func)
        def wrapper(*args, **kwargs):
            try:
                return func(*args, **kwargs)
            except ConfchainCliError:
                raise
            except ConfigUnresolvableError as e:
                # Full diagnostic: every chain position and its cause
                raise ConfchainCliError(e.describe(), hint=e.hint) from e
            except ConfigError as e:
                raise ConfchainCliError(e.message, hint=e.hint) from e
            except Exception as e:
                ctx = click.get_current_context()
                if ctx.obj.get("verbose", False):
                    import traceback

                    traceback.print_exc()
                raise ConfchainCliError(
                    f"Unexpected error in {command_name}: {e}",
                    hint="Run with --verbose for more details",
                ) from e

        return wrapper

    return decorator


def _format_value(value: str | float | bool) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


@click.group()
@click.version_option(version=__version__, prog_name="confchain")
@click.option(
    "--verbose",
    "-v",
    is_flag=True,
    help="Enable verbose output.",
)
@click.option(
    "--quiet",
    "-q",
    is_flag=True,
    help="Suppress non-essential output.",
)
@click.pass_context
def cli(ctx: click.Context, verbose: bool, quiet: bool) -> None:
    """confchain - Layered typed configuration lookups.

    Resolves keys through secrets, environment and KEY=VALUE files in
    precedence order.
    """
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose
    ctx.obj["quiet"] = quiet
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        )


@cli.command()
@click.argument("key", type=str)
@click.option(
    "--type",
    "-t",
    "value_type",
    type=click.Choice(VALUE_TYPES),
    default="string",
    show_default=True,
    help="Type to resolve the value as.",
)
@click.option(
    "--file",
    "-f",
    "files",
    multiple=True,
    help="KEY=VALUE file; repeat for more layers, highest precedence first.",
)
@click.option(
    "--base-dir",
    type=click.Path(file_okay=False, path_type=Path),
    default=None,
    help="Directory relative paths resolve against (default: cwd).",
)
@click.option(
    "--env-prefix",
    envvar="CONFCHAIN_ENV_PREFIX",
    default="",
    help="Prefix for environment variable lookups.",
)
@click.option(
    "--no-env",
    is_flag=True,
    help="Do not consult environment variables.",
)
@click.option(
    "--secrets-dir",
    type=click.Path(file_okay=False, path_type=Path),
    default=None,
    help="Directory with one file per secret key (highest precedence).",
)
@click.pass_context
@handle_cli_errors("get")
def get(
    ctx: click.Context,
    key: str,
    value_type: str,
    files: tuple[str, ...],
    base_dir: Path | None,
    env_prefix: str,
    no_env: bool,
    secrets_dir: Path | None,
) -> None:
    """Resolve KEY through the configured provider chain.

    Precedence: --secrets-dir, then environment, then each --file in order.
    Exits with status 1 if no provider can resolve the key.
    """
    factory = ProviderFactory(base_dir=base_dir)
    chain = factory.create_chain(
        files,
        env_prefix=None if no_env else env_prefix,
        secrets_dir=secrets_dir,
    )

    if value_type == "float":
        value = chain.get_float(key)
    elif value_type == "bool":
        value = chain.get_bool(key)
    else:
        value = chain.get_string(key)

    click.echo(_format_value(value))


@cli.command()
@click.argument("path", type=str)
@click.option(
    "--base-dir",
    type=click.Path(file_okay=False, path_type=Path),
    default=None,
    help="Directory a relative PATH resolves against (default: cwd).",
)
@click.pass_context
@handle_cli_errors("check")
def check(ctx: click.Context, path: str, base_dir: Path | None) -> None:
    """Check that a KEY=VALUE file parses.

    A missing file is reported but is not an error, since it loads as an
    empty store.
    """
    resolved = resolve_config_path(path, base_dir)
    quiet = ctx.obj.get("quiet", False)

    if not resolved.exists():
        if not quiet:
            click.echo(f"{resolved}: not found (loads as empty store)")
        return

    store = load_store(resolved)
    if not quiet:
        click.echo(f"{resolved}: OK ({len(store)} keys)")


def main() -> int:
    """Main entrypoint for the CLI."""
    try:
        cli(obj={})
        return 0
    except Exception as e:
        click.echo(f"Error: {e}", err=True)
        return 1


if __name__ == "__main__":
    sys.exit(main())
