"""CLI entry point for alembiqa."""

from __future__ import annotations

import asyncio
import sys
from pathlib import Path

import click

from alembiqa import __version__
from alembiqa.l1_entities.config import AlembiqaConfig
from alembiqa.l1_entities.errors import AlembiqaConfigError, ConfigExistsError, ConfigNotFoundError
from alembiqa.l2_use_cases.ports.config_loader import ConfigLoader

_CONTEXT_SETTINGS = {'help_option_names': ['-h', '--help']}


@click.group(invoke_without_command=True, context_settings=_CONTEXT_SETTINGS)
@click.option(
    '--log-file',
    default=None,
    type=click.Path(dir_okay=False, path_type=Path),
    help='Write debug logs to this file.',
)
@click.version_option(version=__version__)
@click.pass_context
def cli(ctx: click.Context, log_file: Path | None):
    """Alembiqa CLI - code quality and test generation tool."""
    if log_file is not None:
        from alembiqa.l4_frameworks_and_drivers.logging_setup import (  # noqa: PLC0415 -- deferred: only when logging is requested
            setup_file_logging,
        )

        setup_file_logging(log_file)
    if ctx.invoked_subcommand is None:
        click.echo('Alembiqa CLI running')


@cli.command()
@click.option('--force', is_flag=True, help='Overwrite an existing .alembiqa.yml.')
def init(force):
    """Create a default .alembiqa.yml config file."""
    from alembiqa.l3_interface_adapters.gateways.default_config import (  # noqa: PLC0415 -- deferred: not needed for --help
        write_default_config,
    )

    try:
        path = write_default_config(Path.cwd(), force=force)
    except ConfigExistsError as e:
        click.echo(f'Error: {e}', err=True)
        sys.exit(1)
    except OSError as e:
        click.echo(f'Failed to create config file: {e}', err=True)
        sys.exit(1)
    click.echo(f'Created {path.name} with default rules.')


@cli.command()
def check():
    """Validate the .alembiqa.yml / .alembiqa.json config in the current directory."""
    from alembiqa.l3_interface_adapters.gateways.config_file_loader import (  # noqa: PLC0415 -- deferred: yaml stack not loaded on --help
        ConfigFileLoader,
    )

    try:
        config = _load_project_config(ConfigFileLoader(), Path.cwd())
    except ConfigNotFoundError as e:
        click.echo(f'Error: {e}', err=True)
        click.echo("Run 'alembiqa init' to create one.", err=True)
        sys.exit(1)
    except (AlembiqaConfigError, OSError) as e:
        click.echo(f'Error: {e}', err=True)
        sys.exit(1)

    for line in _summary_lines(config):
        click.echo(line)


def _load_project_config(loader: ConfigLoader, root_dir: Path) -> AlembiqaConfig:
    return asyncio.run(loader.load(root_dir))


def _summary_lines(config: AlembiqaConfig) -> list[str]:
    enabled = config.enabled_checks()
    max_len = config.code_style.max_line_length
    allowed = config.dependencies.allowed
    return [
        'Config OK.',
        f'Enabled checks: {", ".join(enabled) if enabled else "none"}',
        f'Max line length: {max_len if max_len is not None else "not set"}',
        f'Allowed dependencies: {", ".join(allowed) if allowed else "none"}',
    ]
