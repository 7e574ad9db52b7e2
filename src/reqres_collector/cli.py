"""CLI entry point for reqres-collector."""

import json
import logging
from pathlib import Path

import click
import yaml

from reqres_collector.config import CollectorConfig, ConfigError, load_config
from reqres_collector.parser.annotations import get_action_docs


def _load(config_path: Path | None, root: Path | None) -> CollectorConfig:
    """Load config and apply command-line overrides."""
    try:
        config = load_config(config_path)
    except ConfigError as e:
        raise click.ClickException(str(e)) from e
    if root is not None:
        config = config.model_copy(update={"controllers_root": root})
    return config


@click.group()
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging.")
def main(verbose: bool):
    """reqres-collector — inspect the documentation scraped for API tests."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
    )


@main.command()
@click.argument("controller")
@click.argument("action")
@click.option("--root", default=None, type=click.Path(exists=True, file_okay=False, path_type=Path), help="Directory controller paths are relative to.")
@click.option("--config", "config_path", default=None, type=click.Path(exists=True, dir_okay=False, path_type=Path), help="YAML config file.")
def describe(controller: str, action: str, root: Path | None, config_path: Path | None):
    """Show the description and params documented for CONTROLLER ACTION."""
    config = _load(config_path, root)
    docs = get_action_docs(controller, action, config)

    if not docs.description and not docs.params:
        click.echo(f"No documentation found for {controller}#{action} in {config.controller_file(controller)}", err=True)

    payload = {
        "description": docs.description,
        "params": [p.to_dict() for p in docs.params],
    }
    click.echo(json.dumps(payload, indent=2, ensure_ascii=False))


@main.command("show-config")
@click.option("--config", "config_path", default=None, type=click.Path(exists=True, dir_okay=False, path_type=Path), help="YAML config file.")
def show_config(config_path: Path | None):
    """Print the effective configuration as YAML."""
    config = _load(config_path, None)
    click.echo(yaml.safe_dump(config.model_dump(mode="json"), sort_keys=False))
