"""Configuration inspection commands."""

import json

import click
import yaml

from pagination_service.cli.utils import info, success, warning
from pagination_service.core.settings import (
    get_app_settings,
    get_dynamodb_settings,
    get_logging_settings,
    get_pagination_settings,
)

MASK = "***"


@click.group(name="config")
def config() -> None:
    """Configuration management commands."""


def build_config_dict(show_secrets: bool = False) -> dict[str, dict[str, object]]:
    """Collect the effective settings, masking credentials unless asked not to."""
    app = get_app_settings()
    dynamodb = get_dynamodb_settings()
    pagination = get_pagination_settings()
    logs = get_logging_settings()

    def secret(value) -> str | None:
        if value is None:
            return None
        return value.get_secret_value() if show_secrets else MASK

    return {
        "app": {
            "name": app.service_name,
            "environment": app.environment,
            "debug": app.debug,
            "host": app.host,
            "port": app.port,
            "api_prefix": app.api_prefix,
        },
        "dynamodb": {
            "table_name": dynamodb.table_name,
            "region": dynamodb.region,
            "endpoint_url": dynamodb.endpoint_url,
            "access_key": secret(dynamodb.access_key),
            "secret_key": secret(dynamodb.secret_key),
            "partition_key_attribute": dynamodb.partition_key_attribute,
            "sort_key_attribute": dynamodb.sort_key_attribute,
            "max_retries": dynamodb.max_retries,
        },
        "pagination": {
            "default_page": pagination.default_page,
            "default_page_size": pagination.default_page_size,
            "max_page_size": pagination.max_page_size,
        },
        "logging": {
            "level": logs.level,
            "json_logs": logs.json_logs,
            "file_path": str(logs.file_path) if logs.file_path else None,
        },
    }


@config.command()
@click.option(
    "--format",
    "output_format",
    type=click.Choice(["json", "yaml", "table"]),
    default="table",
    help="Output format",
)
@click.option(
    "--show-secrets/--hide-secrets",
    default=False,
    help="Show AWS credentials",
)
def show(output_format: str, show_secrets: bool) -> None:
    """Display current configuration settings."""
    config_dict = build_config_dict(show_secrets)

    if output_format == "json":
        click.echo(json.dumps(config_dict, indent=2, default=str))
        return
    if output_format == "yaml":
        click.echo(yaml.safe_dump(config_dict, default_flow_style=False, sort_keys=False))
        return

    info("Loading configuration...")
    if not show_secrets:
        warning("Secrets are hidden. Use --show-secrets to display them.")

    click.echo("\n" + "=" * 80)
    click.echo("CONFIGURATION SETTINGS")
    click.echo("=" * 80)
    for section, values in config_dict.items():
        click.echo(f"\n[{section.upper()}]")
        for key, value in values.items():
            click.echo(f"  {key:30} = {value}")
    click.echo("\n" + "=" * 80)

    success("Configuration loaded successfully!")
