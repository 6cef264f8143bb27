"""Command-line interface for checking the front-end environment."""

import logging
import sys

import click

from frontend_env.config import EnvConfig
from frontend_env.exceptions import ConfigurationError
from frontend_env.startup import bootstrap

SECRET_FIELDS = {"sentry_auth_token"}


def mask(value: str | None) -> str:
    """Hide all but the last four characters of a secret."""
    if value is None:
        return "<unset>"
    if len(value) <= 4:
        return "****"
    return "****" + value[-4:]


def describe(config: EnvConfig) -> list[tuple[str, str]]:
    """List each environment variable with a display-safe value."""
    env_names = EnvConfig.env_names()
    rows = []
    for field_name in EnvConfig.model_fields:
        value = getattr(config, field_name)
        if field_name in SECRET_FIELDS:
            shown = mask(value)
        else:
            shown = "<unset>" if value is None else value
        rows.append((env_names[field_name], shown))
    return rows


@click.command()
@click.option(
    "--env-file",
    type=click.Path(exists=True, dir_okay=False),
    help="Dotenv file to read as a fallback below real environment variables.",
)
@click.option("--show", is_flag=True, help="Print every variable, masking secrets.")
@click.option("--verbose", is_flag=True, help="Log validation details to stderr.")
def main(env_file: str | None, show: bool, verbose: bool) -> None:
    """Validate the front-end environment and report every problem."""
    if verbose:
        logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")

    try:
        config = bootstrap(env_file=env_file)
    except ConfigurationError as e:
        click.echo("Configuration error:", err=True)
        for name, problem in e.problems:
            click.echo(f"  {name}: {problem}", err=True)
        sys.exit(1)

    click.echo("Configuration OK")
    if show:
        for name, shown in describe(config):
            click.echo(f"  {name}={shown}")


if __name__ == "__main__":
    main()
