"""cloud-detect CLI: entry point for the detect and providers commands."""

import click

from cloud_detect import __version__
from cloud_detect.core.exceptions import ConfigurationError


@click.group()
@click.version_option(version=__version__, package_name="cloud-detect")
@click.option("--config", "config_file", type=click.Path(dir_okay=False), help="YAML or JSON config file.")
@click.option("--log-level", default=None, help="Log level (TRACE shows every probe check).")
@click.pass_context
def main(ctx: click.Context, config_file: str | None, log_level: str | None) -> None:
    """cloud-detect: find out which cloud provider hosts this machine."""
    from cloud_detect.core.cli.common import configure_logging, load_settings

    try:
        settings = load_settings(config_file)
    except ConfigurationError as e:
        raise click.ClickException(str(e)) from e
    try:
        configure_logging(settings, log_level)
    except ValueError as e:
        raise click.BadParameter(str(e), param_hint="--log-level") from e
    ctx.obj = settings


# Register subcommands (lazy imports keep startup fast)
from .detect_cmd import detect
from .providers_cmd import providers

main.add_command(detect)
main.add_command(providers)
