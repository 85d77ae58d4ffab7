"""cloud-detect providers: list the providers that would be checked."""

from __future__ import annotations

import click


@click.command()
@click.pass_obj
def providers(settings) -> None:  # type: ignore[no-untyped-def]
    """List supported providers, one per line."""
    from cloud_detect.core.cli.common import create_detector
    from cloud_detect.core.exceptions import ConfigurationError

    try:
        detector = create_detector(settings)
    except ConfigurationError as e:
        raise click.ClickException(str(e)) from e

    for name in detector.supported_providers():
        click.echo(name)
