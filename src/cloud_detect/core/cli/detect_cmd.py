"""cloud-detect detect: print the provider hosting this machine."""

from __future__ import annotations

import asyncio
import json

import click


@click.command()
@click.option(
    "--timeout",
    type=click.FloatRange(min=0, min_open=True),
    default=None,
    help="Seconds to wait before giving up (default: detection.timeout).",
)
@click.option("--provider", "-p", "providers", multiple=True, help="Only check this provider (repeatable).")
@click.option("--json", "as_json", is_flag=True, help="Print the result as JSON.")
@click.pass_obj
def detect(settings, timeout: float | None, providers: tuple[str, ...], as_json: bool) -> None:  # type: ignore[no-untyped-def]
    """Detect the cloud provider hosting this machine."""
    from cloud_detect.core.cli.common import create_detector
    from cloud_detect.core.exceptions import ConfigurationError
    from cloud_detect.models import ProviderId

    try:
        detector = create_detector(settings, providers)
    except ConfigurationError as e:
        raise click.ClickException(str(e)) from e

    deadline = timeout if timeout is not None else settings.detection.timeout
    outcome = asyncio.run(detector.detect_with_timeout(deadline))
    provider = ProviderId.UNKNOWN if outcome is None else outcome

    if as_json:
        click.echo(json.dumps({"provider": str(provider), "timed_out": outcome is None}))
    else:
        click.echo(str(provider))
