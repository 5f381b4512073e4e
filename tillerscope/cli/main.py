"""``tillerscope`` command.

Every option falls back to a TILLERSCOPE_* environment variable and then to
the built-in default, so the flags below only need to be passed to override.
"""

from __future__ import annotations

import asyncio

import click

from tillerscope import __version__
from tillerscope.app import main
from tillerscope.config import load_config


@click.command(context_settings={"help_option_names": ["-h", "--help"]})
@click.option("--namespace", default=None, help="Show releases within a specific namespace.")
@click.option(
    "--storage",
    type=click.Choice(["cfgmaps", "secrets"]),
    default=None,
    help="Storage type of releases.  [default: cfgmaps]",
)
@click.option(
    "--since",
    default=None,
    metavar="DURATION",
    help="Only list releases newer than a relative duration like 5s, 2m, or 3h. Defaults to all releases.",
)
@click.option("--tiller-namespace", default=None, help="Namespace of Tiller.  [default: kube-system]")
@click.option("-l", "--label", default=None, help="Label to select Tiller resources by.  [default: OWNER=TILLER]")
@click.option(
    "--max-column-width",
    type=click.IntRange(min=0),
    default=None,
    help="Cap name, status, chart and namespace columns at this width (0 = no cap).",
)
@click.option("--kubeconfig", default=None, help="Path to the kubeconfig file.")
@click.option("--context", default=None, help="Kubeconfig context to use.")
@click.option(
    "--log-level",
    type=click.Choice(["debug", "info", "warning", "error"], case_sensitive=False),
    default=None,
    help="Log level for diagnostics on stderr.  [default: warning]",
)
@click.version_option(__version__, prog_name="tillerscope")
def cli(
    namespace: str | None,
    storage: str | None,
    since: str | None,
    tiller_namespace: str | None,
    label: str | None,
    max_column_width: int | None,
    kubeconfig: str | None,
    context: str | None,
    log_level: str | None,
) -> None:
    """List Helm releases stored by Tiller, oldest deployment first."""
    try:
        config = load_config(
            namespace=namespace,
            storage=storage,
            since=since,
            tiller_namespace=tiller_namespace,
            label=label,
            max_column_width=max_column_width,
            kubeconfig=kubeconfig,
            context=context,
            log_level=log_level,
        )
    except ValueError as exc:
        raise click.UsageError(str(exc)) from exc

    asyncio.run(main(config))
