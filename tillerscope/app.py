"""Run bootstrap for tillerscope.

Order: logging -> K8s client -> release source (one list call)
       -> collect (decode + filter) -> sort -> render -> stdout

Client construction and listing failures are fatal and end the run with
exit status 1. Everything after the list call is best effort per record
and cannot abort the run.
"""

from __future__ import annotations

from datetime import datetime

import click

from tillerscope.collector import CollectResult, ReleaseFilter, collect_releases, sort_releases
from tillerscope.errors import TillerScopeError
from tillerscope.models.config import FilterConfig, TillerScopeConfig
from tillerscope.observability.logging import get_logger, setup_logging
from tillerscope.output import render_table
from tillerscope.storage import KubeReleaseSource, ReleaseSource, load_client_config


async def list_releases(
    source: ReleaseSource,
    filter_config: FilterConfig,
    now: datetime | None = None,
) -> CollectResult:
    """Fetch, decode, filter and order the releases held by *source*."""
    records = await source.list_records()
    release_filter = ReleaseFilter.build(filter_config.namespace, filter_config.since, now)
    result = collect_releases(records, release_filter)
    result.releases = sort_releases(result.releases)
    return result


async def run(config: TillerScopeConfig) -> str:
    """Query the cluster described by *config* and return the rendered table.

    Raises TillerScopeError subclasses on fatal errors.
    """
    await load_client_config(config.kube.kubeconfig, config.kube.context)

    from kubernetes_asyncio import client as k8s_client  # type: ignore[import-untyped]

    async with k8s_client.ApiClient() as api_client:
        source = KubeReleaseSource(
            k8s_client.CoreV1Api(api_client),
            kind=config.source.storage,
            namespace=config.source.tiller_namespace,
            label_selector=config.source.label_selector,
        )
        result = await list_releases(source, config.filter)

    return render_table(
        result.releases,
        result.widths,
        max_column_width=config.output.max_column_width,
    )


async def main(config: TillerScopeConfig) -> None:
    """Run once and print the table; exit non-zero on a fatal error."""
    setup_logging(config.log.level, config.log.component_levels)
    log = get_logger("app")
    log.debug(
        "tillerscope starting",
        storage=config.source.storage,
        tiller_namespace=config.source.tiller_namespace,
        namespace=config.filter.namespace or None,
    )

    try:
        table = await run(config)
    except TillerScopeError as exc:
        log.critical("fatal error", error=str(exc), error_type=type(exc).__name__)
        click.echo(f"Error: {exc}", err=True)
        raise SystemExit(1) from exc

    if table:
        click.echo(table, nl=False)
