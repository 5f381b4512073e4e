"""Collector package for tillerscope.

Submodules
----------
filters   -- ReleaseFilter: namespace and recency predicates.
collector -- collect_releases(): decode + filter + width tracking;
             sort_releases(): stable ordering by deployment time.
"""

from tillerscope.collector.collector import CollectResult, collect_releases, sort_releases
from tillerscope.collector.filters import ReleaseFilter, cutoff_from

__all__ = ["CollectResult", "ReleaseFilter", "collect_releases", "cutoff_from", "sort_releases"]
