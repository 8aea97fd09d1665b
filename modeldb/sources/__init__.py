"""Upstream data sources."""

from modeldb.sources.rate_limiter import RetryBackoff
from modeldb.sources.upstream_feed import UpstreamFeed

__all__ = ["RetryBackoff", "UpstreamFeed"]
