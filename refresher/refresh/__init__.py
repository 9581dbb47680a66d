"""Refresh package: link loading and the sequential refresh pass."""

from refresher.refresh.loader import load_links
from refresher.refresh.models import LinkOutcome, RunResult
from refresher.refresh.runner import refresh_links, run_refresh

__all__ = ["load_links", "refresh_links", "run_refresh", "LinkOutcome", "RunResult"]
