"""Memoized target fetching (UNO: single function)."""

from typing import Protocol

from .Targets import Targets


class _Fetches(Protocol):
    def fetch(self, base: str) -> Targets: ...


def fetch_targets(base: str, cache: dict[str, Targets], fetcher: _Fetches) -> Targets:
    """Return the Targets for ``base``, retrieving it at most once per cache.

    Failures are cached like successes, so a broken base is never retried.
    """
    targets = cache.get(base)
    if targets is None:
        targets = fetcher.fetch(base)
        cache[base] = targets
    return targets
