"""Link checking orchestrator."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import TYPE_CHECKING

from linky.utils.logger import get_logger

from .fetch_targets import fetch_targets
from .Fetcher import Fetcher
from .Link import Link
from .LinkError import LinkError
from .LinkParseError import LinkParseError
from .lookup_fragment import lookup_fragment
from .Record import Record
from .Tag import Tag
from .Targets import Targets

if TYPE_CHECKING:
    from ..config.LinkyConfig import LinkyConfig

logger = get_logger("checker")


class LinkChecker:
    """Turns link occurrences into report records.

    Without a fetcher the checker only extracts: every parsed link is
    reported untagged. With one, each distinct base is fetched once through
    ``cache`` and fragments are resolved against its anchors.
    """

    def __init__(
        self,
        config: LinkyConfig,
        fetcher: Fetcher | None = None,
        cache: dict[str, Targets] | None = None,
    ):
        self.config = config
        self.fetcher = fetcher
        self.cache: dict[str, Targets] = {} if cache is None else cache
        self.silence = frozenset(config.mute)
        self.error_count = 0

    def run(self, triples: Iterable[tuple[str, int, str]]) -> Iterator[Record]:
        """Yield one unmuted record per parsable link, in input order."""
        # Read every occurrence before reporting any
        triples = list(triples)

        for path, line_number, raw in triples:
            try:
                link = Link.parse_with_root(raw, path, self.config.root)
            except LinkParseError as e:
                if Tag.PARSE_ERROR not in self.silence:
                    self.error_count += 1
                    logger.error("%s:%s: %s: %s", path, line_number, e, raw)
                continue

            record = self.check(path, line_number, raw, link)
            if record.tag in self.silence:
                continue
            if record.tag is not None:
                self.error_count += 1
            yield record

    def check(self, path: str, line_number: int, raw: str, link: Link) -> Record:
        """Classify a single parsed link."""
        if self.fetcher is None:
            return Record(path=path, line_number=line_number, raw=raw)

        base, fragment = link.split_fragment()
        targets = fetch_targets(base, self.cache, self.fetcher)
        if not targets.is_ok:
            return Record(path=path, line_number=line_number, raw=raw, tag=targets.tag, error=targets.error)

        failure = lookup_fragment(targets.ids, fragment, self.config.prefixes)
        if failure is None:
            return Record(path=path, line_number=line_number, raw=raw)

        tag, cause = failure
        error = LinkError(base, "resolving fragment", cause)
        return Record(path=path, line_number=line_number, raw=raw, tag=tag, error=error)
