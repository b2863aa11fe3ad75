"""Link API domain."""

from .fetch_targets import fetch_targets
from .Fetcher import Fetcher
from .Link import Link
from .LinkChecker import LinkChecker
from .LinkError import LinkError
from .LinkParseError import LinkParseError
from .lookup_fragment import lookup_fragment
from .Record import Record
from .Tag import Tag
from .Targets import Targets

__all__ = [
    "Fetcher",
    "Link",
    "LinkChecker",
    "LinkError",
    "LinkParseError",
    "Record",
    "Tag",
    "Targets",
    "fetch_targets",
    "lookup_fragment",
]
