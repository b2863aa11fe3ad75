"""Fragment resolver (UNO: single function)."""

from collections.abc import Collection, Sequence

from .FragmentError import FragmentError
from .Tag import Tag


def lookup_fragment(
    ids: Collection[str],
    fragment: str | None,
    prefixes: Sequence[str] = (),
) -> tuple[Tag, FragmentError] | None:
    """Match a fragment against a document's anchor IDs.

    Args:
        ids: Anchor IDs extracted from the target document
        fragment: Requested fragment, None if the link had none
        prefixes: Prefixes tried in order when the exact fragment is absent

    Returns:
        None if the fragment resolves, otherwise the (tag, error) pair.
    """
    if fragment is None:
        return None

    if fragment == "":
        return Tag.EMPTY_FRAGMENT, FragmentError(fragment, "empty fragment")

    if fragment in ids:
        return None

    for prefix in prefixes:
        if prefix + fragment in ids:
            return None

    return Tag.NO_FRAGMENT, FragmentError(fragment)
