"""Name-keyed matching of property / child node definition collections."""

import logging
from dataclasses import dataclass
from typing import Callable, Dict, Iterable, Optional, Tuple, TypeVar

from .item_diff import ChildItemDiff
from .model import ItemDefinition
from .severity import Severity


logger = logging.getLogger(__name__)

T = TypeVar("T", bound=ItemDefinition)

ItemDiffer = Callable[[Optional[T], Optional[T]], ChildItemDiff]


@dataclass(frozen=True)
class CollectionDiff:
    """Per-name diffs of one item collection and their maximum severity."""
    diffs: Tuple[ChildItemDiff, ...] = ()
    severity: Severity = Severity.NONE

    def __iter__(self):
        return iter(self.diffs)

    def __len__(self) -> int:
        return len(self.diffs)

    def get(self, name: str) -> Optional[ChildItemDiff]:
        """Get the diff for an item name."""
        for diff in self.diffs:
            if diff.name == name:
                return diff
        return None


def _index_by_name(items: Iterable[T]) -> Dict[str, T]:
    # Items are identified by name only, not by the full definition id
    # (declaring type, name, required type, multiple). A later definition
    # with a duplicate name replaces the earlier one.
    index: Dict[str, T] = {}
    for item in items:
        if item.name in index:
            logger.debug("Duplicate item definition name '%s'; keeping the last one", item.name)
        index[item.name] = item
    return index


def match_items(old_items: Iterable[T], new_items: Iterable[T], differ: ItemDiffer) -> CollectionDiff:
    """Pair old and new item definitions by name and classify each pair.

    Names present in the old collection come first (removed or shared), in
    first-seen order, followed by names only present in the new collection.
    """
    old_by_name = _index_by_name(old_items)
    new_by_name = _index_by_name(new_items)

    old_names = set(old_by_name)
    new_only = [name for name in new_by_name if name not in old_names]

    diffs = []
    for name, old_def in old_by_name.items():
        diffs.append(differ(old_def, new_by_name.get(name)))
    for name in new_only:
        diffs.append(differ(None, new_by_name[name]))

    severity = Severity.NONE
    for diff in diffs:
        severity = severity.raise_to(diff.severity)

    return CollectionDiff(diffs=tuple(diffs), severity=severity)
