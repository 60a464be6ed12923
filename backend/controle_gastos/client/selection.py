"""
Selection of rows in the filtered transaction list.
"""

from typing import Iterable, List, Set


class SelectionSet:
    """
    Ids picked for a bulk action.

    The owner keeps it a subset of the visible ids by calling `retain`
    whenever the visible list changes.
    """

    def __init__(self):
        self._ids: Set[int] = set()

    def __len__(self) -> int:
        return len(self._ids)

    def __contains__(self, transacao_id: int) -> bool:
        return transacao_id in self._ids

    @property
    def ids(self) -> List[int]:
        return sorted(self._ids)

    def toggle_one(self, transacao_id: int) -> None:
        if transacao_id in self._ids:
            self._ids.discard(transacao_id)
        else:
            self._ids.add(transacao_id)

    def toggle_all(self, visible_ids: Iterable[int]) -> None:
        """Clear when everything visible is selected, otherwise select exactly the visible ids."""
        visible = set(visible_ids)
        if len(self._ids) == len(visible):
            self._ids.clear()
        else:
            self._ids = visible

    def retain(self, visible_ids: Iterable[int]) -> None:
        """Drop ids that are no longer visible."""
        self._ids &= set(visible_ids)

    def clear(self) -> None:
        self._ids.clear()
