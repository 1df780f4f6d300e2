"""Bidirectional id <-> label registry for one active document."""

import logging
from typing import Dict, Iterator, Optional

from flowtext.core.identity import simple_id

logger = logging.getLogger(__name__)


class IdentityRegistry:
    """
    Keeps ``id_to_label`` and ``label_to_id`` as inverse mappings.

    ``id_to_label`` is authoritative. DSL documents may give the same label
    to several ids; ``label_to_id`` then points at the most recent holder and
    falls back to another holder when that id is relabelled or removed, so
    every entry in either map is always backed by the other.
    """

    def __init__(self):
        self.id_to_label: Dict[str, str] = {}
        self.label_to_id: Dict[str, str] = {}

    def __len__(self) -> int:
        return len(self.id_to_label)

    def __contains__(self, node_id: str) -> bool:
        return node_id in self.id_to_label

    def __iter__(self) -> Iterator[str]:
        return iter(self.id_to_label)

    def clear(self) -> None:
        self.id_to_label.clear()
        self.label_to_id.clear()

    def resolve(self, label: str) -> str:
        """Return the id for a simple-form label, registering it on first sight."""
        label = label.strip()
        existing = self.label_to_id.get(label)
        if existing is not None:
            return existing
        node_id = simple_id(label)
        self.assign(node_id, label)
        return node_id

    def assign(self, node_id: str, label: str) -> None:
        """Set the label of ``node_id``, updating both directions together."""
        self._unlink(node_id)
        self.id_to_label[node_id] = label
        self.label_to_id[label] = node_id

    def remove(self, node_id: str) -> None:
        self._unlink(node_id)
        self.id_to_label.pop(node_id, None)

    def label_for(self, node_id: str) -> str:
        return self.id_to_label.get(node_id, "")

    def id_for(self, label: str) -> Optional[str]:
        return self.label_to_id.get(label)

    def _unlink(self, node_id: str) -> None:
        old_label = self.id_to_label.get(node_id)
        if old_label is None or self.label_to_id.get(old_label) != node_id:
            return
        del self.label_to_id[old_label]
        for other_id, other_label in self.id_to_label.items():
            if other_id != node_id and other_label == old_label:
                self.label_to_id[old_label] = other_id
                logger.debug("Label %r now maps to %s", old_label, other_id)
                break
