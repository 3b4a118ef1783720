"""Label validator.

Regex options match when any label matches; ``no_empty`` requires at least
one label.
"""

from __future__ import annotations

from collections.abc import Mapping

from mergeguard.model import EventContext
from mergeguard.validators.base import SubjectValidator


class LabelValidator(SubjectValidator):
    name = "label"
    subject_label = "Labels"

    def extract(self, context: EventContext) -> list[str]:
        labels = context.subject.get("labels") or []
        names: list[str] = []
        for label in labels:
            if isinstance(label, Mapping) and isinstance(label.get("name"), str):
                names.append(label["name"])
            elif isinstance(label, str):
                names.append(label)
        return names
