"""Title validator."""

from __future__ import annotations

from mergeguard.model import EventContext
from mergeguard.validators.base import SubjectValidator


class TitleValidator(SubjectValidator):
    name = "title"
    subject_label = "Title"

    def extract(self, context: EventContext) -> list[str]:
        title = context.subject.get("title")
        return [title] if isinstance(title, str) else [""]
