"""Description (body) validator."""

from __future__ import annotations

from mergeguard.model import EventContext
from mergeguard.validators.base import SubjectValidator


class DescriptionValidator(SubjectValidator):
    name = "description"
    subject_label = "Description"

    def extract(self, context: EventContext) -> list[str]:
        body = context.subject.get("body")
        return [body] if isinstance(body, str) else [""]
