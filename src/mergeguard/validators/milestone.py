"""Milestone validator."""

from __future__ import annotations

from collections.abc import Mapping

from mergeguard.model import EventContext
from mergeguard.validators.base import SubjectValidator


class MilestoneValidator(SubjectValidator):
    name = "milestone"
    subject_label = "Milestone"

    def extract(self, context: EventContext) -> list[str]:
        milestone = context.subject.get("milestone")
        if isinstance(milestone, Mapping) and isinstance(milestone.get("title"), str):
            return [milestone["title"]]
        return []
