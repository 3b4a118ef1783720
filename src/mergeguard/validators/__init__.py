"""Built-in validators."""

from __future__ import annotations

from mergeguard.validators.description import DescriptionValidator
from mergeguard.validators.label import LabelValidator
from mergeguard.validators.milestone import MilestoneValidator
from mergeguard.validators.title import TitleValidator

__all__ = [
    "DescriptionValidator",
    "LabelValidator",
    "MilestoneValidator",
    "TitleValidator",
]
