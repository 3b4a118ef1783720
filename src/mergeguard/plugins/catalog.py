"""Static catalog of built-in plugins.

Maps the names used in policy ``do`` entries to their constructors. Only
catalogued names can be constructed by the registry; nothing is imported
dynamically.
"""

from __future__ import annotations

from collections.abc import Callable

from mergeguard.actions.checks import ChecksAction
from mergeguard.actions.comment import CommentAction
from mergeguard.plugins.base import Action, Validator
from mergeguard.validators.description import DescriptionValidator
from mergeguard.validators.label import LabelValidator
from mergeguard.validators.milestone import MilestoneValidator
from mergeguard.validators.title import TitleValidator

VALIDATOR_CATALOG: dict[str, Callable[[], Validator]] = {
    TitleValidator.name: TitleValidator,
    DescriptionValidator.name: DescriptionValidator,
    LabelValidator.name: LabelValidator,
    MilestoneValidator.name: MilestoneValidator,
}

ACTION_CATALOG: dict[str, Callable[[], Action]] = {
    ChecksAction.name: ChecksAction,
    CommentAction.name: CommentAction,
}
