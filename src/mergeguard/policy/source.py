"""Retrieve the policy document that applies to an event."""

from __future__ import annotations

import logging

from mergeguard.config import Settings
from mergeguard.constants.policy import DEFAULT_POLICY_YAML
from mergeguard.exceptions import ConfigParseError
from mergeguard.model import EventContext, PolicyDocument
from mergeguard.policy.loader import parse_policy
from mergeguard.utils import resolve

logger = logging.getLogger(__name__)

DEFAULT_POLICY_SOURCE: str = "<default policy>"


async def fetch_policy(context: EventContext, settings: Settings) -> PolicyDocument:
    """Return the parsed policy for the event's repository.

    Reads ``settings.policy_path`` through the context's API handle. A missing
    file falls back to the built-in policy when ``use_default_policy`` is set.
    Every failure surfaces as ConfigParseError.
    """
    try:
        text = await resolve(context.github.get_file_content(context.repository, settings.policy_path))
    except ConfigParseError:
        raise
    except Exception as exc:
        raise ConfigParseError(
            f"Unable to read {settings.policy_path} from {context.repository.full_name}: {exc}"
        ) from exc

    if text is None:
        if not settings.use_default_policy:
            raise ConfigParseError(f"No policy file at {settings.policy_path} in {context.repository.full_name}")
        logger.info("No policy file in %s, using the default policy", context.repository.full_name)
        return parse_policy(DEFAULT_POLICY_YAML, DEFAULT_POLICY_SOURCE)

    source = f"{context.repository.full_name}:{settings.policy_path}"
    if isinstance(text, bytes):
        try:
            text = text.decode("utf-8")
        except UnicodeDecodeError as exc:
            raise ConfigParseError(f"{source} is not valid UTF-8: {exc}") from exc
    return parse_policy(text, source)
