import logging
import re
from typing import Any, Iterable, List, Optional, Protocol, Set

from mention_highlighter.models import MentionSegment, PlainTextSegment, Segment

logger = logging.getLogger(__name__)

# One capture group, so re.split alternates literal text and usernames
MENTION_PATTERN = re.compile(r"@([a-z]+)")


class HasUsername(Protocol):
    username: str


def highlight(message: str, known_usernames: Iterable[str]) -> List[Segment]:
    """
    Split a message into plain text and recognized @mentions.

    Candidates are "@" followed by the longest run of lowercase ASCII letters.
    A candidate whose letters are in known_usernames becomes a MentionSegment;
    any other candidate stays plain text with its "@" kept. Empty literal runs
    emit nothing, so "" gives [] and "@a@b" gives two mentions.

    Args:
        message: The raw message text
        known_usernames: Usernames eligible for recognition (case-sensitive)

    Returns:
        Segments in source order; segments_to_text() of the result equals message
    """
    known = set(known_usernames)
    segments: List[Segment] = []
    mention_count = 0

    fragments = MENTION_PATTERN.split(message)
    for idx, fragment in enumerate(fragments):
        if idx % 2 == 0:
            if fragment:
                segments.append(PlainTextSegment(content=fragment))
        elif fragment in known:
            segments.append(MentionSegment(username=fragment))
            mention_count += 1
        else:
            segments.append(PlainTextSegment(content=f"@{fragment}"))

    logger.debug(
        "highlight: %d candidate(s), %d recognized mention(s)",
        len(fragments) // 2,
        mention_count,
    )
    return segments


def coalesce_segments(segments: Iterable[Segment]) -> List[Segment]:
    """Merge runs of adjacent plain text segments into one."""
    merged: List[Segment] = []
    for segment in segments:
        if (
            isinstance(segment, PlainTextSegment)
            and merged
            and isinstance(merged[-1], PlainTextSegment)
        ):
            merged[-1] = PlainTextSegment(content=merged[-1].content + segment.content)
        else:
            merged.append(segment)
    return merged


def mentioned_usernames(segments: Iterable[Segment]) -> List[str]:
    """Usernames of the mention segments in order, duplicates kept."""
    return [s.username for s in segments if isinstance(s, MentionSegment)]


def known_usernames_from_history(history: Iterable[HasUsername]) -> Set[str]:
    return {str(msg.username) for msg in history}


def highlight_from_history(message: str, history: Iterable[HasUsername]) -> List[Segment]:
    """Highlight against the authors of the given messages."""
    return highlight(message, known_usernames_from_history(history))


def configured_usernames(settings: Optional[Any] = None) -> Set[str]:
    """Known usernames from the `known_usernames` setting (empty if unset)."""
    if settings is None:
        from mention_highlighter.config_loader import settings
    usernames = settings.get("known_usernames") or []
    return {str(name) for name in usernames}


def highlight_with_settings(message: str, settings: Optional[Any] = None) -> List[Segment]:
    """Highlight against configured_usernames(settings)."""
    return highlight(message, configured_usernames(settings))
