"""Recognize @mentions of known users in chat text."""

from mention_highlighter.highlighting import (
    coalesce_segments,
    configured_usernames,
    highlight,
    highlight_from_history,
    highlight_with_settings,
    known_usernames_from_history,
    mentioned_usernames,
)
from mention_highlighter.models import (
    MentionSegment,
    PlainTextSegment,
    Segment,
    parse_segments,
    segments_to_text,
)

__all__ = [
    "highlight",
    "coalesce_segments",
    "mentioned_usernames",
    "known_usernames_from_history",
    "highlight_from_history",
    "configured_usernames",
    "highlight_with_settings",
    "Segment",
    "PlainTextSegment",
    "MentionSegment",
    "parse_segments",
    "segments_to_text",
]
