from typing import Annotated, Any, Iterable, List, Literal, Union

from pydantic import BaseModel, Field, TypeAdapter


class PlainTextSegment(BaseModel):
    """Literal text, including @words that did not name a known user."""

    type: Literal["text"] = "text"
    content: str

    def to_text(self) -> str:
        return self.content


class MentionSegment(BaseModel):
    """A recognized @mention. `username` excludes the leading @."""

    type: Literal["mention"] = "mention"
    username: str

    def to_text(self) -> str:
        return f"@{self.username}"


Segment = Annotated[
    Union[
        PlainTextSegment,
        MentionSegment,
    ],
    Field(discriminator="type"),
]

_segment_list_adapter = TypeAdapter(List[Segment])


def parse_segments(data: Any) -> List[Segment]:
    """
    Validate a list of segment dicts, e.g. the output of model_dump().

    Raises:
        pydantic.ValidationError: if the payload is not a list of segments
    """
    return _segment_list_adapter.validate_python(data)


def segments_to_text(segments: Iterable[Segment]) -> str:
    """
    Rebuilds the source text from segments.
    e.g. [Text("hi "), Mention("vic")] -> "hi @vic"
    """
    return "".join(segment.to_text() for segment in segments)
