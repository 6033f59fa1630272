"""Value types shared by the segmentation engine.

Everything here is a frozen dataclass built fresh per segmentation call.
``Lecture`` and ``Activity`` also know how to read the loosely-typed
records kept by the document store, so callers can hand raw rows straight
to :func:`lecture_slides.segment`.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Literal, Mapping, Sequence


class SlideKind(Enum):
    """Closed set of slide layouts understood by the renderer."""

    TITLE = "title"
    CONTENT = "content"
    IMAGE = "image"
    ACTIVITY = "activity"


LectureStatus = Literal["draft", "published"]


@dataclass(frozen=True)
class ChoiceOption:
    text: str
    correct: bool = False


@dataclass(frozen=True)
class MultipleChoice:
    options: tuple[ChoiceOption, ...]

    @property
    def correct_indices(self) -> tuple[int, ...]:
        return tuple(i for i, opt in enumerate(self.options) if opt.correct)


@dataclass(frozen=True)
class FreeText:
    correct_answer: str


AnswerShape = MultipleChoice | FreeText


def _text(value: Any) -> str:
    return value if isinstance(value, str) else ""


def _choices(record: Mapping[str, Any]) -> MultipleChoice:
    correct = record.get("correctOption")
    return MultipleChoice(
        tuple(
            ChoiceOption(str(text), correct=i == correct)
            for i, text in enumerate(record.get("options") or ())
        )
    )


@dataclass(frozen=True)
class Activity:
    """Quiz question folded into an ``activity`` slide."""

    id: str
    question_text: str
    answer: AnswerShape

    @classmethod
    def from_record(cls, record: Mapping[str, Any]) -> Activity:
        """Build from a store record (``type``/``question``/``options``...)."""
        answer: AnswerShape = (
            _choices(record)
            if record.get("type") == "multiple-choice"
            else FreeText(_text(record.get("correctAnswer")))
        )
        return cls(
            id=str(record.get("id", "")),
            question_text=_text(record.get("question") or record.get("questionText")),
            answer=answer,
        )

    def to_record(self) -> dict[str, Any]:
        base = {"id": self.id, "question": self.question_text}
        if isinstance(self.answer, MultipleChoice):
            indices = self.answer.correct_indices
            return base | {
                "type": "multiple-choice",
                "options": [opt.text for opt in self.answer.options],
                "correctOption": indices[0] if indices else None,
            }
        return base | {"type": "short-answer", "correctAnswer": self.answer.correct_answer}


@dataclass(frozen=True)
class Lecture:
    """The parts of a lecture record the engine reads, plus store metadata."""

    title: str = ""
    description: str = ""
    content: str = ""
    id: str = ""
    images: tuple[str, ...] = ()
    status: LectureStatus = "draft"

    @classmethod
    def from_record(cls, record: Mapping[str, Any]) -> Lecture:
        """Normalize a store record; missing strings become ``""``."""
        published = bool(record.get("isPublished", False))
        status = record.get("status") or ("published" if published else "draft")
        return cls(
            title=_text(record.get("title")),
            description=_text(record.get("description")),
            content=_text(record.get("content")),
            id=_text(record.get("id")),
            images=tuple(str(url) for url in record.get("images") or ()),
            status="published" if status == "published" else "draft",
        )


_PAYLOAD_FOR_KIND: Mapping[SlideKind, str] = {
    SlideKind.TITLE: "body",
    SlideKind.CONTENT: "body",
    SlideKind.IMAGE: "image_ref",
    SlideKind.ACTIVITY: "activity",
}


@dataclass(frozen=True)
class Slide:
    """One unit of presentation output.

    ``kind`` decides which payload field must be populated: ``body`` for
    title/content slides, ``image_ref`` for image slides and ``activity``
    for activity slides; the others stay ``None``. ``notes`` holds speaker
    notes and is not a payload.
    """

    id: str
    kind: SlideKind
    title: str | None = None
    body: str | None = None
    image_ref: str | None = None
    activity: Activity | None = None
    notes: str | None = None

    def __post_init__(self) -> None:
        allowed = _PAYLOAD_FOR_KIND[self.kind]
        present = [
            name
            for name in ("body", "image_ref", "activity")
            if getattr(self, name) is not None
        ]
        stray = [name for name in present if name != allowed]
        if stray:
            raise ValueError(f"{self.kind.value} slide cannot carry {', '.join(stray)}")
        if allowed not in present:
            raise ValueError(f"{self.kind.value} slide requires {allowed}")

    def to_record(self) -> dict[str, Any]:
        """Return a JSON-ready mapping with absent fields omitted."""
        fields: dict[str, Any] = {
            "title": self.title,
            "body": self.body,
            "image": self.image_ref,
            "activity": self.activity.to_record() if self.activity else None,
            "notes": self.notes,
        }
        return {"id": self.id, "kind": self.kind.value} | {
            k: v for k, v in fields.items() if v is not None
        }


@dataclass(frozen=True)
class ContentChunk:
    """Intermediate grouping of source markup, discarded once it becomes a slide."""

    markup: str
    derived_title: str | None = None
    word_count: int = 0


@dataclass(frozen=True)
class ImageChunk:
    """An image isolated by the heading splitter."""

    src: str
    alt: str = ""


Chunk = ContentChunk | ImageChunk


@dataclass(frozen=True)
class SegmentationRequest:
    """Payload handed to a strategy pass."""

    lecture: Lecture
    activities: tuple[Activity, ...] = ()


def number_slides(slides: Sequence[Slide]) -> list[dict[str, Any]]:
    """Return slide records annotated with 1-based position and total count."""
    total = len(slides)
    return [
        {**slide.to_record(), "slideNumber": n, "totalSlides": total}
        for n, slide in enumerate(slides, 1)
    ]


__all__ = [
    "Activity",
    "AnswerShape",
    "ChoiceOption",
    "Chunk",
    "ContentChunk",
    "FreeText",
    "ImageChunk",
    "Lecture",
    "MultipleChoice",
    "SegmentationRequest",
    "Slide",
    "SlideKind",
    "number_slides",
]
