from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterator, Mapping, Optional, Tuple

from cornerstones.assessments.constants import OPTIONS_PER_QUESTION, VARK_STYLES


@dataclass(frozen=True, slots=True)
class Response:
    """One answered questionnaire question.

    ``question_id`` is never read by scoring; it is kept so a persisted or
    logged response set can be traced back to the questionnaire. A
    ``domain_weight`` of ``None`` means "not stated" and scores as 1.0.
    """

    question_id: Optional[str]
    domain_id: Optional[str]
    selected_style: Optional[str]
    domain_weight: Optional[float] = None


@dataclass(frozen=True, slots=True)
class PercentageScoreVector:
    """Integer percentage per VARK style; the durable profile representation."""

    visual: int
    auditory: int
    reading_writing: int
    kinesthetic: int

    @classmethod
    def from_mapping(cls, payload: Mapping[str, Any]) -> "PercentageScoreVector":
        """Build from a tag-keyed mapping; missing or null entries read as 0."""
        return cls(**{style: int(payload.get(style) or 0) for style in VARK_STYLES})

    def __getitem__(self, style: str) -> int:
        if style not in VARK_STYLES:
            raise KeyError(style)
        return getattr(self, style)

    def items(self) -> Iterator[Tuple[str, int]]:
        """Yield ``(tag, percentage)`` pairs in precedence order."""
        for style in VARK_STYLES:
            yield style, getattr(self, style)

    def total(self) -> int:
        return self.visual + self.auditory + self.reading_writing + self.kinesthetic

    def as_dict(self) -> dict[str, int]:
        return dict(self.items())


@dataclass(frozen=True, slots=True)
class StyleScore:
    """A style's percentage paired with its static display copy."""

    style: str
    name: str
    percentage: int
    description: str

    def as_dict(self) -> dict[str, Any]:
        return {
            "style": self.style,
            "name": self.name,
            "percentage": self.percentage,
            "description": self.description,
        }


@dataclass(frozen=True, slots=True)
class Interpretation:
    """Derived, non-persisted reading of a score vector."""

    dominant: StyleScore
    secondary: Optional[StyleScore]
    is_multimodal: bool
    multimodal_styles: Optional[Tuple[StyleScore, ...]]
    all_scores: Tuple[StyleScore, ...]
    interpretation: str


@dataclass(frozen=True, slots=True)
class QuestionOption:
    style: str
    text: str


@dataclass(frozen=True, slots=True)
class Question:
    id: str
    text: str
    options: Tuple[QuestionOption, ...]

    def offers(self, style: str) -> bool:
        return any(option.style == style for option in self.options)


@dataclass(frozen=True, slots=True)
class AssessmentDomain:
    """Themed group of questions sharing one scoring weight."""

    id: str
    name: str
    description: str
    weight: float
    questions: Tuple[Question, ...]


@dataclass(frozen=True, slots=True)
class Questionnaire:
    """Immutable container for the VARK questionnaire configuration."""

    instrument_id: str
    version: str
    domains: Tuple[AssessmentDomain, ...]

    @property
    def total_questions(self) -> int:
        return sum(len(domain.questions) for domain in self.domains)

    def question_index(self) -> dict[str, tuple[AssessmentDomain, Question]]:
        """Map every question id to its owning domain and question."""
        return {
            question.id: (domain, question)
            for domain in self.domains
            for question in domain.questions
        }

    @classmethod
    def from_raw(cls, payload: Mapping[str, Any]) -> "Questionnaire":
        domains = tuple(cls._domain_from_raw(raw) for raw in payload["domains"])
        seen: set[str] = set()
        for domain in domains:
            for question in domain.questions:
                if question.id in seen:
                    raise ValueError(f"Duplicate question id in questionnaire: {question.id}")
                seen.add(question.id)
        return cls(
            instrument_id=str(payload["id"]),
            version=str(payload["version"]),
            domains=domains,
        )

    @staticmethod
    def _domain_from_raw(raw: Mapping[str, Any]) -> AssessmentDomain:
        weight = float(raw["weight"])
        if weight <= 0:
            raise ValueError(f"Domain {raw['id']} must have a positive weight, got {weight}")
        questions = []
        for item in raw["questions"]:
            options = tuple(
                QuestionOption(style=str(option["style"]), text=str(option["text"]))
                for option in item["options"]
            )
            if len(options) != OPTIONS_PER_QUESTION:
                raise ValueError(
                    f"Question {item['id']} must offer {OPTIONS_PER_QUESTION} options, got {len(options)}"
                )
            unknown = sorted({option.style for option in options} - set(VARK_STYLES))
            if unknown:
                raise ValueError(f"Question {item['id']} uses unknown styles: {unknown}")
            questions.append(Question(id=str(item["id"]), text=str(item["text"]), options=options))
        return AssessmentDomain(
            id=str(raw["id"]),
            name=str(raw["name"]),
            description=str(raw.get("description", "")),
            weight=weight,
            questions=tuple(questions),
        )
