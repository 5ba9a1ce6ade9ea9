"""Class-level aggregation of persisted VARK vectors."""

from __future__ import annotations

import csv
import io
from dataclasses import dataclass, field
from typing import Dict, List

from cornerstones.assessments.constants import SIGNIFICANCE_THRESHOLD, VARK_STYLES
from cornerstones.assessments.vark.calculations import dominant_style
from cornerstones.assessments.vark.styles import format_style_name
from cornerstones.core.logging import get_logger
from cornerstones.core.numeric import safe_div
from cornerstones.services.classes import load_owned_class
from cornerstones.services.security import RequestContext

logger = get_logger("cornerstones.services.analytics", component="service")

EXPORT_COLUMNS = (
    "student_id",
    "full_name",
    "email",
    "visual",
    "auditory",
    "reading_writing",
    "kinesthetic",
    "dominant_style",
    "assessment_completed_at",
)


@dataclass
class ClassLearningStyles:
    class_id: int
    class_name: str
    total_students: int = 0
    assessed_students: int = 0
    multimodal_students: int = 0
    dominant_counts: Dict[str, int] = field(default_factory=lambda: {s: 0 for s in VARK_STYLES})
    mean_scores: Dict[str, float] = field(default_factory=lambda: {s: 0.0 for s in VARK_STYLES})

    @property
    def assessment_rate(self) -> float:
        return round(safe_div(self.assessed_students, self.total_students) * 100, 1)


def class_learning_styles(ctx: RequestContext, class_id: int) -> ClassLearningStyles:
    """Distribution of dominant styles and the mean vector of assessed students.

    Students who never took the assessment count toward ``total_students``
    only; they do not contribute a neutral 25/25/25/25 vector.
    """
    classroom = load_owned_class(ctx, class_id)
    students = ctx.repos.profiles.list_class_students(classroom.id)
    summary = ClassLearningStyles(class_id=classroom.id, class_name=classroom.name)
    summary.total_students = len(students)

    sums = {style: 0 for style in VARK_STYLES}
    for student in students:
        if not student.has_vark_scores:
            continue
        scores = student.vark_scores()
        summary.assessed_students += 1
        summary.dominant_counts[dominant_style(scores)] += 1
        if sum(1 for _, value in scores.items() if value >= SIGNIFICANCE_THRESHOLD) > 1:
            summary.multimodal_students += 1
        for style, value in scores.items():
            sums[style] += value

    summary.mean_scores = {
        style: round(safe_div(sums[style], summary.assessed_students), 1) for style in VARK_STYLES
    }
    logger.info(
        "class_learning_styles_computed",
        extra={
            "structured_data": {
                "class_id": classroom.id,
                "total": summary.total_students,
                "assessed": summary.assessed_students,
            }
        },
    )
    return summary


def export_class_csv(ctx: RequestContext, class_id: int) -> str:
    classroom = load_owned_class(ctx, class_id)
    buffer = io.StringIO()
    writer = csv.writer(buffer)
    writer.writerow(EXPORT_COLUMNS)
    for student in ctx.repos.profiles.list_class_students(classroom.id):
        taken = student.has_vark_scores
        scores = student.vark_scores()
        dominant = format_style_name(dominant_style(scores)) if taken else ""
        completed = student.assessment_completed_at.isoformat() if student.assessment_completed_at else ""
        writer.writerow(
            [
                student.id,
                student.full_name,
                student.email,
                scores.visual,
                scores.auditory,
                scores.reading_writing,
                scores.kinesthetic,
                dominant,
                completed,
            ]
        )
    return buffer.getvalue()


def class_distribution_rows(summary: ClassLearningStyles) -> List[dict]:
    """Per-style rows suitable for a chart legend."""
    return [
        {
            "style": style,
            "name": format_style_name(style),
            "count": summary.dominant_counts[style],
            "share": round(safe_div(summary.dominant_counts[style], summary.assessed_students) * 100, 1),
            "mean": summary.mean_scores[style],
        }
        for style in VARK_STYLES
    ]
