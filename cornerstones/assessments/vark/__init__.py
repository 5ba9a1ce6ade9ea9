from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Any, Dict

import yaml

from cornerstones.assessments.vark.types import Questionnaire

QUESTIONNAIRE_PATH = Path(__file__).with_name("questionnaire.yaml")


def load_questionnaire(path: Path | None = None) -> Questionnaire:
    with (path or QUESTIONNAIRE_PATH).open("r", encoding="utf-8") as fh:
        raw: Dict[str, Any] = yaml.safe_load(fh)
    return Questionnaire.from_raw(raw)


@lru_cache(maxsize=1)
def get_questionnaire() -> Questionnaire:
    """Questionnaire configured for this deployment, parsed once."""
    from cornerstones.core.config import settings

    return load_questionnaire(settings.questionnaire_path)
