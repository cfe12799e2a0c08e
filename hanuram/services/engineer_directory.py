"""
Engineer listing cards

Loaded once from a bundled JSON file and served from memory for the lifetime
of the process.
"""
import json
import logging
from pathlib import Path
from typing import List, Optional, Union

from pydantic import ValidationError

from hanuram.schemas.engineer import EngineerSummary

logger = logging.getLogger(__name__)

DEFAULT_DATA_PATH = Path(__file__).resolve().parents[1] / "data" / "engineers.json"


def load_engineer_summaries(path: Optional[Union[str, Path]] = None) -> List[EngineerSummary]:
    """Read the summaries file; a missing or malformed file yields an empty list"""
    data_path = Path(path) if path else DEFAULT_DATA_PATH
    try:
        raw = json.loads(data_path.read_text(encoding="utf-8"))
        summaries = [EngineerSummary.model_validate(item) for item in raw]
    except (OSError, json.JSONDecodeError, ValidationError, TypeError) as exc:
        logger.error("Error loading engineer summaries from %s: %s", data_path, exc)
        return []

    logger.info("Loaded %d engineer summaries", len(summaries))
    return summaries


class EngineerDirectory:
    def __init__(self, summaries: List[EngineerSummary]):
        self._summaries = tuple(summaries)

    @classmethod
    def from_file(cls, path: Optional[Union[str, Path]] = None) -> "EngineerDirectory":
        return cls(load_engineer_summaries(path))

    def list_summaries(self) -> List[EngineerSummary]:
        return list(self._summaries)
