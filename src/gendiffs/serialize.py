"""Run report serialization for gendiffs."""

import json
import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from .config import GenDiffsConfig
from .planner import DiffTask

logger = logging.getLogger(__name__)


@dataclass
class RunReport:
    """Outcome of one generation run."""

    candidates_count: int = 0
    generated: List[DiffTask] = field(default_factory=list)
    committed: bool = False

    @property
    def pending_count(self) -> int:
        """Candidates left for later runs."""
        return self.candidates_count - len(self.generated)


class ReportSerializer:
    """Builds JSON envelopes with stable ordering."""

    def __init__(self, config: Optional[GenDiffsConfig] = None):
        """Initialize with configuration, if one could be built."""
        self.config = config

    def serialize_report(self, report: RunReport) -> Dict[str, Any]:
        """Serialize a run report to a dictionary."""
        logger.debug(
            "Serializing report",
            extra={
                "generated": len(report.generated),
                "candidates": report.candidates_count,
            },
        )
        payload: Dict[str, Any] = {
            "candidates_count": report.candidates_count,
            "pending_count": report.pending_count,
            "committed": report.committed,
            "generated": [self._serialize_task(task) for task in report.generated],
        }
        if self.config is not None:
            payload["provenance"] = self.config.to_provenance_dict()
        return payload

    def _serialize_task(self, task: DiffTask) -> Dict[str, Any]:
        return {
            "from": task.from_tag,
            "to": task.to_tag,
            "file": task.name,
        }

    def to_json_string(self, payload: Dict[str, Any]) -> str:
        """Convert payload to pretty-printed JSON string."""
        return json.dumps(payload, ensure_ascii=False, sort_keys=True, indent=2)

    def create_success_envelope(self, payload: Dict[str, Any]) -> Dict[str, Any]:
        """Create success envelope around payload."""
        return {"ok": True, "data": payload}

    def create_error_envelope(
        self, error_code: str, error_message: str, details: Dict[str, Any] = None
    ) -> Dict[str, Any]:
        """Create error envelope."""
        logger.debug("Creating error envelope", extra={"code": error_code})
        error_data = {
            "code": error_code,
            "message": error_message,
        }
        if details:
            error_data["details"] = details

        return {"ok": False, "error": error_data}
