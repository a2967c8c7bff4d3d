from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Dict, Optional

SUCCESS_MESSAGE = "Processing completed successfully"


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


@dataclass
class ProcessResult:
    """Outcome of one engine execution."""

    success: bool
    message: str
    timestamp: datetime = field(default_factory=utc_now)
    data: Optional[Any] = None

    @classmethod
    def ok(cls, data: Any) -> "ProcessResult":
        return cls(success=True, message=SUCCESS_MESSAGE, data=data)

    @classmethod
    def failed(cls, message: str) -> "ProcessResult":
        return cls(success=False, message=message)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        result = {
            "success": self.success,
            "message": self.message,
            "timestamp": self.timestamp.isoformat(),
        }
        if self.data is not None:
            result["data"] = self.data
        return result
