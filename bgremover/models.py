from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, Optional


@dataclass
class TempFile:
    filename: str
    path: Path
    size_bytes: int
    original_filename: Optional[str] = None
    content_type: Optional[str] = None
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    def to_dict(self) -> Dict[str, Any]:
        return {
            "filename": self.filename,
            "path": str(self.path),
            "size_bytes": self.size_bytes,
            "original_filename": self.original_filename,
            "content_type": self.content_type,
            "created_at": self.created_at.isoformat(),
        }
