from __future__ import annotations

import json
import aiofiles
from pathlib import Path
from ...domain.ports.error_monitor_port import ErrorMonitorPort
from ...domain.entities.error_log import ErrorLog
from ...shared.fs__shared_util import ensure_directory


class JsonErrorMonitorAdapter(ErrorMonitorPort):
    """Appends errors to a JSON array on disk; the file is created on first error."""

    def __init__(self, log_path: str | Path):
        self.path = Path(log_path)

    def _ensure_store(self) -> None:
        ensure_directory(self.path.parent)
        if not self.path.exists():
            with open(self.path, "w", encoding="utf-8") as f:
                json.dump([], f)

    async def log_error(self, error: ErrorLog) -> None:
        try:
            self._ensure_store()
            data = error.model_dump(mode="json")
            async with aiofiles.open(self.path, "r", encoding="utf-8") as f:
                content = await f.read()
                logs = json.loads(content) if content else []
            logs.append(data)
            async with aiofiles.open(self.path, "w", encoding="utf-8") as f:
                await f.write(json.dumps(logs, indent=2))
        except (OSError, ValueError) as e:
            print(f"Fallback Log Error: {e}")
