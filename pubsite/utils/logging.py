from __future__ import annotations
import json, sys
from datetime import datetime, UTC
from pathlib import Path

class SiteLogger:
    """
    JSON-lines logger. Appends to <log_dir>/pubsite.log when a directory is
    given; WARN and ERROR lines always go to stderr (the operator console).
    """
    def __init__(self, log_dir: Path | None = None):
        self.log_dir = log_dir
        self.log_path = None
        if log_dir is not None:
            self.log_dir.mkdir(parents=True, exist_ok=True)
            self.log_path = self.log_dir / "pubsite.log"

    def _ts(self) -> str:
        return datetime.now(UTC).isoformat(timespec="seconds").replace("+00:00", "Z")

    def info(self, msg: str, **kv):
        line = {"ts": self._ts(), "level": "INFO", "msg": msg, **kv}
        self._write(line)

    def warn(self, msg: str, **kv):
        line = {"ts": self._ts(), "level": "WARN", "msg": msg, **kv}
        self._write(line)

    def error(self, msg: str, **kv):
        line = {"ts": self._ts(), "level": "ERROR", "msg": msg, **kv}
        self._write(line)

    def _write(self, line: dict):
        txt = json.dumps(line, ensure_ascii=False, default=str)
        if self.log_path is not None:
            with self.log_path.open("a", encoding="utf-8") as f:
                f.write(txt + "\n")
        # Console gets the lines an operator has to act on
        if line["level"] in {"ERROR", "WARN"}:
            print(txt, file=sys.stderr)
