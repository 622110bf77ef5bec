from __future__ import annotations
import json
import logging
import os
import sys
import time
import uuid
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict

from adminboard.utils.config import get_settings

logger = logging.getLogger(__name__)


def gen_correlation_id() -> str:
    return uuid.uuid4().hex


def log_event(correlation_id: str, event: str, payload: Dict[str, Any]) -> None:
    record = {
        "ts": time.time(),
        "cid": correlation_id,
        "event": event,
        **payload,
    }
    line = json.dumps(record, default=str) + "\n"
    sys.stdout.write(line)
    sys.stdout.flush()

    # Daily file next to stdout; a broken audit dir must not fail the request
    settings = get_settings()
    log_dir = settings.get("AUDIT_LOG_DIR") or os.path.join("logs", "audit")
    try:
        Path(log_dir).mkdir(parents=True, exist_ok=True)
        fname = datetime.now(timezone.utc).strftime("%Y-%m-%d") + ".jsonl"
        with open(os.path.join(log_dir, fname), "a", encoding="utf-8") as f:
            f.write(line)
    except OSError as e:
        logger.warning("Could not write audit event %s to %s: %s", event, log_dir, e)
