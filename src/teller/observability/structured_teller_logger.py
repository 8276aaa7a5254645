import json
import logging
from datetime import datetime, timezone
from typing import Any, Dict, Optional


class StructuredTellerLogger:
    """
    Writes one JSON object per teller event (deposit, withdrawal, rejection)
    to the "teller" logger. Integer denomination keys become strings in the output.
    Passing enabled=False silences it without rewiring logging.
    """

    def __init__(self, logger: Optional[logging.Logger] = None, enabled: bool = True):
        self._logger = logger or logging.getLogger("teller")
        self.enabled = enabled

    def emit(self, event_type: str, **fields: Any) -> None:
        if not self.enabled:
            return
        payload: Dict[str, Any] = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "event_type": event_type,
        }
        payload.update(fields)
        self._logger.info(json.dumps(payload, default=str, ensure_ascii=True))
