import json
import sys
from datetime import datetime, timezone


def log_event(event_type: str, **fields) -> None:
    payload = {
        "event_type": event_type,
        "ts": datetime.now(timezone.utc).isoformat(),
        **fields,
    }
    sys.stderr.write(json.dumps(payload) + "\n")
    sys.stderr.flush()
