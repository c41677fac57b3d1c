from collections.abc import Mapping, Sequence
from typing import Any, Optional

_DATA_KEY = "data"
_STATUS_KEY = "status"


def extract_status(payload: Any) -> Optional[str]:
    if not isinstance(payload, Mapping):
        return None
    entries = payload.get(_DATA_KEY)
    if isinstance(entries, (str, bytes)) or not isinstance(entries, Sequence):
        return None
    if not entries:
        return None
    first = entries[0]
    if not isinstance(first, Mapping):
        return None
    status = first.get(_STATUS_KEY)
    if not isinstance(status, str) or not status:
        return None
    return status
