# eventhub/normalizers/types.py
from typing import Any, Dict, Literal

RecordKind = Literal["event", "booking"]
Record = Dict[str, Any]
