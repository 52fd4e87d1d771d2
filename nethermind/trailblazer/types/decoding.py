from dataclasses import dataclass
from typing import Any


@dataclass
class DecodedEvent:
    """Event Decoding Result"""

    abi_name: str
    name: str
    event_signature: str

    data: dict[str, Any]
