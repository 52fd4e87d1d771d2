import json
from dataclasses import asdict
from typing import Any


class HexEnabledJsonEncoder(json.JSONEncoder):
    """JSON Encoder that converts bytes to 0x-prefixed hex"""

    def default(self, o):
        if isinstance(o, bytes):
            return "0x" + o.hex()
        return json.JSONEncoder.default(self, o)


def record_to_dict(record) -> dict[str, Any]:
    """Converts a record dataclass to a dictionary, converting nested dataclasses as well"""
    return asdict(record)


def records_to_json(records: list, indent: int | None = 4) -> str:
    """Converts a list of record dataclasses to a json array"""
    return json.dumps([record_to_dict(r) for r in records], cls=HexEnabledJsonEncoder, indent=indent)
