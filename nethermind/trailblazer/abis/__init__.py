import json
from pathlib import Path
from typing import Any

from nethermind.trailblazer.exceptions import DecodingError

ABI_DIR = Path(__file__).parent


def load_abi(abi_name: str) -> list[dict[str, Any]]:
    """
    Loads a bundled contract ABI by name.  ABIs are stored as json files in the abis directory

    :param abi_name: file name of the ABI without the .json extension, ie "izumi_pool"
    :return: ABI as a list of dictionaries
    """
    abi_path = ABI_DIR.joinpath(f"{abi_name}.json")
    if not abi_path.exists():
        raise DecodingError(f"ABI {abi_name} is not bundled with trailblazer")

    with open(abi_path, "r", encoding="utf-8") as json_file:
        return json.load(json_file)


def get_event_abi(abi_name: str, event_name: str) -> dict[str, Any]:
    """Returns the ABI entry for a single event"""
    for entry in load_abi(abi_name):
        if entry.get("type") == "event" and entry.get("name") == event_name:
            return entry

    raise DecodingError(f"Event {event_name} not present in ABI {abi_name}")
