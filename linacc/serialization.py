# linacc/serialization.py
import json
from .params import LinaccParams
from .packing import check_packed

# -----------------------------
# Packed Vector Helpers
# -----------------------------
def parse_int(s) -> int:
    """Parse decimal or 0x-prefixed hex."""
    if isinstance(s, int):
        return s
    return int(str(s).strip().replace("_", ""), 0)

def parse_words(s: str) -> list:
    return check_packed([parse_int(w) for w in s.replace(",", " ").split()])

def words_to_hex(words) -> list:
    return [f"0x{w:064x}" for w in check_packed(words)]

# -----------------------------
# Serialization Helpers
# -----------------------------
def packed_to_payload(words, params: LinaccParams, step_index: int = None) -> dict:
    payload = {
        "linacc_metadata": {
            "num_rows": params.num_rows,
            "q": params.q,
            "hash": params.hash_name,
        },
        "words": words_to_hex(words),
    }
    if step_index is not None:
        payload["linacc_metadata"]["step_index"] = step_index
    return payload

def payload_to_packed(payload: dict):
    if "words" not in payload:
        raise ValueError("Payload has no 'words' entry")
    words = check_packed([parse_int(w) for w in payload["words"]])
    metadata = payload.get("linacc_metadata", {})
    return words, metadata

def write_packed_json(path: str, words, params: LinaccParams, step_index: int = None):
    with open(path, "w") as f:
        json.dump(packed_to_payload(words, params, step_index), f, indent=2)

def read_packed_json(path: str):
    with open(path, "r") as f:
        payload = json.load(f)
    return payload_to_packed(payload)
