# linacc/matrix.py
import numpy as np
from .params import DTYPE, LANES_PER_WORD, WORD_BYTES, DEFAULT_HASH, bcolors
from .hashing import digest_unchecked, u256

# -----------------------------
# Matrix Row Derivation
# -----------------------------
def row_seed(seed: bytes, step_index: int, row: int, hash_name: str = DEFAULT_HASH) -> bytes:
    return digest_unchecked(seed + u256(step_index) + u256(row), hash_name)

def digest_lanes(d: bytes) -> np.ndarray:
    """Split a 32-byte digest into 16 lanes, lane k = (int(d) >> 16k) & 0xFFFF.

    The digest is read as a big-endian 256-bit integer, so lane 0 is the
    last two bytes and lane 15 the first two.
    """
    if len(d) != WORD_BYTES:
        raise ValueError(f"{bcolors.FAIL}Digest length mismatch: expected {WORD_BYTES}, got {len(d)}{bcolors.ENDC}")
    return np.frombuffer(d, dtype='>u2')[::-1].astype(DTYPE)

def derive_row(seed: bytes, step_index: int, row: int, n: int, q: int, hash_name: str = DEFAULT_HASH) -> np.ndarray:
    """Derive row ``row`` of the matrix selected by (seed, step_index).

    Returns ``n`` coefficients in [0, q) as uint16. Inputs are assumed
    validated by the caller; nothing here is cached between calls.
    """
    rs = row_seed(seed, step_index, row, hash_name)
    blocks = -(-n // LANES_PER_WORD)
    lanes = np.concatenate([digest_lanes(digest_unchecked(rs + u256(b), hash_name)) for b in range(blocks)])
    return (lanes[:n].astype(np.int64) % q).astype(DTYPE)
