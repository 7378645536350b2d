# linacc/packing.py
from functools import reduce
import numpy as np
from .params import DTYPE, MAX_ROWS, PACKED_WORDS, LANES_PER_WORD, LANE_BITS, LANE_MASK, WORD_BITS, bcolors
from .validation import ParameterError, DimensionError

# -----------------------------
# Output Packing
# -----------------------------
def lane_position(r: int) -> tuple:
    """Return (word index, bit offset) of output element ``r``."""
    return r // LANES_PER_WORD, (r % LANES_PER_WORD) * LANE_BITS

def pack(y) -> list:
    """Pack up to 64 elements into 4 words of 16 lanes each.

    Each element is masked to 16 bits; lanes past ``len(y)`` stay zero.
    """
    if len(y) > MAX_ROWS:
        raise DimensionError(f"{bcolors.FAIL}Cannot pack {len(y)} elements, capacity is {MAX_ROWS}{bcolors.ENDC}")
    words = [0] * PACKED_WORDS
    for r, v in enumerate(y):
        w, off = lane_position(r)
        words[w] |= (int(v) & LANE_MASK) << off
    return words

def check_packed(words) -> list:
    words = [int(w) for w in words]
    if len(words) != PACKED_WORDS:
        raise ParameterError(f"{bcolors.FAIL}Packed vector must have {PACKED_WORDS} words, got {len(words)}{bcolors.ENDC}")
    for w in words:
        if w < 0 or w.bit_length() > WORD_BITS:
            raise ParameterError(f"{bcolors.FAIL}Packed word out of range: {w:#x}{bcolors.ENDC}")
    return words

def unpack(words, n: int = MAX_ROWS) -> np.ndarray:
    """Inverse of :func:`pack` for the first ``n`` lanes."""
    words = check_packed(words)
    if not 0 <= n <= MAX_ROWS:
        raise DimensionError(f"{bcolors.FAIL}n must be in [0, {MAX_ROWS}], got {n}{bcolors.ENDC}")
    out = np.zeros(n, dtype=DTYPE)
    for r in range(n):
        w, off = lane_position(r)
        out[r] = (words[w] >> off) & LANE_MASK
    return out

# -----------------------------
# Xor Combine
# -----------------------------
def xor_all(output) -> int:
    """Fold a packed vector to one word: word0 ^ word1 ^ word2 ^ word3."""
    return reduce(lambda a, b: a ^ b, (int(w) for w in output), 0)
