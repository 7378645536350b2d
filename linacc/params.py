# linacc/params.py
from dataclasses import dataclass
import numpy as np

# -----------------------------
# CLI Colors
# -----------------------------
class bcolors:
    HEADER = '\033[95m'
    OKBLUE = '\033[94m'
    OKCYAN = '\033[96m'
    OKGREEN = '\033[92m'
    GREY = '\033[90m'
    WARNING = '\033[93m'
    FAIL = '\033[91m'
    ENDC = '\033[0m'
    BOLD = '\033[1m'
    UNDERLINE = '\033[4m'

Q = 65521  # largest prime below 2^16
MAX_MODULUS = 65521
DTYPE = np.uint16

MAX_ROWS = 64
PACKED_WORDS = 4
LANES_PER_WORD = 16
LANE_BITS = 16
LANE_MASK = (1 << LANE_BITS) - 1
WORD_BITS = 256
WORD_BYTES = WORD_BITS // 8

DEFAULT_HASH = "keccak256"

@dataclass
class LinaccParams:
    num_rows: int = MAX_ROWS  # matrix dimension N, also active output lanes
    q: int = Q
    hash_name: str = DEFAULT_HASH
