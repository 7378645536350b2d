# linacc/accumulator.py
import numpy as np
from .params import Q, DTYPE, DEFAULT_HASH
from .hashing import check_hash_name
from .matrix import derive_row
from .packing import pack, check_packed, xor_all
from .validation import validate_params, validate_step_index, validate_input

# -----------------------------
# Linear Accumulator
# -----------------------------
# y = A.x mod q, where A (num_rows x num_rows) is derived row by row from
# (seed, step_index) and never stored. A is assumed full rank over Z_q;
# this is not checked (see diagnostics.matrix_rank).

def input_mask(input_bits: int, n: int) -> np.ndarray:
    """Boolean column selector from the low ``n`` bits of ``input_bits``."""
    return np.array([(input_bits >> c) & 1 for c in range(n)], dtype=bool)

def mod_sum(coeffs: np.ndarray, q: int) -> int:
    # every term is < q and the running sum stays < q, so one subtraction suffices
    s = 0
    for a in coeffs:
        s += int(a)
        if s >= q:
            s -= q
    return s

def _accumulate(input_bits: int, step_index: int, num_rows: int, seed: bytes, q: int, hash_name: str) -> np.ndarray:
    mask = input_mask(input_bits, num_rows)
    y = np.zeros(num_rows, dtype=DTYPE)
    if not mask.any():
        return y
    for r in range(num_rows):
        row = derive_row(seed, step_index, r, num_rows, q, hash_name)
        y[r] = mod_sum(row[mask], q)
    return y

def _check(step_index: int, num_rows: int, seed, q: int, hash_name: str) -> bytes:
    seed = validate_params(num_rows, q, seed)
    validate_step_index(step_index)
    check_hash_name(hash_name)
    return seed

def accumulate_vector(input_bits: int, step_index: int, num_rows: int, seed: bytes, q: int = Q, hash_name: str = DEFAULT_HASH) -> np.ndarray:
    """Compute the unpacked output vector y = A.x mod q (``num_rows`` uint16 values)."""
    seed = _check(step_index, num_rows, seed, q, hash_name)
    return _accumulate(validate_input(input_bits), step_index, num_rows, seed, q, hash_name)

def accumulate(input_bits: int, step_index: int, num_rows: int, seed: bytes, q: int = Q, hash_name: str = DEFAULT_HASH) -> list:
    """Compute y = A.x mod q and return it packed into 4 words.

    ``input_bits`` must be a non-negative integer; only its low ``num_rows``
    bits are read. Raises DimensionError / ModulusError before any row is
    derived.
    """
    return pack(accumulate_vector(input_bits, step_index, num_rows, seed, q, hash_name))

# -----------------------------
# Accumulator Updates
# -----------------------------
def update(acc, new_input: int, step_index: int, num_rows: int, seed: bytes, q: int = Q, hash_name: str = DEFAULT_HASH) -> list:
    """Fold ``new_input`` into a prior packed output.

    Equivalent to ``accumulate(xor_all(acc) ^ new_input, step_index, ...)``.
    """
    seed = _check(step_index, num_rows, seed, q, hash_name)
    combined = xor_all(check_packed(acc)) ^ validate_input(new_input)
    return pack(_accumulate(combined, step_index, num_rows, seed, q, hash_name))

def update_many(inputs, start_step: int, num_rows: int, seed: bytes, q: int = Q, acc=None, hash_name: str = DEFAULT_HASH) -> list:
    """Fold a sequence of inputs, the i-th at step ``start_step + i``.

    Starts from ``acc`` or, when omitted, the all-zero container, so the
    first step matches ``accumulate(inputs[0], start_step, ...)``.
    """
    seed = _check(start_step, num_rows, seed, q, hash_name)
    inputs = [validate_input(x) for x in inputs]
    validate_step_index(start_step + max(len(inputs) - 1, 0))
    acc = check_packed(acc) if acc is not None else pack([])
    for i, x in enumerate(inputs):
        acc = pack(_accumulate(xor_all(acc) ^ x, start_step + i, num_rows, seed, q, hash_name))
    return acc
