# linacc/validation.py
import numbers
from .params import MAX_ROWS, MAX_MODULUS, WORD_BYTES, bcolors

# -----------------------------
# Parameter Errors
# -----------------------------
class ParameterError(ValueError):
    """Invalid parameter supplied to a public entry point."""

class DimensionError(ParameterError):
    """num_rows outside [1, 64]."""

class ModulusError(ParameterError):
    """q outside [2, 65521]."""

class SeedError(ParameterError):
    """Seed is not a 32-byte value."""

def validate_dimension(num_rows: int) -> int:
    if isinstance(num_rows, bool) or not isinstance(num_rows, int):
        raise DimensionError(f"{bcolors.FAIL}num_rows must be an integer, got {type(num_rows).__name__}{bcolors.ENDC}")
    if not 1 <= num_rows <= MAX_ROWS:
        raise DimensionError(f"{bcolors.FAIL}num_rows must be in [1, {MAX_ROWS}], got {num_rows}{bcolors.ENDC}")
    return num_rows

def validate_modulus(q: int) -> int:
    if isinstance(q, bool) or not isinstance(q, int):
        raise ModulusError(f"{bcolors.FAIL}q must be an integer, got {type(q).__name__}{bcolors.ENDC}")
    if not 2 <= q <= MAX_MODULUS:
        raise ModulusError(f"{bcolors.FAIL}q must be in [2, {MAX_MODULUS}], got {q}{bcolors.ENDC}")
    return q

def validate_seed(seed) -> bytes:
    if not isinstance(seed, (bytes, bytearray, memoryview)):
        raise SeedError(f"{bcolors.FAIL}seed must be bytes, got {type(seed).__name__}{bcolors.ENDC}")
    seed = bytes(seed)
    if len(seed) != WORD_BYTES:
        raise SeedError(f"{bcolors.FAIL}seed must be exactly {WORD_BYTES} bytes, got {len(seed)}{bcolors.ENDC}")
    return seed

def validate_params(num_rows: int, q: int, seed) -> bytes:
    """Run every entry-point check in order: dimension, modulus, seed.

    Returns the seed normalized to ``bytes``.
    """
    validate_dimension(num_rows)
    validate_modulus(q)
    return validate_seed(seed)

def validate_step_index(step_index: int) -> int:
    if isinstance(step_index, bool) or not isinstance(step_index, int):
        raise ParameterError(f"{bcolors.FAIL}step_index must be an integer, got {type(step_index).__name__}{bcolors.ENDC}")
    if step_index < 0 or step_index.bit_length() > 8 * WORD_BYTES:
        raise ParameterError(f"{bcolors.FAIL}step_index must be an unsigned {8 * WORD_BYTES}-bit integer, got {step_index}{bcolors.ENDC}")
    return step_index

def validate_input(value: int) -> int:
    if isinstance(value, bool) or not isinstance(value, numbers.Integral):
        raise ParameterError(f"{bcolors.FAIL}input must be an integer, got {type(value).__name__}{bcolors.ENDC}")
    if value < 0:
        raise ParameterError(f"{bcolors.FAIL}input must be an unsigned integer, got {value}{bcolors.ENDC}")
    return int(value)
