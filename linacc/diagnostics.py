# linacc/diagnostics.py
from .params import DEFAULT_HASH, bcolors
from .hashing import check_hash_name
from .matrix import derive_row
from .validation import ModulusError, validate_params, validate_step_index

# -----------------------------
# Rank Diagnostic (inspection only)
# -----------------------------
def is_prime(n: int) -> bool:
    """Trial division, fine for moduli up to 2^16."""
    if n < 2:
        return False
    d = 2
    while d * d <= n:
        if n % d == 0:
            return False
        d += 1
    return True

def rank_mod_p(rows, p: int) -> int:
    """Rank of an integer matrix over GF(p) by Gaussian elimination."""
    m = [[int(v) % p for v in row] for row in rows]
    if not m:
        return 0
    n_cols = len(m[0])
    rank = 0
    for col in range(n_cols):
        pivot = next((i for i in range(rank, len(m)) if m[i][col]), None)
        if pivot is None:
            continue
        m[rank], m[pivot] = m[pivot], m[rank]
        inv = pow(m[rank][col], -1, p)
        m[rank] = [(v * inv) % p for v in m[rank]]
        for i in range(len(m)):
            if i != rank and m[i][col]:
                f = m[i][col]
                m[i] = [(a - f * b) % p for a, b in zip(m[i], m[rank])]
        rank += 1
        if rank == len(m):
            break
    return rank

def matrix_rank(seed: bytes, step_index: int, n: int, q: int, hash_name: str = DEFAULT_HASH) -> int:
    """Materialize A for (seed, step_index) and return its rank over GF(q).

    Only meaningful for prime q. Accumulation never calls this.
    """
    seed = validate_params(n, q, seed)
    validate_step_index(step_index)
    check_hash_name(hash_name)
    if not is_prime(q):
        raise ModulusError(f"{bcolors.FAIL}Rank over GF(q) needs a prime q, got {q}{bcolors.ENDC}")
    rows = [derive_row(seed, step_index, r, n, q, hash_name) for r in range(n)]
    return rank_mod_p(rows, q)
