# linacc/hashing.py
from Crypto.Hash import keccak
from cryptography.hazmat.primitives import hashes
from .params import WORD_BYTES, DEFAULT_HASH, bcolors
from .validation import ParameterError

# -----------------------------
# Digest Backends
# -----------------------------
def _keccak256(data: bytes) -> bytes:
    # EVM keccak256 (original Keccak padding, not FIPS SHA3-256)
    k = keccak.new(digest_bits=256)
    k.update(data)
    return k.digest()

def _cryptography_digest(algorithm):
    def _digest(data: bytes) -> bytes:
        h = hashes.Hash(algorithm())
        h.update(data)
        return h.finalize()
    return _digest

HASHES = {
    "keccak256": _keccak256,
    "sha256": _cryptography_digest(hashes.SHA256),
    "sha3_256": _cryptography_digest(hashes.SHA3_256),
}

def digest(data: bytes, hash_name: str = DEFAULT_HASH) -> bytes:
    """Hash ``data`` to a 32-byte digest with the named backend."""
    return HASHES[check_hash_name(hash_name)](data)

def digest_unchecked(data: bytes, hash_name: str) -> bytes:
    # name already checked at the public entry point
    return HASHES[hash_name](data)

def check_hash_name(hash_name: str) -> str:
    if hash_name not in HASHES:
        raise ParameterError(f"{bcolors.FAIL}Unknown hash {hash_name!r}, expected one of {sorted(HASHES)}{bcolors.ENDC}")
    return hash_name

# -----------------------------
# Fixed-width Encoding
# -----------------------------
def int_to_bytes_be_fixed(n: int, k: int) -> bytes:
    """Big-endian, left-padded with zeros to exactly k bytes."""
    if n < 0:
        raise ValueError("Integer must be non-negative")
    if n.bit_length() > 8 * k:
        raise ValueError("Integer too large for target length")
    return n.to_bytes(k, "big")

def u256(n: int) -> bytes:
    return int_to_bytes_be_fixed(n, WORD_BYTES)

def seed_from_text(text: str, hash_name: str = DEFAULT_HASH) -> bytes:
    """Derive a 32-byte seed as H(utf8(text)), e.g. H("test-seed")."""
    return digest(text.encode("utf-8"), hash_name)
