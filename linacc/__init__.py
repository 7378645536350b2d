# linacc/__init__.py
from .params import Q, DTYPE, MAX_ROWS, PACKED_WORDS, LinaccParams
from .validation import ParameterError, DimensionError, ModulusError, SeedError
from .hashing import digest, u256, seed_from_text
from .matrix import derive_row
from .packing import pack, unpack, xor_all
from .accumulator import accumulate, accumulate_vector, update, update_many
from .diagnostics import matrix_rank
from .serialization import packed_to_payload, payload_to_packed, write_packed_json, read_packed_json
