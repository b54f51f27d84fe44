"""
Argon2 Algorithm
================
Argon2 descriptor backed by `argon2-cffi`.

New hashes always use Argon2id. Argon2i and Argon2d hashes are still
recognized and verified, and are reported stale by the rehash check.
"""

from functools import lru_cache
from typing import Dict, Mapping

from argon2 import PasswordHasher, Type, extract_parameters
from argon2.exceptions import InvalidHashError, VerifyMismatchError

from ..exceptions import InvalidHashFormat
from .models import AlgorithmDescriptor, HashInfo

NAME = "argon2"
TAGS = frozenset({"argon2i", "argon2d", "argon2id"})
CANONICAL_TAG = "argon2id"

# Production settings (~300ms hashing time on typical server)
DEFAULT_PARAMS = {
    "time_cost": 3,        # Number of iterations
    "memory_cost": 65536,  # 64MB memory (64 * 1024 KB)
    "parallelism": 4,      # 4 parallel threads
    "hash_len": 32,        # 32-byte hash output
    "salt_len": 16,        # 16-byte salt
}

# Parameters that make a hash stale when below policy
COST_PARAMS = ("time_cost", "memory_cost", "parallelism")

# Type and version are read from the hash itself when verifying
_verifier = PasswordHasher()


@lru_cache(maxsize=16)
def _get_hasher(time_cost, memory_cost, parallelism, hash_len, salt_len) -> PasswordHasher:
    return PasswordHasher(
        time_cost=time_cost,
        memory_cost=memory_cost,
        parallelism=parallelism,
        hash_len=hash_len,
        salt_len=salt_len,
        type=Type.ID,
    )


def hash_argon2(password: str, params: Mapping[str, int]) -> str:
    """Hash a password with Argon2id."""
    merged = {**DEFAULT_PARAMS, **params}
    hasher = _get_hasher(*(merged[key] for key in DEFAULT_PARAMS))
    return hasher.hash(password)


def verify_argon2(password: str, hash: str) -> bool:
    try:
        return _verifier.verify(hash, password)
    except VerifyMismatchError:
        return False


def extract_argon2_params(hash: str) -> Dict[str, int]:
    """
    Read the cost parameters encoded in an Argon2 hash.
    
    Raises:
        InvalidHashFormat: If the parameter section is malformed
    """
    try:
        parameters = extract_parameters(hash)
    except InvalidHashError as e:
        raise InvalidHashFormat(f"argon2 hash parameters are malformed: {e}") from e
    
    return {
        "time_cost": parameters.time_cost,
        "memory_cost": parameters.memory_cost,
        "parallelism": parameters.parallelism,
        "hash_len": parameters.hash_len,
        "salt_len": parameters.salt_len,
        "version": parameters.version,
    }


def argon2_needs_rehash(info: HashInfo, required: Mapping[str, int]) -> bool:
    if info.tag != CANONICAL_TAG:
        return True
    
    return any(
        info.options[key] < required[key]
        for key in COST_PARAMS
        if key in required
    )


descriptor = AlgorithmDescriptor(
    name=NAME,
    tags=TAGS,
    hash_fn=hash_argon2,
    verify_fn=verify_argon2,
    extract_params_fn=extract_argon2_params,
    needs_rehash_fn=argon2_needs_rehash,
)
