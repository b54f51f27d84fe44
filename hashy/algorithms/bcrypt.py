"""
bcrypt Algorithm
================
bcrypt descriptor backed by the pyca `bcrypt` package.

Hash format: $<tag>$<cost>$<22-char salt><31-char digest>

The library emits the "2b" tag. "2b" and "2y" are the same algorithm, so
produced hashes are re-tagged "2y", the canonical tag the rehash check
expects.
"""

import re
from typing import Dict, Mapping

import bcrypt

from ..exceptions import InvalidHashFormat
from .models import AlgorithmDescriptor, HashInfo

NAME = "bcrypt"
TAGS = frozenset({"2", "2a", "2b", "2x", "2y"})
CANONICAL_TAG = "2y"
DEFAULT_COST = 10

_COST_RE = re.compile(r"^\$[^$]+\$([0-9]+)\$")
_TAG_PREFIX_RE = re.compile(r"^\$2[abxy]?\$")


def hash_bcrypt(password: str, params: Mapping[str, int]) -> str:
    """Hash a password with the cost from params."""
    salt = bcrypt.gensalt(rounds=params.get("cost", DEFAULT_COST))
    hashed = bcrypt.hashpw(password.encode("utf-8"), salt).decode("ascii")
    return _TAG_PREFIX_RE.sub(f"${CANONICAL_TAG}$", hashed, count=1)


def verify_bcrypt(password: str, hash: str) -> bool:
    """Constant-time check of a password against a bcrypt hash."""
    return bcrypt.checkpw(password.encode("utf-8"), hash.encode("utf-8"))


def extract_bcrypt_params(hash: str) -> Dict[str, int]:
    """
    Read the cost factor embedded after the tag.
    
    Raises:
        InvalidHashFormat: If the cost field is missing or not numeric
    """
    match = _COST_RE.match(hash)
    if not match:
        raise InvalidHashFormat("bcrypt hash has no cost field")
    return {"cost": int(match.group(1))}


def bcrypt_needs_rehash(info: HashInfo, required: Mapping[str, int]) -> bool:
    if info.tag != CANONICAL_TAG:
        return True
    
    required_cost = required.get("cost")
    return required_cost is not None and info.options["cost"] < required_cost


descriptor = AlgorithmDescriptor(
    name=NAME,
    tags=TAGS,
    hash_fn=hash_bcrypt,
    verify_fn=verify_bcrypt,
    extract_params_fn=extract_bcrypt_params,
    needs_rehash_fn=bcrypt_needs_rehash,
)
