"""
Algorithm Models
================
Descriptor and decoded-hash data models.
"""

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Callable, Dict, FrozenSet, Mapping, Optional

UNKNOWN_ALGORITHM = "unknown"


@dataclass(frozen=True)
class HashInfo:
    """
    Decoded view of a hash string.
    
    Built fresh on every decode and never cached. When the algorithm is
    unknown the tag is empty and no options are extracted.
    """
    algorithm: str
    tag: str = ""
    options: Mapping[str, int] = field(default_factory=dict)
    
    def __post_init__(self):
        object.__setattr__(self, "options", MappingProxyType(dict(self.options)))

    def __hash__(self):
        return hash((self.algorithm, self.tag, tuple(sorted(self.options.items()))))

    @property
    def is_known(self) -> bool:
        return self.algorithm != UNKNOWN_ALGORITHM
    
    def as_dict(self) -> Dict[str, Any]:
        return {
            "algorithm": self.algorithm,
            "tag": self.tag,
            "options": dict(self.options),
        }


@dataclass(frozen=True)
class AlgorithmDescriptor:
    """
    Capabilities of a registered hashing algorithm.
    
    Attributes:
        name: Algorithm name used by policy and callers (e.g. "bcrypt")
        tags: Identifiers found between the leading "$" delimiters
        hash_fn: (password, params) -> hash string
        verify_fn: (password, hash) -> bool
        extract_params_fn: (hash) -> numeric parameters embedded in the hash
        needs_rehash_fn: (info, required) -> bool; None means never stale
    """
    name: str
    tags: FrozenSet[str]
    hash_fn: Callable[[str, Mapping[str, int]], str]
    verify_fn: Callable[[str, str], bool]
    extract_params_fn: Callable[[str], Dict[str, int]]
    needs_rehash_fn: Optional[Callable[[HashInfo, Mapping[str, int]], bool]] = None
    
    def __post_init__(self):
        object.__setattr__(self, "tags", frozenset(self.tags))
