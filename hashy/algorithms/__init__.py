"""
Hashy - Algorithms
==================
Registry of hashing algorithms and their descriptors.

Adding an algorithm means building an AlgorithmDescriptor and registering
it. Hashing, verification and rehash checks dispatch through the registry
and never name an algorithm themselves.

Usage:
    from hashy.algorithms import AlgorithmDescriptor, register
    
    register(AlgorithmDescriptor(
        name="scrypt",
        tags={"scrypt"},
        hash_fn=hash_scrypt,
        verify_fn=verify_scrypt,
        extract_params_fn=extract_scrypt_params,
    ))
"""

from .models import AlgorithmDescriptor, HashInfo, UNKNOWN_ALGORITHM

from .registry import (
    register,
    resolve_by_tag,
    resolve_by_name,
    get_registered_algorithms,
    reset_registry,
)


def register_builtin_algorithms():
    """Register bcrypt and argon2."""
    from . import argon2, bcrypt
    
    register(bcrypt.descriptor)
    register(argon2.descriptor)


register_builtin_algorithms()

__all__ = [
    # Models
    "AlgorithmDescriptor",
    "HashInfo",
    "UNKNOWN_ALGORITHM",
    # Registry
    "register",
    "resolve_by_tag",
    "resolve_by_name",
    "get_registered_algorithms",
    "reset_registry",
    "register_builtin_algorithms",
]
