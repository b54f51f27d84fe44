"""
Hashy
=====
Password hashing policy: picks the algorithm and parameters, tags hashes
so they describe themselves, verifies passwords and flags stale hashes.

bcrypt and Argon2 do the actual hashing. Each runs off the event loop in
a thread pool.

Usage:
    import hashy
    
    hashy.options.defaults["bcrypt"]["cost"] = 12
    
    hash = await hashy.hash("secret")
    if await hashy.verify("secret", hash):
        if hashy.needs_rehash(hash):
            hash = await hashy.hash("secret")
    
    hashy.get_info(hash).options  # {'cost': 12}
"""

__version__ = "0.6.0"

# Exceptions
from hashy.exceptions import (
    HashyError,
    InvalidHashFormat,
    UnsupportedAlgorithm,
    PrimitiveFailure,
    AlgorithmRegistrationError,
)

# Algorithms
from hashy.algorithms import (
    AlgorithmDescriptor,
    HashInfo,
    UNKNOWN_ALGORITHM,
    register,
    resolve_by_tag,
    resolve_by_name,
    get_registered_algorithms,
)

# Policy
from hashy.policy import (
    PolicyConfig,
    options,
    configure,
    get_default_algorithm,
    get_defaults,
)

# Inspection
from hashy.rehash import get_info, needs_rehash

# Sync Operations
from hashy.sync_ops import (
    hash_password_sync,
    verify_password_sync,
    verify_and_upgrade_sync,
)

# Async Operations
from hashy.async_ops import hash_password, verify_password, verify_and_upgrade

# Callbacks
from hashy.callbacks import hash_with_callback, verify_with_callback

hash = hash_password
verify = verify_password

__all__ = [
    # Exceptions
    "HashyError",
    "InvalidHashFormat",
    "UnsupportedAlgorithm",
    "PrimitiveFailure",
    "AlgorithmRegistrationError",
    # Algorithms
    "AlgorithmDescriptor",
    "HashInfo",
    "UNKNOWN_ALGORITHM",
    "register",
    "resolve_by_tag",
    "resolve_by_name",
    "get_registered_algorithms",
    # Policy
    "PolicyConfig",
    "options",
    "configure",
    "get_default_algorithm",
    "get_defaults",
    # Inspection
    "get_info",
    "needs_rehash",
    # Sync Operations
    "hash_password_sync",
    "verify_password_sync",
    "verify_and_upgrade_sync",
    # Async Operations
    "hash",
    "verify",
    "hash_password",
    "verify_password",
    "verify_and_upgrade",
    # Callbacks
    "hash_with_callback",
    "verify_with_callback",
]
