"""
Hashing and Verification
========================
Synchronous hashing and verification engines.

These block on the underlying primitive. The async wrappers in
``hashy.async_ops`` run them in a thread pool.
"""

from typing import Callable, Mapping, Optional, Tuple, TypeVar
import structlog

from .algorithms import AlgorithmDescriptor, resolve_by_name
from .codec import decode
from .exceptions import HashyError, PrimitiveFailure, UnsupportedAlgorithm
from .policy import get_default_algorithm, get_defaults
from .rehash import needs_rehash

logger = structlog.get_logger(__name__)

T = TypeVar("T")


def _call_primitive(
    descriptor: AlgorithmDescriptor,
    func: Callable[..., T],
    *args,
) -> T:
    """Call a descriptor primitive, tagging foreign errors as PrimitiveFailure."""
    try:
        return func(*args)
    except HashyError:
        raise
    except Exception as e:
        logger.warning(
            "primitive_failed",
            algorithm=descriptor.name,
            primitive=getattr(func, "__name__", repr(func)),
            error_type=type(e).__name__,
        )
        raise PrimitiveFailure(descriptor.name, e) from e


def hash_password_sync(
    password: str,
    algorithm: Optional[str] = None,
    options: Optional[Mapping[str, int]] = None,
) -> str:
    """
    Hash a password.
    
    Policy defaults for the algorithm are merged over ``options``: a key
    set in both takes the policy value, so a call cannot weaken policy.
    
    Args:
        password: Plain text password, hashed byte-for-byte as given
        algorithm: Algorithm name (default: policy default algorithm)
        options: Per-call parameters (e.g. {"cost": 12})
        
    Returns:
        Self-describing hash string
        
    Raises:
        UnsupportedAlgorithm: If the algorithm is not registered
        PrimitiveFailure: If the primitive rejects the input
    """
    name = algorithm or get_default_algorithm()
    descriptor = resolve_by_name(name)
    
    params = dict(options or {})
    params.update(get_defaults(name))
    
    return _call_primitive(descriptor, descriptor.hash_fn, password, params)


def verify_password_sync(password: str, hash: str) -> bool:
    """
    Verify a password against a hash.
    
    Returns:
        True if the password matches, False otherwise
        
    Raises:
        InvalidHashFormat: If the hash cannot be decoded
        UnsupportedAlgorithm: If the hash tag is not recognized
        PrimitiveFailure: If the primitive rejects the input
    """
    info = decode(hash)
    if not info.is_known:
        raise UnsupportedAlgorithm(info.algorithm)
    
    descriptor = resolve_by_name(info.algorithm)
    return bool(_call_primitive(descriptor, descriptor.verify_fn, password, hash))


def verify_and_upgrade_sync(password: str, hash: str) -> Tuple[bool, Optional[str]]:
    """
    Verify a password and rehash it if the hash is stale.
    
    Returns:
        Tuple of (is_valid, new_hash_or_none). The new hash uses the
        policy default algorithm and parameters.
    """
    if not verify_password_sync(password, hash):
        return False, None
    
    if needs_rehash(hash):
        return True, hash_password_sync(password)
    
    return True, None
