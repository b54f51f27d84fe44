"""
Hash Inspection
===============
Introspection and staleness checks. Neither runs a hash, so both are
synchronous.
"""

from typing import Dict, Mapping, Optional
import structlog

from .algorithms import HashInfo, resolve_by_name
from .codec import decode
from .policy import get_default_algorithm, get_defaults

logger = structlog.get_logger(__name__)


def get_info(hash: str) -> HashInfo:
    """
    Get the algorithm, tag and parameters of a hash.
    
    Example:
        >>> get_info("$2y$12$...").options["cost"]
        12
        >>> get_info("$md5$...").algorithm
        'unknown'
        
    Raises:
        InvalidHashFormat: If the hash is structurally invalid
    """
    return decode(hash)


def required_params(
    algorithm: str,
    options: Optional[Mapping[str, int]] = None,
) -> Dict[str, int]:
    """Per-parameter maximum of per-call options and policy defaults."""
    required = get_defaults(algorithm)
    for key, value in (options or {}).items():
        required[key] = max(value, required[key]) if key in required else value
    return required


def needs_rehash(
    hash: str,
    algorithm: Optional[str] = None,
    options: Optional[Mapping[str, int]] = None,
) -> bool:
    """
    Check whether a hash should be recomputed under current policy.
    
    Returns True if:
    - The hash uses a different algorithm (including an unknown one)
    - The algorithm's freshness rule flags the tag or parameters as
      outdated
    
    Algorithms registered without a freshness rule are never stale.
    
    Args:
        hash: The hash to check
        algorithm: Wanted algorithm (default: policy default algorithm)
        options: Minimum parameters, raised to policy defaults if lower
        
    Raises:
        InvalidHashFormat: If the hash cannot be decoded
    """
    info = decode(hash)
    name = algorithm or get_default_algorithm()
    
    if not info.is_known or info.algorithm != name:
        logger.debug("rehash_required", reason="algorithm", algorithm=info.algorithm, wanted=name)
        return True
    
    descriptor = resolve_by_name(name)
    if descriptor.needs_rehash_fn is None:
        return False
    
    stale = descriptor.needs_rehash_fn(info, required_params(name, options))
    if stale:
        logger.debug("rehash_required", reason="parameters", algorithm=name, tag=info.tag)
    return stale
