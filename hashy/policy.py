"""
Hashing Policy
==============
Process-wide policy: the default algorithm and per-algorithm parameters.

The policy is read on every hash, verify and rehash call and never
mutated by them. It may be changed directly (``hashy.options``) or through
``configure()``, but only while the application is configuring itself.
There is no locking: mutating it while hashes are in flight is undefined.

Parameter values are not validated here. A bad cost factor surfaces as a
PrimitiveFailure the next time something is hashed with it.

Usage:
    import hashy
    
    hashy.options.defaults["bcrypt"]["cost"] = 12
    # or
    hashy.policy.configure(default_algorithm="argon2", argon2={"time_cost": 4})
"""

from dataclasses import dataclass, field
from typing import Dict, Optional
import structlog

from . import config

logger = structlog.get_logger(__name__)


def _env_defaults() -> Dict[str, Dict[str, int]]:
    return {
        "bcrypt": {
            "cost": config.BCRYPT_COST,
        },
        "argon2": {
            "time_cost": config.ARGON2_TIME_COST,
            "memory_cost": config.ARGON2_MEMORY_COST,
            "parallelism": config.ARGON2_PARALLELISM,
        },
    }


@dataclass
class PolicyConfig:
    """Default algorithm and per-algorithm default parameters."""
    default_algorithm: str = "bcrypt"
    defaults: Dict[str, Dict[str, int]] = field(default_factory=dict)
    
    @classmethod
    def from_env(cls) -> "PolicyConfig":
        return cls(
            default_algorithm=config.DEFAULT_ALGORITHM,
            defaults=_env_defaults(),
        )


# Global policy, exported as ``hashy.options``
options = PolicyConfig.from_env()


def get_default_algorithm() -> str:
    return options.default_algorithm


def get_defaults(algorithm: str) -> Dict[str, int]:
    """Get a copy of the policy parameters for an algorithm ({} if none)."""
    return dict(options.defaults.get(algorithm) or {})


def configure(
    default_algorithm: Optional[str] = None,
    **algorithm_defaults: Dict[str, int],
) -> PolicyConfig:
    """
    Update the global policy in place.
    
    Per-algorithm keyword arguments are merged over the current defaults
    for that algorithm.
    
    Example:
        configure(bcrypt={"cost": 12})
    """
    if default_algorithm is not None:
        options.default_algorithm = default_algorithm
    
    for algorithm, params in algorithm_defaults.items():
        options.defaults.setdefault(algorithm, {}).update(params)
    
    logger.info(
        "policy_updated",
        default_algorithm=options.default_algorithm,
        algorithms=sorted(algorithm_defaults),
    )
    return options


def reset_policy() -> PolicyConfig:
    """Restore the environment-derived policy (for testing/admin)."""
    fresh = PolicyConfig.from_env()
    options.default_algorithm = fresh.default_algorithm
    options.defaults = fresh.defaults
    return options
