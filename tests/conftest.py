"""
Shared fixtures: a clean registry and a cheap policy for every test.
"""

import pytest

from hashy.algorithms import reset_registry
from hashy.policy import configure, options, reset_policy


@pytest.fixture(autouse=True)
def fast_policy():
    """Reset global state and lower costs so tests hash quickly."""
    reset_registry()
    reset_policy()
    configure(
        default_algorithm="bcrypt",
        bcrypt={"cost": 4},
        argon2={"time_cost": 1, "memory_cost": 1024, "parallelism": 1},
    )
    
    yield options
    
    reset_registry()
    reset_policy()


@pytest.fixture
def legacy_bcrypt_hash():
    """A $2a$ hash of "secret" produced directly by the bcrypt library."""
    import bcrypt
    
    return bcrypt.hashpw(b"secret", bcrypt.gensalt(rounds=4, prefix=b"2a")).decode("ascii")
