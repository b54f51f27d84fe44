"""
Async Password Hashing
======================
Async-safe hashing and verification.

Each coroutine runs the matching synchronous engine in the event loop's
default thread pool, so a slow primitive never blocks the loop. Every
error, including bad arguments rejected before the primitive is reached,
is raised by the awaited coroutine.
"""

import asyncio
from functools import partial
from typing import Callable, Mapping, Optional, Tuple, TypeVar

from .sync_ops import hash_password_sync, verify_and_upgrade_sync, verify_password_sync

T = TypeVar("T")


async def run_blocking(func: Callable[..., T], *args, **kwargs) -> T:
    """Run a blocking callable in the default executor and await its result."""
    loop = asyncio.get_event_loop()
    
    # Run in executor to avoid blocking the event loop
    return await loop.run_in_executor(None, partial(func, *args, **kwargs))


async def hash_password(
    password: str,
    algorithm: Optional[str] = None,
    options: Optional[Mapping[str, int]] = None,
) -> str:
    """
    Hash a password.
    
    Args:
        password: Plain text password to hash
        algorithm: Algorithm name (default: policy default algorithm)
        options: Per-call parameters; policy defaults take precedence
        
    Returns:
        Hash string (includes algorithm tag, parameters, salt, and hash)
        
    Example:
        >>> hash = await hash_password("my_secure_password")
        >>> print(hash[:4])
        '$2y$'
    """
    return await run_blocking(hash_password_sync, password, algorithm, options)


async def verify_password(password: str, hash: str) -> bool:
    """
    Verify a password against a hash of any registered algorithm.
    
    Returns:
        True if password matches, False otherwise
    """
    return await run_blocking(verify_password_sync, password, hash)


async def verify_and_upgrade(
    password: str,
    hash: str,
) -> Tuple[bool, Optional[str]]:
    """
    Verify password and return new hash if upgrade is needed.
    
    This is the recommended function for login flows.
    
    Returns:
        Tuple of (is_valid, new_hash_or_none)
        
    Example:
        >>> valid, new_hash = await verify_and_upgrade(password, stored_hash)
        >>> if valid and new_hash:
        >>>     await update_user_password_hash(user_id, new_hash)
    """
    return await run_blocking(verify_and_upgrade_sync, password, hash)
