"""
Algorithm Registry
==================
Global registry mapping algorithm names and hash tags to descriptors.
"""

from typing import Dict, Optional
import structlog

from ..exceptions import AlgorithmRegistrationError, UnsupportedAlgorithm
from .models import AlgorithmDescriptor

logger = structlog.get_logger(__name__)

# Global registry of algorithms
_algorithms: Dict[str, AlgorithmDescriptor] = {}
_algorithms_by_tag: Dict[str, AlgorithmDescriptor] = {}


def register(descriptor: AlgorithmDescriptor) -> AlgorithmDescriptor:
    """
    Register an algorithm, indexed by its name and each of its tags.
    
    Re-registering a name replaces that algorithm's entry. Claiming a tag
    already owned by another algorithm is rejected.
    
    Raises:
        AlgorithmRegistrationError: If a tag belongs to another algorithm
    """
    for tag in descriptor.tags:
        owner = _algorithms_by_tag.get(tag)
        if owner is not None and owner.name != descriptor.name:
            raise AlgorithmRegistrationError(
                f"Tag {tag!r} is already registered to {owner.name!r}"
            )
    
    previous = _algorithms.get(descriptor.name)
    if previous is not None:
        for tag in previous.tags:
            _algorithms_by_tag.pop(tag, None)
    
    _algorithms[descriptor.name] = descriptor
    for tag in descriptor.tags:
        _algorithms_by_tag[tag] = descriptor
    
    logger.debug(
        "algorithm_registered",
        algorithm=descriptor.name,
        tags=sorted(descriptor.tags),
        replaced=previous is not None,
    )
    return descriptor


def resolve_by_tag(tag: str) -> Optional[AlgorithmDescriptor]:
    """Get the descriptor owning a hash tag, or None if unknown."""
    return _algorithms_by_tag.get(tag)


def resolve_by_name(name: str) -> AlgorithmDescriptor:
    """
    Get a registered algorithm by name.
    
    Raises:
        UnsupportedAlgorithm: If no algorithm is registered under name
    """
    try:
        return _algorithms[name]
    except KeyError:
        raise UnsupportedAlgorithm(name) from None


def get_registered_algorithms() -> Dict[str, AlgorithmDescriptor]:
    """Get all registered algorithms."""
    return dict(_algorithms)


def reset_registry():
    """Drop every algorithm and re-register the built-ins (for testing/admin)."""
    from . import register_builtin_algorithms
    
    _algorithms.clear()
    _algorithms_by_tag.clear()
    register_builtin_algorithms()
    logger.info("registry_reset", algorithms=sorted(_algorithms))
