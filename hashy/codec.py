"""
Hash Codec
==========
Decode self-describing hash strings into HashInfo.

Grammar: "$" <tag> "$" [parameters] "$" <payload>

Only the leading tag is parsed here. Parameter extraction is delegated to
the algorithm that owns the tag. Nothing in this module runs a hash.
"""

import re

from .algorithms import HashInfo, UNKNOWN_ALGORITHM, resolve_by_tag
from .exceptions import HashyError, InvalidHashFormat

_TAG_RE = re.compile(r"^\$([^$]+)\$")


def get_tag(hash: str) -> str:
    """
    Get the tag between the leading delimiters.
    
    Raises:
        InvalidHashFormat: If the string does not start with $<tag>$
    """
    match = _TAG_RE.match(hash) if isinstance(hash, str) else None
    if not match:
        raise InvalidHashFormat("Invalid hash: missing $<tag>$ prefix")
    return match.group(1)


def decode(hash: str) -> HashInfo:
    """
    Decode a hash string.
    
    Unrecognized tags are not an error: they decode to the "unknown"
    algorithm with no tag or options.
    
    Raises:
        InvalidHashFormat: If the prefix is malformed, or the owning
            algorithm cannot read its embedded parameters
    """
    tag = get_tag(hash)
    descriptor = resolve_by_tag(tag)
    
    if descriptor is None:
        return HashInfo(algorithm=UNKNOWN_ALGORITHM)
    
    try:
        options = descriptor.extract_params_fn(hash)
    except HashyError:
        raise
    except Exception as e:
        raise InvalidHashFormat(
            f"{descriptor.name} hash parameters are malformed: {type(e).__name__}"
        ) from e
    
    return HashInfo(algorithm=descriptor.name, tag=tag, options=options)
