"""Infrastructure layer for class-enumerations.

Re-exports the public API surface for convenience::

    from class_enumerations.infrastructure import (
        MemberCache, member_cache,
        EnumerationRegistry, registry,
        DisplayConfig,
    )
"""

from class_enumerations.infrastructure.cache import MemberCache, member_cache
from class_enumerations.infrastructure.config import DisplayConfig
from class_enumerations.infrastructure.registry import (
    EnumerationRegistry,
    qualified_name,
    registry,
)

__all__ = [
    # Cache
    "MemberCache",
    "member_cache",
    # Registry
    "EnumerationRegistry",
    "qualified_name",
    "registry",
    # Configuration
    "DisplayConfig",
]
