"""Name resolver feature module for QR Frame.

Resolves ENS-style names to addresses through an external lookup service,
failing closed to "not found".
"""

from qrframe.features.resolver.service import (
    NameResolver,
    NameResolverService,
    get_default_resolver,
    resolve_name,
)

__all__ = [
    "NameResolver",
    "NameResolverService",
    "get_default_resolver",
    "resolve_name",
]
