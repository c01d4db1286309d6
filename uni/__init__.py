from .branding import VERSION
from .registry import ExecStyle, ManagerProfile, all_profiles, lookup
from .resolver import ResolutionContext, Resolver, resolve_manager

__version__ = VERSION

# "main" is not exported here to avoid importing the CLI with the library
__all__ = [
    "ExecStyle",
    "ManagerProfile",
    "ResolutionContext",
    "Resolver",
    "all_profiles",
    "lookup",
    "resolve_manager",
]
