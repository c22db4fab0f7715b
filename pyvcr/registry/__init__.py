"""Capability registries — the named, pluggable parts of a recorder.

A capability registry maps names to implementation references and tracks
which of them are active:
- Library hooks and request matchers: any subset, all by default
- Storage: exactly one selected entry
"""

from pyvcr.registry.capability_registry import (
    CapabilityRegistry,
    MultiSelectRegistry,
    SingleSelectRegistry,
)
from pyvcr.registry.models import ClassRef, MethodRef

__all__ = [
    "CapabilityRegistry",
    "ClassRef",
    "MethodRef",
    "MultiSelectRegistry",
    "SingleSelectRegistry",
]
