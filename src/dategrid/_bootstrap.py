from __future__ import annotations
from dategrid.core.engine import PresetRegistry
from dategrid.engines.specs import ALL_SPECS

def build_registry() -> PresetRegistry:
    return PresetRegistry(dict(ALL_SPECS))
