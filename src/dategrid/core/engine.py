from __future__ import annotations
from dataclasses import dataclass
from typing import Dict, List

from .errors import UnknownPresetError
from .types import CalendarSpec

@dataclass
class PresetRegistry:
    _specs: Dict[str, CalendarSpec]

    def get(self, name: str) -> CalendarSpec:
        if name not in self._specs:
            raise UnknownPresetError(f"Unknown preset '{name}'. Available: {sorted(self._specs)}")
        return self._specs[name]

    def list(self) -> List[str]:
        return sorted(self._specs.keys())

    def register(self, name: str, spec: CalendarSpec, *, overwrite: bool = False) -> None:
        if (not overwrite) and (name in self._specs):
            raise KeyError(f"Preset '{name}' already exists. Use overwrite=True to replace.")
        self._specs[name] = spec
