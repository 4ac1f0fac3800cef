from __future__ import annotations
import yaml
from dataclasses import dataclass, field
from typing import Any, Dict

@dataclass
class Config:
    data: Dict[str, Any] = field(default_factory=dict)

    @classmethod
    def load(cls, path: str) -> "Config":
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
        if not isinstance(data, dict):
            raise ValueError(f"{path}: top level of the config must be a mapping")
        return cls(data=data)

    def __getitem__(self, item):
        return self.data[item]

    def get(self, key, default=None):
        return self.data.get(key, default)

    def section(self, key) -> Dict[str, Any]:
        """Return a mapping section, {} when absent or null."""
        value = self.data.get(key) or {}
        if not isinstance(value, dict):
            raise ValueError(f"config section {key!r} must be a mapping")
        return value
