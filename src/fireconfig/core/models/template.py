"""Remote Config template model."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List

_KNOWN_KEYS = {"parameters", "conditions", "parameterGroups", "version"}


def _field(data: Dict[str, Any], key: str, expected: type, default: Any) -> Any:
    value = data.get(key)
    if value is None:
        return default
    if not isinstance(value, expected):
        raise ValueError(f"Template field '{key}' must be a JSON {'object' if expected is dict else 'array'}")
    return value


@dataclass
class RemoteConfigTemplate:
    parameters: Dict[str, Any] = field(default_factory=dict)
    conditions: List[Dict[str, Any]] = field(default_factory=list)
    parameter_groups: Dict[str, Any] = field(default_factory=dict)
    version: Dict[str, Any] | None = None
    etag: str | None = None
    extra: Dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "RemoteConfigTemplate":
        """Build a template from the REST representation.

        Only the top-level shape is checked; parameters and conditions are
        kept as plain JSON values.
        """
        if not isinstance(data, dict):
            raise ValueError("Template payload must be a JSON object")
        parameters = _field(data, "parameters", dict, {})
        conditions = _field(data, "conditions", list, [])
        parameter_groups = _field(data, "parameterGroups", dict, {})
        version = _field(data, "version", dict, None)
        return cls(
            parameters=dict(parameters),
            conditions=list(conditions),
            parameter_groups=dict(parameter_groups),
            version=version,
            extra={k: v for k, v in data.items() if k not in _KNOWN_KEYS},
        )

    def to_dict(self) -> Dict[str, Any]:
        out: Dict[str, Any] = dict(self.extra)
        out["parameters"] = self.parameters
        out["conditions"] = self.conditions
        out["parameterGroups"] = self.parameter_groups
        if self.version is not None:
            out["version"] = self.version
        if self.etag is not None:
            out["etag"] = self.etag
        return out
