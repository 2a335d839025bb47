"""Feature set containers populated by discovery sources."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Mapping, Optional


@dataclass
class AttributeFeatures:
    """A flat name → value mapping of discovered attributes."""

    elements: Dict[str, str] = field(default_factory=dict)


@dataclass
class Features:
    attributes: Dict[str, AttributeFeatures] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Dict[str, Dict[str, str]]]:
        return {
            "attributes": {
                feature: {"elements": dict(values.elements)}
                for feature, values in self.attributes.items()
            }
        }


def new_features() -> Features:
    return Features()


def new_attribute_features(values: Optional[Mapping[str, str]] = None) -> AttributeFeatures:
    return AttributeFeatures(elements=dict(values or {}))


__all__ = ["AttributeFeatures", "Features", "new_attribute_features", "new_features"]
