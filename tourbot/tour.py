"""A tour: points of interest per language and the active route."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from tourbot.poi import PoI

DEFAULT_LANGUAGE = "it-IT"


@dataclass
class Tour:
    """Available points of interest per language and the ordered active list."""

    current_language: str = DEFAULT_LANGUAGE
    available_pois: dict[str, dict[str, PoI]] = field(default_factory=dict)
    active_tour_pois: list[str] = field(default_factory=list)

    def available_languages(self) -> list[str]:
        """Languages for which points of interest exist."""
        return list(self.available_pois)

    def language_supported(self, lang: str) -> bool:
        """Whether points of interest exist for the language."""
        return lang in self.available_pois

    def set_current_language(self, lang: str) -> None:
        """Select the tour language; ValueError if it is not available."""
        if not self.language_supported(lang):
            raise ValueError(f"language {lang!r} is not available")
        self.current_language = lang

    def get_poi(self, poi_name: str, lang: str | None = None) -> PoI:
        """A point of interest by name, in the given or current language."""
        language = self.current_language if lang is None else lang
        pois = self.available_pois.get(language, {})
        if poi_name not in pois:
            raise KeyError(f"point of interest {poi_name!r} not found for {language!r}")
        return pois[poi_name]

    @classmethod
    def from_dict(cls, data: Any) -> Tour:
        """Build a tour from its tour-file object."""
        if not isinstance(data, dict):
            raise ValueError(f"expected an object, got {type(data).__name__}")
        try:
            raw_pois = data["m_availablePoIs"]
            active = data["m_activeTourPoIs"]
        except KeyError as exc:
            raise ValueError(f"missing key {exc.args[0]!r}") from None
        if not isinstance(raw_pois, dict):
            raise ValueError("m_availablePoIs must be an object")
        if not isinstance(active, list) or not all(isinstance(n, str) for n in active):
            raise ValueError("m_activeTourPoIs must be a list of strings")
        pois: dict[str, dict[str, PoI]] = {}
        for lang, by_name in raw_pois.items():
            if not isinstance(by_name, dict):
                raise ValueError(f"points of interest for {lang!r} must be an object")
            pois[lang] = {name: PoI.from_dict(item) for name, item in by_name.items()}
        return cls(available_pois=pois, active_tour_pois=list(active))

    def to_dict(self) -> dict[str, Any]:
        """The tour-file object; the current language is not stored."""
        return {
            "m_availablePoIs": {
                lang: {name: poi.to_dict() for name, poi in by_name.items()}
                for lang, by_name in self.available_pois.items()
            },
            "m_activeTourPoIs": list(self.active_tour_pois),
        }