from typing import Dict, List, Any
from pathlib import Path
import copy

import tomllib
import tomli_w

import pygame

from selectable_ui.colors import GREY, MID_GREY, DARK_GREY, LIGHT_GREY, CHARCOAL


class Settings:
    DEFAULTS: Dict[str, Any] = {
        "button": {
            "fade_duration": 0.1,
            "color_multiplier": 1.0,
            "settle_policy": "overlap",
            "colors": {
                "normal": list(GREY),
                "highlighted": list(MID_GREY),
                "pressed": list(DARK_GREY),
                "selected": list(LIGHT_GREY),
                "disabled": list(CHARCOAL),
            },
            "submit_keys": [
                pygame.K_RETURN,
                pygame.K_KP_ENTER,
                pygame.K_SPACE,
            ],
            "submit_buttons": [0],
        },
        "time": {
            "time_scale": 1.0,
            "max_delta_time": 0.25,
        },
        "video": {
            "width": 640,
            "height": 360,
            "fps": 60,
            "title": "Selectable UI",
        },
    }

    def __init__(self, path: str) -> None:
        self.path = Path(path)
        self.settings = {}
        self.load()

    @classmethod
    def create(cls, path: str = "settings.toml") -> "Settings":
        """
        Load settings from a file and write them back, so a missing file is
        created with all default values.
        """
        settings = cls(path)
        settings.save()

        return settings

    def load(self) -> None:
        if self.path.exists():
            with self.path.open("rb") as file:
                raw = tomllib.load(file)
                loaded = self._deserialize(raw)
                self.settings = self._merge(copy.deepcopy(self.DEFAULTS), loaded)
        else:
            self.settings = copy.deepcopy(self.DEFAULTS)

    def save(self) -> None:
        serialized = self._serialize(self.settings)
        with self.path.open("wb") as f:
            f.write(tomli_w.dumps(serialized).encode("utf-8"))

    def get(self, key: str, default: Any = None) -> Any:
        return self.settings.get(key, default)

    def set(self, key: str, value: Any) -> None:
        self.settings[key] = value

    def delete(self, key: str) -> None:
        if key in self.settings:
            del self.settings[key]

    def _merge(self, base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
        for key, value in override.items():
            if (
                key in base
                and isinstance(base[key], dict)
                and isinstance(value, dict)
            ):
                base[key] = self._merge(base[key], value)
            else:
                base[key] = value
        return base

    def _serialize(self, data: Dict[str, Any]) -> Dict[str, Any] | List[Any]:
        if "submit_keys" in data.get("button", {}):
            data = copy.deepcopy(data)
            data["button"]["submit_keys"] = [
                self._key_to_string(key) for key in data["button"]["submit_keys"]
            ]
        return self._remove_none(data)

    def _remove_none(self, obj: object) -> Dict[str, Any] | List[Any] | object:
        if isinstance(obj, dict):
            return {k: self._remove_none(v) for k, v in obj.items() if v is not None}
        elif isinstance(obj, list):
            return [self._remove_none(v) for v in obj if v is not None]
        else:
            return obj

    def _deserialize(self, data: Dict[str, Any]) -> Dict[str, Any]:
        if "submit_keys" in data.get("button", {}):
            data = copy.deepcopy(data)
            data["button"]["submit_keys"] = [
                self._string_to_key(name) for name in data["button"]["submit_keys"]
            ]

        return data

    def _key_to_string(self, keycode: Any) -> str:
        for name in dir(pygame):
            if name.startswith("K_") and getattr(pygame, name) == keycode:
                return name

        raise ValueError(f"Unknown key code: {keycode}")

    def _string_to_key(self, name: Any) -> int:
        if isinstance(name, int):
            return name

        if isinstance(name, str) and name.startswith("K_") and hasattr(pygame, name):
            return getattr(pygame, name)

        raise ValueError(f"Unknown key name: {name}")
