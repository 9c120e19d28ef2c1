from __future__ import annotations

import copy
import os

from pathlib import Path

import yaml

ENV_VAR = 'CHAN_HULL_CONFIG'

DEFAULTS = {
    'geometry': {'eps': 1e-9},
    'chan': {'small_input_threshold': 6},
    'partition': {'shuffle': True, 'seed': None, 'workers': 1},
    'logging': {'level': 'WARNING'},
}


class Config:
    def __init__(self, path: str | Path | None = None):
        self.path = self._resolve(path)
        self._data = self._load(self.path)

    def __getitem__(self, section: str) -> dict:
        return self._data[section]

    def __contains__(self, section: str) -> bool:
        return section in self._data

    def __repr__(self) -> str:
        return f"Config(path={self.path}, sections={list(self._data.keys())})"

    def get(self, section: str, key: str, default=None):
        return self._data.get(section, {}).get(key, default)

    @staticmethod
    def _resolve(path):
        if path is not None:
            return Path(path)
        env_path = os.environ.get(ENV_VAR)
        if env_path:
            return Path(env_path)
        return Path(__file__).parent / 'hull_config.yaml'

    @staticmethod
    def _load(path: Path) -> dict:
        data = copy.deepcopy(DEFAULTS)
        if not path.exists():
            return data

        loaded = yaml.safe_load(path.read_text()) or {}
        if not isinstance(loaded, dict):
            raise ValueError(f'Config root must be a mapping: {path}')
        for section, values in loaded.items():
            if not isinstance(values, dict):
                raise ValueError(f'Config section {section!r} must be a mapping: {path}')
            data.setdefault(section, {}).update(values)
        return data


CFG = Config()
