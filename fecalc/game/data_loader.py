"""
Loader for the weapons and units data files.

Both files are YAML documents with a single top-level list:

    weapons:
      - name: Iron Sword
        might: 5
        weight: 5
        hit: 90
        effectiveAgainst: []
        magic: false

    units:
      - name: Marth
        hp: 18
        ...
        weapons: [Rapier, Iron Sword]
"""
from pathlib import Path
from typing import Any, Optional

import yaml

from ..core.data.data_structures import Armory, GameUnit, GameUnits, Weapon
from ..core.errors import DataFileError
from ..core.log_manager import LogManager


class DataLoader:
    """Handles loading the armory and the roster from YAML files."""

    def __init__(self, log_manager: Optional[LogManager] = None):
        self.log_manager = log_manager

    def _log(self, text: str) -> None:
        if self.log_manager is not None:
            self.log_manager.data(text)

    @staticmethod
    def _read_yaml(file_path: str, description: str) -> Any:
        """Read and parse a YAML file, mapping failures to DataFileError."""
        try:
            with open(file_path, "r", encoding="utf-8") as f:
                return yaml.safe_load(f)
        except FileNotFoundError:
            raise DataFileError(f"{description} file not found: {file_path}")
        except UnicodeDecodeError as e:
            raise DataFileError(f"{description} file {file_path} is not valid UTF-8: {e}")
        except yaml.YAMLError as e:
            raise DataFileError(f"Failed to parse {description.lower()} file {file_path}: {e}")
        except OSError as e:
            raise DataFileError(f"Could not read {description.lower()} file {file_path}: {e}")

    @staticmethod
    def _records(data: Any, key: str, file_path: str) -> list[dict[str, Any]]:
        """Extract the list of record mappings stored under `key`."""
        if not isinstance(data, dict) or key not in data:
            raise DataFileError(f"{file_path} must contain a top-level '{key}' list")

        records = data[key] or []
        if not isinstance(records, list):
            raise DataFileError(f"'{key}' in {file_path} must be a list")

        for index, record in enumerate(records):
            if not isinstance(record, dict):
                raise DataFileError(f"Entry {index} of '{key}' in {file_path} is not a mapping")
        return records

    def load_armory(self, file_path: str) -> Armory:
        """Load the weapon catalog from a YAML file."""
        data = self._read_yaml(file_path, "Weapons")
        weapons = tuple(Weapon.from_dict(record)
                        for record in self._records(data, "weapons", file_path))
        self._log(f"Loaded {len(weapons)} weapons from {Path(file_path).name}")
        return Armory(weapons)

    def load_units(self, file_path: str) -> GameUnits:
        """Load the unit roster from a YAML file."""
        data = self._read_yaml(file_path, "Units")
        units = tuple(GameUnit.from_dict(record)
                      for record in self._records(data, "units", file_path))
        self._log(f"Loaded {len(units)} units from {Path(file_path).name}")
        return GameUnits(units)
