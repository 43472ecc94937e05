"""Alias file contents for CAWA."""

from typing import Dict, Optional

from .alias_spec import AliasSpec
from .types import AliasEntries, AliasName, RawConfig


class AliasConfig:
    """Class to hold the alias map together with the alias file flags."""

    def __init__(
        self,
        aliases: Optional[Dict[AliasName, AliasSpec]] = None,
        identifier: Optional[str] = None,
        enable_timing: Optional[bool] = None,
    ):
        self.aliases: Dict[AliasName, AliasSpec] = dict(aliases or {})
        self.identifier = identifier
        self.enable_timing = enable_timing

    @property
    def timing_enabled(self) -> bool:
        """Whether elapsed time is printed after a run (off unless set)."""
        return bool(self.enable_timing)

    def lookup(self, name: AliasName) -> Optional[AliasSpec]:
        """Return the spec stored under name, or None when it is unknown."""
        return self.aliases.get(name)

    def set(self, name: AliasName, spec: AliasSpec) -> None:
        self.aliases[name] = spec

    def remove(self, name: AliasName) -> bool:
        """Remove name, returning whether it was present."""
        return self.aliases.pop(name, None) is not None

    def sorted_entries(self) -> AliasEntries:
        """Return (name, display) pairs sorted by name."""
        return [(name, self.aliases[name].display()) for name in sorted(self.aliases)]

    def to_dict(self) -> RawConfig:
        """Return the JSON object written to the alias file."""
        data: RawConfig = {}
        if self.identifier is not None:
            data["identifier"] = self.identifier
        if self.enable_timing is not None:
            data["enable_timing"] = self.enable_timing
        data["aliases"] = {name: spec.to_json() for name, spec in self.aliases.items()}
        return data

    def __len__(self):
        return len(self.aliases)

    def __eq__(self, other):
        if isinstance(other, AliasConfig):
            return (
                self.aliases == other.aliases
                and self.identifier == other.identifier
                and self.enable_timing == other.enable_timing
            )
        return NotImplemented

    def is_empty(self) -> bool:
        return not self.aliases
