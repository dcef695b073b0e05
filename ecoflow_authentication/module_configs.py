# SPDX-License-Identifier: MIT
# Copyright (c) 2025 EcoFlowJS contributors

"""Named module configurations owned by the host.

Configuration steps (such as ``ApiCredentials``) produce objects the host stores
under a user-chosen name. Middleware steps look them up by that name. This
module models that store explicitly so it can be passed on the context.
"""

from dataclasses import dataclass
from typing import Any, Iterator


@dataclass
class ModuleConfig:
    """A single named configuration entry.

    Attributes:
        label: Human readable label shown in pickers
        configs: Object produced by the configuration controller
    """
    label: str
    configs: Any


class PackageConfigManager:
    """Configurations registered for one package, keyed by name."""

    def __init__(self, package: str):
        self.package = package
        self._configs: dict[str, ModuleConfig] = {}

    @property
    def all_configs(self) -> dict[str, ModuleConfig]:
        return dict(self._configs)

    def get(self, name: str) -> ModuleConfig | None:
        return self._configs.get(name)

    def register(self, name: str, label: str, configs: Any) -> ModuleConfig:
        config = ModuleConfig(label=label, configs=configs)
        self._configs[name] = config
        return config

    def remove(self, name: str) -> None:
        self._configs.pop(name, None)

    def __iter__(self) -> Iterator[tuple[str, ModuleConfig]]:
        return iter(self._configs.items())

    def __len__(self) -> int:
        return len(self._configs)


class ModuleConfigs:
    """Host-side registry of package configuration managers."""

    def __init__(self):
        self._packages: dict[str, PackageConfigManager] = {}

    def select_package(self, package: str) -> PackageConfigManager | None:
        """Return the manager for ``package`` or None if nothing was registered."""
        return self._packages.get(package)

    def package(self, package: str) -> PackageConfigManager:
        """Return the manager for ``package``, creating it on first use."""
        if package not in self._packages:
            self._packages[package] = PackageConfigManager(package)
        return self._packages[package]
