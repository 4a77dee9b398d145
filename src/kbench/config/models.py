# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Configuration models describing the components audited on a node."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from enum import Enum
from typing import Final

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from ..errors import ConfigError

NODE_TYPES: Final[tuple[str, ...]] = (
    "master",
    "controlplane",
    "node",
    "etcd",
    "policies",
    "managedservices",
)
DEFAULT_NODE_TYPE: Final[str] = "master"


class FileCategory(str, Enum):
    """Enumerate the file-backed artifact kinds resolved for a component."""

    CONFIG = "config"
    SERVICE = "service"
    DATADIR = "datadir"
    KUBECONFIG = "kubeconfig"

    @property
    def candidates_field(self) -> str:
        """Return the :class:`Component` field holding candidate paths."""

        return _CATEGORY_FIELDS[self.value][0]

    @property
    def default_field(self) -> str:
        """Return the :class:`Component` field holding the fallback path."""

        return _CATEGORY_FIELDS[self.value][1]

    @property
    def substitution_suffix(self) -> str:
        """Return the suffix used by ``$<component><suffix>`` placeholders."""

        return _CATEGORY_FIELDS[self.value][2]


# category -> (candidate field, default field, placeholder suffix)
_CATEGORY_FIELDS: Final[dict[str, tuple[str, str, str]]] = {
    "config": ("config_candidates", "default_config", "conf"),
    "service": ("service_candidates", "default_service", "svc"),
    "datadir": ("datadir_candidates", "default_datadir", "datadir"),
    "kubeconfig": ("kubeconfig_candidates", "default_kubeconfig", "kubeconfig"),
}

BINARY_SUBSTITUTION_SUFFIX: Final[str] = "bin"


def _as_candidates(value: object) -> object:
    if value is None:
        return value
    if isinstance(value, str):
        return (value,)
    return value


class Component(BaseModel):
    """Declared component with the candidate artifacts that may identify it.

    Field aliases mirror the keys used in benchmark configuration files so
    raw YAML sections validate directly.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    name: str
    binary_candidates: tuple[str, ...] | None = Field(default=None, alias="bins")
    config_candidates: tuple[str, ...] = Field(default=(), alias="confs")
    service_candidates: tuple[str, ...] = Field(default=(), alias="svc")
    datadir_candidates: tuple[str, ...] = Field(default=(), alias="datadirs")
    kubeconfig_candidates: tuple[str, ...] = Field(default=(), alias="kubeconfig")
    optional: bool = False
    default_config: str | None = Field(default=None, alias="defaultconf")
    default_service: str | None = Field(default=None, alias="defaultsvc")
    default_datadir: str | None = Field(default=None, alias="defaultdatadir")
    default_kubeconfig: str | None = Field(default=None, alias="defaultkubeconfig")

    @field_validator(
        "binary_candidates",
        "config_candidates",
        "service_candidates",
        "datadir_candidates",
        "kubeconfig_candidates",
        mode="before",
    )
    @classmethod
    def _coerce_candidates(cls, value: object) -> object:
        return _as_candidates(value)

    def candidates(self, category: FileCategory) -> tuple[str, ...]:
        """Return the ordered candidate paths for ``category``.

        Args:
            category: File category being resolved.

        Returns:
            tuple[str, ...]: Candidate paths in configuration order.
        """

        return getattr(self, category.candidates_field)

    def default(self, category: FileCategory) -> str | None:
        """Return the configured fallback path for ``category`` if any.

        Args:
            category: File category being resolved.

        Returns:
            str | None: Fallback value, or ``None`` when not configured.
        """

        return getattr(self, category.default_field)


class BenchConfig(BaseModel):
    """Component list and definitions for a single node type."""

    model_config = ConfigDict(frozen=True)

    node_type: str = DEFAULT_NODE_TYPE
    components: tuple[str, ...] = ()
    definitions: dict[str, Component] = Field(default_factory=dict)

    def component(self, name: str) -> Component | None:
        """Return the definition for ``name`` or ``None`` when undefined."""

        return self.definitions.get(name)

    @classmethod
    def from_section(
        cls,
        section: Mapping[str, object],
        *,
        node_type: str = DEFAULT_NODE_TYPE,
    ) -> BenchConfig:
        """Build a configuration from a raw node-type section.

        The section carries a ``components`` list next to one mapping per
        component definition, keyed by component name. Scalar entries are
        ignored.

        Args:
            section: Raw mapping, typically parsed from YAML.
            node_type: Node type the section describes.

        Returns:
            BenchConfig: Validated configuration.

        Raises:
            ConfigError: If the component list or a definition is invalid.
        """

        declared = section.get("components", ())
        if isinstance(declared, str) or not isinstance(declared, Sequence):
            raise ConfigError(f"{node_type}: 'components' must be a list of names")
        if not all(isinstance(name, str) for name in declared):
            raise ConfigError(f"{node_type}: 'components' must only contain strings")

        definitions: dict[str, Component] = {}
        for key, value in section.items():
            if key == "components" or not isinstance(value, Mapping):
                continue
            try:
                definitions[str(key)] = Component.model_validate({**value, "name": str(key)})
            except ValidationError as exc:
                raise ConfigError(f"{node_type}.{key}: {exc}") from exc
        return cls(node_type=node_type, components=tuple(declared), definitions=definitions)


class RunConfig(BaseModel):
    """Complete benchmark configuration spanning every node type."""

    model_config = ConfigDict(frozen=True)

    nodes: dict[str, BenchConfig] = Field(default_factory=dict)
    version_mapping: dict[str, str] = Field(default_factory=dict)

    @field_validator("version_mapping", mode="before")
    @classmethod
    def _stringify_mapping(cls, value: object) -> object:
        if not isinstance(value, Mapping):
            return value
        # YAML reads an unquoted ``1.20`` as the float 1.2; refuse to guess.
        numeric = [repr(key) for key in value if not isinstance(key, str)]
        if numeric:
            raise ValueError(f"Kubernetes version keys must be quoted strings, got {', '.join(numeric)}")
        return {key: str(item) for key, item in value.items()}

    def node(self, node_type: str) -> BenchConfig:
        """Return the configuration for ``node_type``.

        Raises:
            ConfigError: If the node type is not configured.
        """

        try:
            return self.nodes[node_type]
        except KeyError as exc:
            known = ", ".join(sorted(self.nodes)) or "<none>"
            raise ConfigError(f"node type '{node_type}' is not configured (known: {known})") from exc

    @classmethod
    def from_mapping(cls, data: Mapping[str, object]) -> RunConfig:
        """Build a run configuration from a parsed configuration document.

        Args:
            data: Top-level mapping with node-type sections and an optional
                ``version_mapping`` table.

        Returns:
            RunConfig: Validated configuration.

        Raises:
            ConfigError: If any section is invalid.
        """

        nodes: dict[str, BenchConfig] = {}
        for node_type in NODE_TYPES:
            section = data.get(node_type)
            if section is None:
                continue
            if not isinstance(section, Mapping):
                raise ConfigError(f"{node_type}: expected a mapping section")
            nodes[node_type] = BenchConfig.from_section(section, node_type=node_type)
        mapping = data.get("version_mapping") or {}
        try:
            return cls(nodes=nodes, version_mapping=mapping)
        except ValidationError as exc:
            raise ConfigError(f"version_mapping: {exc}") from exc


__all__ = [
    "BINARY_SUBSTITUTION_SUFFIX",
    "BenchConfig",
    "Component",
    "ConfigError",
    "DEFAULT_NODE_TYPE",
    "FileCategory",
    "NODE_TYPES",
    "RunConfig",
]
