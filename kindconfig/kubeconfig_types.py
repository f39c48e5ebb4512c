"""Data model for the subset of a KUBECONFIG that cluster tooling touches.

Fields that are not modelled explicitly are kept in ``other_fields`` so that
they survive a read/write cycle unchanged.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

__all__ = [
    "KubeconfigError",
    "Cluster",
    "NamedCluster",
    "NamedUser",
    "Context",
    "NamedContext",
    "Config",
    "kind_cluster_key",
    "check_kubeadm_expectations",
]


class KubeconfigError(Exception):
    """Raised when a kubeconfig is malformed or does not meet expectations."""


def _as_dict(data: Any, what: str) -> dict:
    if data is None:
        return {}
    if not isinstance(data, Mapping):
        raise KubeconfigError(f"{what} must be a mapping, got {type(data).__name__}")
    return dict(data)


def _pop_string(fields: dict, key: str, what: str) -> str:
    value = fields.pop(key, None)
    if value is None:
        return ""
    if not isinstance(value, str):
        raise KubeconfigError(f"{what} must be a string, got {type(value).__name__}")
    return value


def _pop_list(fields: dict, key: str, what: str) -> list:
    value = fields.pop(key, None)
    if value is None:
        return []
    if not isinstance(value, list):
        raise KubeconfigError(f"{what} must be a list, got {type(value).__name__}")
    return value


@dataclass
class Cluster:
    """How to reach a Kubernetes API server."""

    server: str = ""
    other_fields: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: Any) -> Cluster:
        fields = _as_dict(data, "cluster")
        server = _pop_string(fields, "server", "cluster server")
        return cls(server=server, other_fields=fields)

    def to_dict(self) -> dict[str, Any]:
        out = dict(self.other_fields)
        if self.server:
            out["server"] = self.server
        return out


@dataclass
class NamedCluster:
    """A cluster entry with its nickname."""

    name: str = ""
    cluster: Cluster = field(default_factory=Cluster)

    @classmethod
    def from_dict(cls, data: Any) -> NamedCluster:
        fields = _as_dict(data, "clusters entry")
        name = _pop_string(fields, "name", "cluster name")
        return cls(name=name, cluster=Cluster.from_dict(fields.get("cluster")))

    def to_dict(self) -> dict[str, Any]:
        return {"name": self.name, "cluster": self.cluster.to_dict()}


@dataclass
class NamedUser:
    """A user entry with its nickname; the user data is kept untouched."""

    name: str = ""
    user: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: Any) -> NamedUser:
        fields = _as_dict(data, "users entry")
        name = _pop_string(fields, "name", "user name")
        return cls(name=name, user=_as_dict(fields.get("user"), "user"))

    def to_dict(self) -> dict[str, Any]:
        return {"name": self.name, "user": dict(self.user)}


@dataclass
class Context:
    """A pairing of a cluster reference and a user reference."""

    cluster: str = ""
    user: str = ""
    other_fields: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: Any) -> Context:
        fields = _as_dict(data, "context")
        cluster = _pop_string(fields, "cluster", "context cluster")
        user = _pop_string(fields, "user", "context user")
        return cls(cluster=cluster, user=user, other_fields=fields)

    def to_dict(self) -> dict[str, Any]:
        out = dict(self.other_fields)
        out["cluster"] = self.cluster
        out["user"] = self.user
        return out


@dataclass
class NamedContext:
    """A context entry with its nickname."""

    name: str = ""
    context: Context = field(default_factory=Context)

    @classmethod
    def from_dict(cls, data: Any) -> NamedContext:
        fields = _as_dict(data, "contexts entry")
        name = _pop_string(fields, "name", "context name")
        return cls(name=name, context=Context.from_dict(fields.get("context")))

    def to_dict(self) -> dict[str, Any]:
        return {"name": self.name, "context": self.context.to_dict()}


@dataclass
class Config:
    """A KUBECONFIG document."""

    clusters: list[NamedCluster] = field(default_factory=list)
    users: list[NamedUser] = field(default_factory=list)
    contexts: list[NamedContext] = field(default_factory=list)
    current_context: str = ""
    other_fields: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: Any) -> Config:
        fields = _as_dict(data, "kubeconfig")
        clusters = [NamedCluster.from_dict(c) for c in _pop_list(fields, "clusters", "clusters")]
        users = [NamedUser.from_dict(u) for u in _pop_list(fields, "users", "users")]
        contexts = [NamedContext.from_dict(c) for c in _pop_list(fields, "contexts", "contexts")]
        current = _pop_string(fields, "current-context", "current-context")
        return cls(
            clusters=clusters,
            users=users,
            contexts=contexts,
            current_context=current,
            other_fields=fields,
        )

    def to_dict(self) -> dict[str, Any]:
        out = dict(self.other_fields)
        if self.clusters:
            out["clusters"] = [c.to_dict() for c in self.clusters]
        if self.users:
            out["users"] = [u.to_dict() for u in self.users]
        if self.contexts:
            out["contexts"] = [c.to_dict() for c in self.contexts]
        if self.current_context:
            out["current-context"] = self.current_context
        return out


def kind_cluster_key(cluster_name: str) -> str:
    """Return the name under which a kind cluster appears in kubeconfig files."""
    return "kind-" + cluster_name


def check_kubeadm_expectations(cfg: Config) -> None:
    """Ensure a kubeadm-generated config has exactly one cluster, user and context."""
    if len(cfg.clusters) != 1:
        raise KubeconfigError(
            f"kubeadm KUBECONFIG should have one cluster, but read {len(cfg.clusters)}"
        )
    if len(cfg.users) != 1:
        raise KubeconfigError(
            f"kubeadm KUBECONFIG should have one user, but read {len(cfg.users)}"
        )
    if len(cfg.contexts) != 1:
        raise KubeconfigError(
            f"kubeadm KUBECONFIG should have one context, but read {len(cfg.contexts)}"
        )