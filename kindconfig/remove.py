"""Removing a kind cluster's entries from kubeconfig files."""

from __future__ import annotations

import os

from .kubeconfig_types import Config, KubeconfigError, kind_cluster_key
from .lock import locked
from .paths import paths
from .read import read_config
from .write import write_config

__all__ = ["remove", "remove_kind"]


def remove(cfg: Config, kind_cluster_name: str) -> bool:
    """Drop the kind cluster's entries from cfg in place; return True if anything changed."""
    key = kind_cluster_key(kind_cluster_name)
    mutated = False

    for entries in (cfg.clusters, cfg.users, cfg.contexts):
        kept = [entry for entry in entries if entry.name != key]
        if len(kept) != len(entries):
            mutated = True
            entries[:] = kept

    if cfg.current_context == key:
        cfg.current_context = ""
        mutated = True

    return mutated


def remove_kind(kind_cluster_name: str, explicit_path: str | os.PathLike = "") -> None:
    """Remove the kind cluster from every kubeconfig kubectl would consult."""
    for config_path in paths(explicit_path):
        with locked(config_path):
            try:
                existing = read_config(config_path)
            except (KubeconfigError, OSError) as err:
                raise KubeconfigError(
                    f"failed to read kubeconfig to remove KIND entry: {err}"
                ) from err
            if remove(existing, kind_cluster_name):
                write_config(existing, config_path)