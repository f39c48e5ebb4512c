"""Merging a kind kubeconfig into an existing kubeconfig file."""

from __future__ import annotations

import os
from typing import TypeVar

from .kubeconfig_types import Config, KubeconfigError, check_kubeadm_expectations
from .lock import locked
from .paths import path_for_merge
from .read import read_config
from .write import write_config

__all__ = ["merge", "write_merged"]

_Entry = TypeVar("_Entry")


def _upsert(entries: list[_Entry], entry: _Entry) -> None:
    """Replace every entry sharing entry's name, or append it if none does."""
    replaced = False
    for i, current in enumerate(entries):
        if current.name == entry.name:  # type: ignore[attr-defined]
            entries[i] = entry
            replaced = True
    if not replaced:
        entries.append(entry)


def merge(existing: Config, kind: Config) -> None:
    """Merge the single-entry kind config into existing, in place."""
    check_kubeadm_expectations(kind)

    _upsert(existing.clusters, kind.clusters[0])
    _upsert(existing.users, kind.users[0])
    _upsert(existing.contexts, kind.contexts[0])

    existing.current_context = kind.current_context

    # Some clients require apiVersion and kind to be present.
    if not existing.other_fields:
        existing.other_fields = kind.other_fields


def write_merged(kind_config: Config, explicit_config_path: str | os.PathLike = "") -> None:
    """Merge kind_config into the kubeconfig kubectl would write to.

    The current context is set to the kind config's current context.
    """
    config_path = path_for_merge(explicit_config_path)
    with locked(config_path):
        try:
            existing = read_config(config_path)
        except (KubeconfigError, OSError) as err:
            raise KubeconfigError(f"failed to get kubeconfig to merge: {err}") from err
        merge(existing, kind_config)
        write_config(existing, config_path)