"""Reading kubeconfig documents and deriving kind kubeconfigs from kubeadm output."""

from __future__ import annotations

import os

import yaml

from .kubeconfig_types import Config, KubeconfigError, check_kubeadm_expectations, kind_cluster_key

__all__ = ["kind_from_raw_kubeadm", "read_config"]


def _decode(raw: str) -> Config:
    try:
        data = yaml.safe_load(raw)
    except yaml.YAMLError as err:
        raise KubeconfigError(f"failed to parse KUBECONFIG: {err}") from err
    return Config.from_dict(data)


def kind_from_raw_kubeadm(raw_kubeadm_kubeconfig: str, cluster_name: str, server: str = "") -> Config:
    """Build a kind kubeconfig from a raw kubeadm one.

    All entries are renamed to the cluster's kind key; the server is replaced
    only when ``server`` is non-empty.
    """
    cfg = _decode(raw_kubeadm_kubeconfig)
    check_kubeadm_expectations(cfg)

    key = kind_cluster_key(cluster_name)
    cfg.clusters[0].name = key
    cfg.users[0].name = key
    cfg.contexts[0].name = key
    cfg.contexts[0].context.user = key
    cfg.contexts[0].context.cluster = key
    cfg.current_context = key

    if server:
        cfg.clusters[0].cluster.server = server
    return cfg


def read_config(config_path: str | os.PathLike) -> Config:
    """Load the kubeconfig at config_path, or an empty one if the file is missing."""
    try:
        with open(config_path, encoding="utf-8") as fh:
            raw = fh.read()
    except FileNotFoundError:
        return Config()
    return _decode(raw)