"""Serialisation of kubeconfig documents to normalised YAML."""

from __future__ import annotations

import yaml

from .kubeconfig_types import Config, KubeconfigError

__all__ = ["encode"]

_STR_TAG = "tag:yaml.org,2002:str"


class _Dumper(yaml.SafeDumper):
    """Dumper that double-quotes strings which would otherwise read back as non-strings."""


def _represent_str(dumper: _Dumper, value: str) -> yaml.ScalarNode:
    style = None
    if not value or dumper.resolve(yaml.ScalarNode, value, (True, False)) != _STR_TAG:
        style = '"'
    return dumper.represent_scalar(_STR_TAG, value, style=style)


_Dumper.add_representer(str, _represent_str)


def encode(cfg: Config) -> str:
    """Encode cfg as YAML with sorted keys; an empty config encodes to ''."""
    try:
        encoded = yaml.dump(
            cfg.to_dict(),
            Dumper=_Dumper,
            default_flow_style=False,
            sort_keys=True,
            allow_unicode=True,
            width=1 << 30,
        )
    except yaml.YAMLError as err:
        raise KubeconfigError(f"failed to encode KUBECONFIG: {err}") from err
    if encoded == "{}\n":
        return ""
    return encoded