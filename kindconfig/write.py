"""Writing kubeconfig documents to disk."""

from __future__ import annotations

import os

from .encode import encode
from .kubeconfig_types import Config, KubeconfigError

__all__ = ["write_config"]


def write_config(cfg: Config, config_path: str | os.PathLike) -> None:
    """Encode cfg and write it to config_path, creating directories as needed.

    New files are created with mode 0600 and new directories with 0755.
    """
    encoded = encode(cfg)
    directory = os.path.dirname(os.fspath(config_path)) or "."
    try:
        os.makedirs(directory, mode=0o755, exist_ok=True)
    except OSError as err:
        raise KubeconfigError(f"failed to create directory for KUBECONFIG: {err}") from err
    try:
        fd = os.open(config_path, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, 0o600)
        with os.fdopen(fd, "w", encoding="utf-8", newline="") as fh:
            fh.write(encoded)
    except OSError as err:
        raise KubeconfigError(f"failed to write KUBECONFIG: {err}") from err