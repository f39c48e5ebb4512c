# kindconfig

A library for managing the kubeconfig entries of local kind clusters. It also
renders an haproxy configuration for the control-plane load balancer and
unpacks tar streams of node logs.

## Modules

- `kindconfig.kubeconfig_types`: the data model. `Config`, `NamedCluster`,
  `Cluster`, `NamedUser`, `NamedContext` and `Context` are dataclasses with
  `from_dict` and `to_dict` methods. The model does not cover every field, so
  unmodelled fields are kept in `other_fields` and written back unchanged.
  `kind_cluster_key(name)` returns `"kind-<name>"`.
  `check_kubeadm_expectations(cfg)` raises `KubeconfigError` unless the config
  holds exactly one cluster, one user and one context.
- `kindconfig.read`:
  - `kind_from_raw_kubeadm(raw, cluster_name, server)` parses a kubeadm admin
    kubeconfig. It renames every cluster, user and context reference to the
    kind key and sets the current context to that key. It replaces the server
    only when `server` is not empty.
  - `read_config(path)` loads a kubeconfig file. A missing file gives an empty
    `Config`.
- `kindconfig.encode`: `encode(cfg)` returns YAML with sorted keys. An empty
  config encodes to `""`.
- `kindconfig.paths`: chooses files the way kubectl does. An explicit path wins.
  Otherwise the entries of `$KUBECONFIG` are used, with empty entries and
  duplicates removed. Otherwise `$HOME/.kube/config` is used.
  - `paths`, `path_for_merge`, `file_exists` and `discard_empty_and_duplicates`
    implement this choice.
  - `home_dir(goos, get_env)` also implements the Windows lookup through HOME,
    HOMEDRIVE+HOMEPATH and USERPROFILE.
- `kindconfig.lock`:
  - `lock_file` and `unlock_file` create and remove a `<file>.lock` lock file.
  - `locked(filename)` is a context manager around the same lock. It raises
    `KubeconfigError` when the lock is already held.
- `kindconfig.write`: `write_config(cfg, path)` encodes the config and writes
  it. It creates missing directories with mode 0755, and a new file is created
  with mode 0600.
- `kindconfig.merge`:
  - `merge(existing, kind)` inserts or replaces the kind cluster, user and
    context entries, then sets the current context.
  - `write_merged(kind_config, path)` does the same to the file kubectl would
    merge into, holding the lock while it reads and writes.
- `kindconfig.remove`:
  - `remove(cfg, name)` drops the cluster's entries and clears a current
    context that points at it. It returns whether anything changed.
  - `remove_kind(name, path)` applies `remove` to every kubeconfig kubectl
    would consult. It rewrites only the files that changed.
- `kindconfig.loadbalancer`:
  - `render_config(ConfigData(...))` renders the haproxy configuration.
    Backend servers are sorted by name, and `ipv6=True` adds an IPv6 bind.
  - `IMAGE` and `CONFIG_PATH` name the haproxy image and the path of its
    configuration file inside the image.
- `kindconfig.logs`: `untar(stream, directory, logger=None)` unpacks a tar
  stream into a directory that must already exist.
  - Regular files and directories are recreated.
  - Other entry types are skipped, and the logger warns about each one.
  - Any bytes after the archive are consumed.

## Installation

```
pip install .
```

## Usage

```python
from kindconfig.read import kind_from_raw_kubeadm
from kindconfig.merge import write_merged
from kindconfig.remove import remove_kind

with open("admin.conf") as f:
    cfg = kind_from_raw_kubeadm(f.read(), "dev", "https://127.0.0.1:6443")

# An empty path selects the file the way kubectl would.
write_merged(cfg, "")

# Later, when the cluster is deleted:
remove_kind("dev", "")
```

To render a load balancer configuration:

```python
from kindconfig.loadbalancer import ConfigData, render_config

print(render_config(ConfigData(
    control_plane_port=6443,
    backend_servers={"dev-control-plane": "dev-control-plane:6443"},
    ipv6=False,
)))
```

Kubeconfig problems are raised as `kindconfig.kubeconfig_types.KubeconfigError`.
These include malformed YAML, a kubeadm kubeconfig without exactly one entry of
each kind, a held lock, and write failures.

## What it does not do

This is a library only and has no command-line interface. It does not create or
delete clusters, and it does not talk to nodes or container runtimes. Fetching
the admin kubeconfig from a node and streaming log archives out of one are left
to the caller. The caller passes in the resulting text or byte stream.

## Running the tests

```
pip install .[test]
pytest
```