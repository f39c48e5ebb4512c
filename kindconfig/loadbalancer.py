"""Configuration for the external load balancer that fronts the API servers."""

from __future__ import annotations

from dataclasses import dataclass, field

__all__ = ["IMAGE", "CONFIG_PATH", "ConfigData", "render_config"]

IMAGE = "kindest/haproxy:v20221220-7705dd1a"
"""The load balancer image and tag."""

CONFIG_PATH = "/usr/local/etc/haproxy/haproxy.cfg"
"""Where the configuration file lives inside the image."""

_PREAMBLE = """# generated by kind
global
  log /dev/log local0
  log /dev/log local1 notice
  daemon

resolvers docker
  nameserver dns 127.0.0.11:53

defaults
  log global
  mode tcp
  option dontlognull
  # timeouts may need tuning
  timeout connect 5000
  timeout client 50000
  timeout server 50000
  # allow to boot despite dns don't resolve backends
  default-server init-addr none

"""

_BACKEND_HEADER = """backend kube-apiservers
  option httpchk GET /healthz
  # backends are not verified yet
  """


@dataclass
class ConfigData:
    """Values substituted into the load balancer configuration."""

    control_plane_port: int = 0
    backend_servers: dict[str, str] = field(default_factory=dict)
    ipv6: bool = False


def render_config(data: ConfigData) -> str:
    """Render the haproxy configuration for data.

    Backend servers are emitted in order of their names.
    """
    if data is None:
        raise ValueError("load balancer config data is required")

    port = data.control_plane_port
    ipv6_bind = f"bind :::{port};" if data.ipv6 else ""
    frontend = (
        "frontend control-plane\n"
        f"  bind *:{port}\n"
        f"  {ipv6_bind}\n"
        "  default_backend kube-apiservers\n"
        "\n"
    )

    family = "ipv6" if data.ipv6 else "ipv4"
    servers = "".join(
        f"\n  server {name} {address} check check-ssl verify none"
        f" resolvers docker resolve-prefer {family}"
        for name, address in sorted(data.backend_servers.items())
    )

    return _PREAMBLE + frontend + _BACKEND_HEADER + servers + "\n"