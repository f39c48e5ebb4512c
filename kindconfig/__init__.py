"""Kubeconfig management, haproxy load balancer configs and log unpacking for kind clusters."""

__version__ = "0.1.0"