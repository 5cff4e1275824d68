"""Connectivity capability interface and the assertion leaves built from it."""

from __future__ import annotations

from abc import ABC, abstractmethod

from ..models.report import TestLeaf, is_true


class ConnectionProbe(ABC):
    """Abstract base class describing the live reachability capability.

    Implementations own sockets, ICMP and SSH sessions; the verification
    engine only consumes the boolean each probe returns.
    """

    @abstractmethod
    def tcp_probe(self, host: str, port: int) -> bool:
        """Return whether a TCP connection to ``host:port`` succeeds."""

    @abstractmethod
    def udp_probe(self, host: str, port: int, timeout: float | None = None) -> bool:
        """Return whether ``host:port`` answers over UDP within ``timeout`` seconds."""

    @abstractmethod
    def ping_probe(self, host: str) -> bool:
        """Return whether ``host`` answers an ICMP echo request."""

    @abstractmethod
    def ssh_probe(self, host: str, username: str, private_key: str) -> bool:
        """Return whether an SSH session to ``host`` can be opened."""


def _connection_leaf(description: str, connected: bool, should_connect: bool) -> TestLeaf:
    outcome = "connect" if should_connect else "not connect"
    return is_true(
        f"{description} should {outcome}",
        connected is should_connect,
        f"Expected {description} to {outcome}.",
    )


class ConnectionTests:
    """Turn probe results into ``isTrue`` leaves for the external runner."""

    def __init__(self, probe: ConnectionProbe) -> None:
        self._probe = probe

    # TCP --------------------------------------------------------------
    def tcp_does_connect(self, host: str, port: int) -> TestLeaf:
        return self._tcp(host, port, should_connect=True)

    def tcp_does_not_connect(self, host: str, port: int) -> TestLeaf:
        return self._tcp(host, port, should_connect=False)

    def _tcp(self, host: str, port: int, *, should_connect: bool) -> TestLeaf:
        connected = bool(self._probe.tcp_probe(host, port))
        return _connection_leaf(f"TCP connection to {host}:{port}", connected, should_connect)

    # UDP --------------------------------------------------------------
    def udp_does_connect(self, host: str, port: int, timeout: float | None = None) -> TestLeaf:
        return self._udp(host, port, timeout, should_connect=True)

    def udp_does_not_connect(
        self, host: str, port: int, timeout: float | None = None
    ) -> TestLeaf:
        return self._udp(host, port, timeout, should_connect=False)

    def _udp(
        self, host: str, port: int, timeout: float | None, *, should_connect: bool
    ) -> TestLeaf:
        connected = bool(self._probe.udp_probe(host, port, timeout))
        return _connection_leaf(f"UDP connection to {host}:{port}", connected, should_connect)

    # ICMP -------------------------------------------------------------
    def ping_does_connect(self, host: str) -> TestLeaf:
        return _connection_leaf(f"Ping to {host}", bool(self._probe.ping_probe(host)), True)

    def ping_does_not_connect(self, host: str) -> TestLeaf:
        return _connection_leaf(f"Ping to {host}", bool(self._probe.ping_probe(host)), False)

    # SSH --------------------------------------------------------------
    def ssh_does_connect(self, host: str, username: str, private_key: str) -> TestLeaf:
        connected = bool(self._probe.ssh_probe(host, username, private_key))
        return _connection_leaf(f"SSH connection to {username}@{host}", connected, True)

    def ssh_does_not_connect(self, host: str, username: str, private_key: str) -> TestLeaf:
        connected = bool(self._probe.ssh_probe(host, username, private_key))
        return _connection_leaf(f"SSH connection to {username}@{host}", connected, False)


__all__ = ["ConnectionProbe", "ConnectionTests"]
