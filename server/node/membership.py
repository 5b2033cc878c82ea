# server/node/membership.py
from dataclasses import dataclass
from typing import Tuple

from common import utils


class MembershipError(Exception):
    """The peers file is missing, unreadable or malformed."""


@dataclass(frozen=True)
class Address:
    ip: str
    port: int

    @property
    def node_id(self):
        return f"{self.ip}/{self.port}"

    @property
    def target(self):
        """gRPC dial target."""
        return f"{self.ip}:{self.port}"

    def __str__(self):
        return self.node_id


@dataclass(frozen=True)
class Membership:
    """
    Static peer set of the chat room, as seen from one process.
    peers excludes this process; self_index is this process's clock slot.
    """
    self_id: str
    self_index: int
    peers: Tuple[Address, ...]

    @property
    def clock_size(self):
        return len(self.peers) + 1


def parse_address(entry):
    """Parse an "<ip>/<port>" entry."""
    parts = entry.split("/")
    if len(parts) != 2:
        raise MembershipError(f"Expected '<ip>/<port>', got {entry!r}")
    ip, port = parts[0].strip(), parts[1].strip()
    if not ip or any(c.isspace() for c in ip):
        raise MembershipError(f"Invalid host in peer entry {entry!r}")
    if not port.isdigit() or not 1 <= int(port) <= 65535:
        raise MembershipError(f"Invalid port in peer entry {entry!r}")
    return Address(ip, int(port))


def load_membership(path, self_id):
    """
    Load the peer list from a newline-delimited file of "<ip>/<port>" entries.
    The position of an entry among the non-blank lines is that peer's clock slot;
    the entry matching self_id fixes this process's slot and is not a send target.
    """
    utils.log_event("[MEMBERSHIP] Loading addresses...")
    try:
        with open(path, "r") as f:
            lines = f.read().splitlines()
    except OSError as e:
        raise MembershipError(f"Could not read the peers file {path}: {e}") from e

    entries = [line.strip() for line in lines if line.strip()]
    me = parse_address(self_id)
    self_index = None
    peers = []
    seen = set()
    for i, entry in enumerate(entries):
        addr = parse_address(entry)
        if addr.node_id in seen:
            raise MembershipError(f"Duplicate peer entry {entry!r}")
        seen.add(addr.node_id)
        if addr == me:
            self_index = i
            continue
        peers.append(addr)

    if self_index is None:
        raise MembershipError(f"{self_id} is not listed in {path}")

    utils.log_event(f"[MEMBERSHIP] Loaded {len(peers)} addresses.")
    return Membership(me.node_id, self_index, tuple(peers))
