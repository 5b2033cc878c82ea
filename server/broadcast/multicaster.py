# server/broadcast/multicaster.py
import logging
import time
from concurrent.futures import ThreadPoolExecutor

from client.client import PeerClient
from common import utils
from config import config


class SendResult:
    """Outcome of sending one message to one peer."""

    def __init__(self, peer, ok, error=None):
        self.peer = peer
        self.ok = ok
        self.error = error

    def __repr__(self):
        return f"SendResult(peer={self.peer}, ok={self.ok}, error={self.error!r})"


class Multicaster:
    """
    Multicaster sends chat messages to every peer (best-effort, no retry).
    Each peer has its own single-threaded sender, so messages reach a given
    peer in the order they were multicast while peers stay independent
    of one another.
    """

    def __init__(self, peers, client_factory=PeerClient, stagger_ms=None, timeout=None):
        self.peers = tuple(peers)
        self.stagger_ms = stagger_ms if stagger_ms is not None else config.SEND_STAGGER_MS
        timeout = timeout if timeout is not None else config.RPC_TIMEOUT
        self.clients = {peer: client_factory(peer, timeout) for peer in self.peers}
        self.workers = {
            peer: ThreadPoolExecutor(max_workers=1, thread_name_prefix=f"send-{peer.port}")
            for peer in self.peers
        }

    def multicast(self, message):
        """
        Queue message for every peer. Returns one future per peer, each
        resolving to a SendResult.
        """
        futures = []
        for position, peer in enumerate(self.peers):
            delay = position * self.stagger_ms / 1000.0
            futures.append(self.workers[peer].submit(self._send, peer, message, delay))
        return futures

    def _send(self, peer, message, delay):
        if delay:
            time.sleep(delay)
        try:
            status = self.clients[peer].post(message)
        except Exception as e:
            utils.log_event(f"[MULTICAST] Could not connect to the peer {peer}: {e}", logging.WARNING)
            print(f"Could not connect to the peer {peer}")
            return SendResult(peer, False, str(e))
        if status != "OK":
            utils.log_event(f"[MULTICAST] Peer {peer} refused {message}: {status}", logging.WARNING)
            return SendResult(peer, False, status)
        utils.log_event(f"[MULTICAST] Sent {message} {message.timestamp} to {peer}")
        return SendResult(peer, True)

    def close(self):
        for worker in self.workers.values():
            worker.shutdown(wait=True)
        for client in self.clients.values():
            client.close()
