# server/node/node_server.py
import threading

from common import utils
from config import config
from server.broadcast.multicaster import Multicaster
from server.causal.delivery import DeliveryEngine
from server.causal.message import Message
from server.time_sync.vector_clock import VectorClock


def print_message(message):
    """Default delivery callback: show the message on the console."""
    print(f"[{utils.get_current_time(config.TIMEZONE)}] {message}")


class ChatNode:
    """
    One participant of the chat room.
    - Stamps and multicasts local messages.
    - Hands inbound messages to the causal delivery engine.
    """

    def __init__(self, membership, multicaster=None, on_deliver=None):
        self.membership = membership
        self.node_id = membership.self_id
        clock = VectorClock(membership.clock_size, membership.self_index)
        self.engine = DeliveryEngine(clock, on_deliver if on_deliver is not None else print_message)
        self.multicaster = multicaster if multicaster is not None else Multicaster(membership.peers)
        # stamping and queueing happen together so per-peer send order follows clock order
        self.send_lock = threading.Lock()

    def send(self, text):
        """
        Stamp text with the next local timestamp and multicast it.
        Returns the message and the per-peer send futures.
        """
        with self.send_lock:
            ts = self.engine.tick()
            message = Message(text, self.node_id, ts.self_index, ts)
            futures = self.multicaster.multicast(message)
        return message, futures

    def receive(self, message):
        return self.engine.submit(message)

    def close(self):
        self.multicaster.close()
