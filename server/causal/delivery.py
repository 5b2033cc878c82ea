# server/causal/delivery.py
import threading

from common import utils


class DeliveryEngine:
    """
    Causal delivery of inbound chat messages.
    - Holds received messages in a pending buffer until the local clock
      satisfies the causal delivery condition for them.
    - Delivering one message may unblock others, so delivery runs to a
      fixed point after every submit.
    - submit, attempt_delivery and tick are serialized by a single lock.

    on_deliver is called with that lock held. It must not call back into the
    engine (including its read properties) or into ChatNode.send, or it will
    deadlock; slow or re-entrant work belongs on another thread.
    If on_deliver raises, the message stays delivered and the error
    propagates out of submit/attempt_delivery.
    """

    def __init__(self, clock, on_deliver=None):
        self.lock = threading.Lock()
        self._clock = clock
        self._pending = []
        self._delivered = []
        self._on_deliver = on_deliver

    @property
    def clock(self):
        with self.lock:
            return self._clock.snapshot()

    @property
    def clock_size(self):
        return len(self._clock)

    @property
    def self_index(self):
        return self._clock.self_index

    @property
    def pending(self):
        with self.lock:
            return tuple(self._pending)

    @property
    def delivered(self):
        with self.lock:
            return tuple(self._delivered)

    def tick(self):
        """Increment the local clock for an outgoing message and return its timestamp."""
        with self.lock:
            ts = self._clock.increment()
        utils.log_event(f"[DELIVERY] Incremented my clock: {ts}")
        return ts

    def validate(self, message):
        """Raise ValueError if message was stamped for a different peer set."""
        size = len(self._clock)
        if len(message.timestamp) != size:
            raise ValueError(
                f"timestamp {message.timestamp} does not match clock size {size}"
            )
        if not 0 <= message.sender_index < size:
            raise ValueError(f"sender index {message.sender_index} outside clock of size {size}")

    def submit(self, message):
        """
        Entry point for inbound messages: buffer, then deliver whatever became deliverable.
        Raises ValueError for a message stamped for a different peer set.
        """
        self.validate(message)
        with self.lock:
            utils.log_event(f"[DELIVERY] Received {message} {message.timestamp}")
            self._pending.append(message)
            try:
                return self._deliver_pending()
            finally:
                utils.log_event(f"[DELIVERY] Current buffer: [{self._describe_pending()}]")

    def attempt_delivery(self):
        with self.lock:
            return self._deliver_pending()

    def _deliver_pending(self):
        # caller holds self.lock
        delivered = []
        while True:
            progressed = False
            for message in list(self._pending):
                if self._clock.can_deliver(message.timestamp, message.sender_index):
                    # out of the buffer before the callback can fail
                    self._pending.remove(message)
                    self._clock.merge(message.timestamp)
                    utils.log_event(f"[DELIVERY] Updated my clock: {self._clock}")
                    self._delivered.append(message)
                    delivered.append(message)
                    progressed = True
                    if self._on_deliver is not None:
                        self._on_deliver(message)
            if not progressed:
                break
        return delivered

    def _describe_pending(self):
        return ", ".join(f"{m.payload}{m.timestamp}" for m in self._pending)
