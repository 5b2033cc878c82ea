from dataclasses import dataclass

from proto import chat_pb2
from server.time_sync.vector_clock import Timestamp


class MessageFormatError(ValueError):
    """Raised when a wire message cannot be decoded into a Message."""


@dataclass(frozen=True)
class Message:
    """
    A chat line as multicast to every peer.
    sender_index is the slot of the sender in the attached timestamp.
    """
    payload: str
    origin_id: str
    sender_index: int
    timestamp: Timestamp

    def __post_init__(self):
        if isinstance(self.sender_index, bool) or not isinstance(self.sender_index, int):
            raise MessageFormatError(f"sender index must be int, got {self.sender_index!r}")
        if self.sender_index != self.timestamp.self_index:
            raise MessageFormatError(
                f"sender index {self.sender_index} does not match timestamp slot {self.timestamp.self_index}"
            )

    def to_proto(self):
        return chat_pb2.ChatMessage(
            transcript=self.payload,
            oid=self.origin_id,
            sender_index=self.sender_index,
            values=self.timestamp.values,
            self_index=self.timestamp.self_index,
        )

    @classmethod
    def from_proto(cls, request):
        """Decode a ChatMessage, checking that the sender slot lies inside its timestamp."""
        try:
            timestamp = Timestamp(tuple(request.values), request.self_index)
        except (TypeError, ValueError) as e:
            raise MessageFormatError(f"malformed timestamp: {e}") from e
        return cls(request.transcript, request.oid, request.sender_index, timestamp)

    def __str__(self):
        return f"{self.origin_id}: {self.payload}"
