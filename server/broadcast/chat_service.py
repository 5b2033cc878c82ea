# server/broadcast/chat_service.py
import logging

from common import utils
from proto import chat_pb2
from proto import chat_pb2_grpc
from server.causal.message import Message, MessageFormatError


class ChatService(chat_pb2_grpc.ChatServiceServicer):
    """
    Receives chat messages multicast by peers and hands them to the
    local delivery engine.
    """

    def __init__(self, engine):
        self.engine = engine

    def MessagePost(self, request, context):
        """
        gRPC endpoint: called by a peer once per message it multicasts.
        Replies FAILED for a message this node cannot accept, ERROR when
        delivering an accepted message failed locally.
        """
        try:
            message = Message.from_proto(request)
            self.engine.validate(message)
        except (MessageFormatError, ValueError) as e:
            utils.log_event(f"[CHAT] Rejected message: {e}", logging.WARNING)
            return chat_pb2.Ack(status="FAILED", message=str(e))

        try:
            self.engine.submit(message)
        except Exception as e:
            utils.log_event(f"[CHAT] Error delivering {message}: {e!r}", logging.ERROR)
            return chat_pb2.Ack(status="ERROR", message=str(e))
        return chat_pb2.Ack(status="OK")
