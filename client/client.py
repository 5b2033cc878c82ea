import grpc

from proto import chat_pb2_grpc
from config import config


class PeerClient:
    """
    Persistent connection to one peer's ChatService.
    Raises grpc.RpcError when the peer cannot be reached.
    """

    def __init__(self, address, timeout=None):
        self.address = address
        self.timeout = timeout if timeout is not None else config.RPC_TIMEOUT
        # peers are dialed directly, never through an HTTP proxy from the environment
        self.channel = grpc.insecure_channel(address.target, options=[("grpc.enable_http_proxy", 0)])
        self.stub = chat_pb2_grpc.ChatServiceStub(self.channel)

    def post(self, message):
        """
        Send one message to the peer.
        Returns the status string of the peer's reply.
        """
        response = self.stub.MessagePost(message.to_proto(), timeout=self.timeout)
        return response.status

    def close(self):
        self.channel.close()


def run(node, stream):
    """
    Console loop: every non-blank line read from stream is multicast as a chat message.
    Returns when the stream is exhausted.
    """
    for line in stream:
        text = line.strip()
        if not text:
            continue
        node.send(text)
