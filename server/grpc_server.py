# server/grpc_server.py
import argparse
import logging
import sys
from concurrent import futures

import grpc

from client import client
from common import utils
from config import config
from proto import chat_pb2_grpc
from server.broadcast.chat_service import ChatService
from server.node.membership import MembershipError, load_membership
from server.node.node_server import ChatNode


def start_server(node, host, port, max_workers=None):
    """
    Start a gRPC server exposing ChatService for node.
    Returns the server and the port it is bound to.
    """
    server = grpc.server(futures.ThreadPoolExecutor(max_workers=max_workers or config.MAX_WORKERS))
    chat_pb2_grpc.add_ChatServiceServicer_to_server(ChatService(node.engine), server)
    bound_port = server.add_insecure_port(f"{host}:{port}")
    if not bound_port:
        # older grpc releases report a failed bind as port 0 instead of raising
        raise RuntimeError(f"Failed to bind to address {host}:{port}")
    server.start()
    utils.log_event(f"[SERVER] gRPC server for {node.node_id} listening on {host}:{bound_port}")
    return server, bound_port


def serve(port=None, peers_file=None, stream=None):
    """
    Runs a chat node: loads the peer list, starts the gRPC server and
    multicasts every line typed on stream until it is closed.
    Returns the process exit status.
    """
    utils.setup_logging()
    port = port if port is not None else config.SERVER_PORT
    peers_file = peers_file or config.PEERS_FILE
    stream = stream if stream is not None else sys.stdin

    ip = config.SELF_HOST or utils.get_self_ip()
    self_id = f"{ip}/{port}"
    try:
        membership = load_membership(peers_file, self_id)
    except MembershipError as e:
        utils.log_event(f"[SERVER] {e}", logging.ERROR)
        print(f"Could not load the peers file: {e}", file=sys.stderr)
        return 1

    node = ChatNode(membership)
    try:
        server, _ = start_server(node, config.SERVER_HOST, port)
    except RuntimeError as e:
        utils.log_event(f"[SERVER] Could not start the server: {e}", logging.ERROR)
        print(f"Could not start the server: {e}", file=sys.stderr)
        node.close()
        return 1
    print("Welcome to the chat room,", node.node_id)
    print(f"Index: {membership.self_index}")

    try:
        client.run(node, stream)
    except KeyboardInterrupt:
        pass
    finally:
        utils.log_event("[SERVER] Shutting down gRPC server...")
        server.stop(config.SHUTDOWN_GRACE)
        node.close()
    return 0


def main(argv=None):
    parser = argparse.ArgumentParser(description="Causally ordered chat room peer")
    parser.add_argument("port", nargs="?", type=int, default=config.SERVER_PORT,
                        help=f"listen port (default {config.SERVER_PORT})")
    parser.add_argument("--peers", default=config.PEERS_FILE,
                        help=f"peers file (default {config.PEERS_FILE})")
    args = parser.parse_args(argv)
    return serve(port=args.port, peers_file=args.peers)


if __name__ == "__main__":
    sys.exit(main())
