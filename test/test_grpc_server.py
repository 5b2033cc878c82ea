import io
import os
import socket
import tempfile
import unittest
from unittest import mock

from common import utils
from config import config
from server import grpc_server


def free_port():
    with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as s:
        s.bind(("127.0.0.1", 0))
        return s.getsockname()[1]


class ServeTest(unittest.TestCase):
    def setUp(self):
        self.tmpdir = tempfile.TemporaryDirectory()
        self.peers_file = os.path.join(self.tmpdir.name, "peers.txt")
        patches = [
            mock.patch.object(config, "SELF_HOST", "127.0.0.1"),
            mock.patch.object(config, "SERVER_HOST", "127.0.0.1"),
            mock.patch.object(config, "LOG_FILE", os.path.join(self.tmpdir.name, "chat.log")),
            mock.patch.object(config, "SHUTDOWN_GRACE", 0),
        ]
        for p in patches:
            p.start()
            self.addCleanup(p.stop)

    def tearDown(self):
        for handler in list(utils.logger.handlers):
            utils.logger.removeHandler(handler)
            handler.close()
        self.tmpdir.cleanup()

    def test_missing_peers_file_exits_with_error(self):
        status = grpc_server.serve(port=free_port(), peers_file=self.peers_file, stream=io.StringIO(""))
        self.assertEqual(status, 1)

    def test_runs_until_input_is_exhausted(self):
        port = free_port()
        other = free_port()
        with open(self.peers_file, "w") as f:
            f.write(f"127.0.0.1/{other}\n127.0.0.1/{port}\n")
        with mock.patch("builtins.print") as printed:
            status = grpc_server.serve(port=port, peers_file=self.peers_file,
                                       stream=io.StringIO("hello\n"))
        self.assertEqual(status, 0)
        printed.assert_any_call("Welcome to the chat room,", f"127.0.0.1/{port}")
        printed.assert_any_call("Index: 1")

    def test_port_in_use_exits_with_error(self):
        port = free_port()
        with open(self.peers_file, "w") as f:
            f.write(f"127.0.0.1/{port}\n")
        failure = RuntimeError(f"Failed to bind to address 127.0.0.1:{port}")
        with mock.patch.object(grpc_server, "start_server", side_effect=failure), \
                mock.patch("builtins.print") as printed:
            status = grpc_server.serve(port=port, peers_file=self.peers_file,
                                       stream=io.StringIO("hello\n"))
        self.assertEqual(status, 1)
        for call in printed.call_args_list:
            self.assertNotIn("Welcome to the chat room,", call.args)

    def test_main_parses_port_and_peers(self):
        with mock.patch.object(grpc_server, "serve", return_value=0) as serve:
            self.assertEqual(grpc_server.main(["9001", "--peers", "room.txt"]), 0)
        serve.assert_called_once_with(port=9001, peers_file="room.txt")


if __name__ == "__main__":
    unittest.main(verbosity=2)
