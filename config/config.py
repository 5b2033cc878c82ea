import os
from dotenv import load_dotenv

# Load environment variables from a .env file (optional)
NODE_ENV = os.getenv("NODE_ENV", ".env")
load_dotenv(dotenv_path=NODE_ENV)

# -------------------------------
# Node configuration
# -------------------------------
SERVER_HOST = os.getenv("SERVER_HOST", "0.0.0.0")  # listen address
SERVER_PORT = int(os.getenv("SERVER_PORT", 8081))  # default when no port argument is given
# Overrides host-name lookup when building this node's "<ip>/<port>" identity
SELF_HOST = os.getenv("SELF_HOST", "")

# -------------------------------
# Membership configuration
# -------------------------------
# One "<ip>/<port>" entry per line, e.g.
# 10.0.0.1/8081
# 10.0.0.2/8081
PEERS_FILE = os.getenv("PEERS_FILE", "peers.txt")

# -------------------------------
# Transport & timeouts
# -------------------------------
RPC_TIMEOUT = float(os.getenv("RPC_TIMEOUT", 3))  # MessagePost timeout (seconds)
MAX_WORKERS = int(os.getenv("MAX_WORKERS", 10))  # inbound gRPC thread pool
SHUTDOWN_GRACE = float(os.getenv("SHUTDOWN_GRACE", 1.0))  # seconds
# Artificial delay before sending to the i-th peer: i * SEND_STAGGER_MS
SEND_STAGGER_MS = int(os.getenv("SEND_STAGGER_MS", 0))

# -------------------------------
# Logging config
# -------------------------------
LOG_FILE = os.getenv("LOG_FILE", "chat_system.log")
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
TIMEZONE = os.getenv("TIMEZONE", "UTC")  # used when printing delivered messages
