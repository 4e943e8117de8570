import socket

from embedded_postgres.logging import get_logger

logger = get_logger(__name__)


def get_local_host_address() -> str:
    """Address the local host name resolves to."""
    return socket.gethostbyname(socket.gethostname())


def get_free_server_port(host: str = "") -> int:
    """Ask the OS for a currently unused TCP port.

    The socket is closed before returning, so the port is only known to be free
    at the moment of the probe. Another process may take it before it is bound.
    """
    with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as sock:
        sock.bind((host, 0))
        port = sock.getsockname()[1]

    logger.debug({"event": "free_port_probed", "host": host, "port": port})

    return port
