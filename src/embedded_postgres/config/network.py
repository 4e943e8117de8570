"""Network endpoint the server listens on."""
from dataclasses import dataclass
from typing import List, Optional

from embedded_postgres.errors import NetworkUnavailableError
from embedded_postgres.logging import get_logger
from embedded_postgres.utils.net import get_free_server_port, get_local_host_address

logger = get_logger(__name__)


@dataclass(frozen=True)
class NetEndpoint:
    host: str
    port: int

    @classmethod
    def create(cls, host: Optional[str] = None, port: Optional[int] = None) -> "NetEndpoint":
        """Endpoint from the given values, filling gaps from the local host.

        A probed port is a snapshot: nothing holds it until the server binds it,
        so a concurrent caller or another process may grab it first.
        """
        try:
            if host is None:
                host = get_local_host_address()
            if port is None:
                port = get_free_server_port()
        except OSError as e:
            raise NetworkUnavailableError(
                f"Failed to resolve local network endpoint: {e}",
                details={"host": host, "port": port},
            ) from e

        logger.debug({"event": "endpoint_created", "host": host, "port": port})

        return cls(host=host, port=port)

    def build_command_line(self) -> List[str]:
        return ["-h", self.host, "-p", str(self.port)]
