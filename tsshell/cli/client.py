"""
HTTP Transport Client.

Synchronous client for the database's /query and /write endpoints.
One instance is built at startup and shared by every command; the
underlying httpx connection pool is reused across requests.
"""

import base64

import httpx

from tsshell.core.exceptions import TransportError
from tsshell.core.logging import get_logger, log_with_source

logger = get_logger(__name__)

BASIC_PREFIX = "Basic "
FORM_CONTENT_TYPE = "application/x-www-form-urlencoded"


def basic_token(username: str, password: str) -> str:
    """Return the bare Base64 token for HTTP Basic auth, without a prefix."""
    raw = f"{username}:{password}".encode("utf-8")
    return base64.b64encode(raw).decode("ascii")


def authorization_header(token: str) -> str:
    """Build the Authorization value, guaranteeing a single 'Basic ' prefix."""
    if token.startswith(BASIC_PREFIX):
        token = token[len(BASIC_PREFIX):]
    return BASIC_PREFIX + token


def epoch_for(precision: str) -> str:
    """
    Map a session precision to the query 'epoch' parameter.

    rfc3339 is the server default and is requested with an empty epoch.
    """
    if precision == "rfc3339":
        return ""
    return precision


class TransportClient:
    """
    HTTP client for the query and write endpoints.

    Features:
    - POST /query with a URL-encoded form body (db, rp, q, epoch)
    - POST /write with raw line protocol
    - Basic auth header when credentials are set
    - 5 second connect timeout and 5 second read, write and pool timeouts by default

    Usage:
        client = TransportClient("127.0.0.1", 8086)
        body = client.query("telegraf", "", "show measurements", "ms")
        client.write("telegraf", "autogen", "cpu,host=a value=1")
    """

    def __init__(
        self,
        host: str,
        port: int,
        connect_timeout: float = 5.0,
        timeout: float = 5.0,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        """
        Initialize the transport client.

        Args:
            host: Database host name or address.
            port: Database HTTP port.
            connect_timeout: Seconds allowed to establish a connection.
            timeout: Seconds allowed for each read, write and pool wait.
            transport: Optional httpx transport, used to stub the network in tests.
        """
        self.host = host
        self.port = port
        self.base_url = f"http://{host}:{port}"
        self._token = ""
        self._client = httpx.Client(
            base_url=self.base_url,
            timeout=httpx.Timeout(timeout, connect=connect_timeout),
            headers={"Content-Type": FORM_CONTENT_TYPE},
            transport=transport,
        )

    def set_credentials(self, username: str, password: str) -> None:
        """Store Basic auth credentials; an empty username clears them."""
        if not username:
            self._token = ""
            return
        self._token = basic_token(username, password)

    def _headers(self) -> dict[str, str]:
        headers = {"Content-Type": FORM_CONTENT_TYPE}
        if self._token:
            headers["Authorization"] = authorization_header(self._token)
        return headers

    def _post(self, path: str, **kwargs) -> httpx.Response:
        log_with_source(logger, "transport", "debug", "Request", path=path)
        try:
            response = self._client.post(path, headers=self._headers(), **kwargs)
        except httpx.HTTPError as e:
            log_with_source(
                logger,
                "transport",
                "error",
                "Request failed",
                path=path,
                error=str(e),
            )
            raise TransportError(f"request to {self.base_url}{path} failed: {e}") from e

        log_with_source(
            logger,
            "transport",
            "debug",
            "Response",
            path=path,
            status_code=response.status_code,
        )
        return response

    def query(
        self,
        database: str,
        retention_policy: str,
        command: str,
        precision: str,
    ) -> bytes:
        """
        Send a query command and return the raw response body.

        The HTTP status is not inspected; server errors arrive in the
        body's 'error' field.

        Raises:
            TransportError: On connection, DNS or timeout failure.
        """
        form = {
            "db": database,
            "rp": retention_policy,
            "q": command,
            "epoch": epoch_for(precision),
        }
        response = self._post("/query", data=form)
        return response.content

    def write(self, database: str, retention_policy: str, payload: str) -> None:
        """
        Write line protocol. The response body is discarded.

        Raises:
            TransportError: On transport failure or a non-2xx status.
        """
        response = self._post(
            "/write",
            params={"db": database, "rp": retention_policy},
            content=payload.encode("utf-8"),
        )
        if not response.is_success:
            raise TransportError(f"write failed with status {response.status_code}")

    def close(self) -> None:
        """Release pooled connections."""
        if not self._client.is_closed:
            self._client.close()
