"""Client configuration schema using Pydantic.

Defaults can be overridden by ~/.xbmcapi/config.json, by XBMCAPI_* environment
variables or by keyword arguments to XBMC().
"""

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class ClientConfig(BaseSettings):
    """Connection and behavior options of an XBMC client."""
    hostname: str = "localhost"
    port: int = Field(default=9090, ge=1, le=65535)  # WebSocket (TCP) port
    http_port: int = Field(default=8080, ge=1, le=65535)  # Web server port
    http_path: str = "/jsonrpc"
    http_fallback: bool = True  # Use HTTP POST when the socket is not open
    username: str = ""  # Web server credentials (HTTP only)
    password: str = ""
    ping_interval_ms: int = Field(default=500, ge=0)  # 0 disables the keep-alive
    suppress_keepalive_errors: bool = False
    allow_direct_access: bool = False  # Enables XBMC.custom()
    verbose: bool = False  # Log results of calls without a success handler
    connect_timeout_seconds: float = Field(default=5.0, gt=0)
    request_timeout_seconds: float | None = None  # None waits forever

    model_config = SettingsConfigDict(env_prefix="XBMCAPI_")

    @field_validator("hostname")
    @classmethod
    def _strip_hostname(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("hostname must not be empty")
        return value

    @field_validator("http_path")
    @classmethod
    def _leading_slash(cls, value: str) -> str:
        value = value.strip() or "/jsonrpc"
        return value if value.startswith("/") else f"/{value}"

    @property
    def socket_url(self) -> str:
        return f"ws://{self.hostname}:{self.port}/"

    @property
    def http_url(self) -> str:
        return f"http://{self.hostname}:{self.http_port}{self.http_path}"

    @property
    def http_auth(self) -> tuple[str, str] | None:
        if not self.username:
            return None
        return (self.username, self.password)

    @property
    def ping_interval_seconds(self) -> float:
        return self.ping_interval_ms / 1000.0
