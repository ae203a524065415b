# Copyright 2026 Firefly Software Solutions Inc.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.
"""RMQConnectionFactory — connection settings for a RabbitMQ JMS client.

Only configuration lives here: opening connections belongs to the transport
layer that consumes this object.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from ssl import CERT_NONE, PROTOCOL_TLS_CLIENT, SSLContext, SSLError, TLSVersion
from urllib.parse import quote, unquote, urlsplit

from rmqjms.kernel.exceptions import InvalidUriException, SslContextUnavailableException

DEFAULT_USERNAME = "guest"
DEFAULT_PASSWORD = "guest"
DEFAULT_VIRTUAL_HOST = "/"
DEFAULT_HOST = "localhost"
DEFAULT_AMQP_PORT = 5672
DEFAULT_AMQP_OVER_SSL_PORT = 5671
DEFAULT_QUEUE_BROWSER_READ_MAX = 0
DEFAULT_ON_MESSAGE_TIMEOUT_MS = 2000
NO_CHANNEL_QOS = -1
DEFAULT_TERMINATION_TIMEOUT = 15_000
DEFAULT_SSL_PROTOCOL = "TLSv1.2"

_SCHEMES = ("amqp", "amqps")


@dataclass
class RMQConnectionFactory:
    """Mutable connection-factory configuration, created with built-in defaults."""

    username: str = DEFAULT_USERNAME
    password: str = DEFAULT_PASSWORD
    virtual_host: str = DEFAULT_VIRTUAL_HOST
    host: str = DEFAULT_HOST
    port: int = DEFAULT_AMQP_PORT
    queue_browser_read_max: int = DEFAULT_QUEUE_BROWSER_READ_MAX
    on_message_timeout_ms: int = DEFAULT_ON_MESSAGE_TIMEOUT_MS
    channels_qos: int = NO_CHANNEL_QOS
    ssl: bool = False
    termination_timeout: int = DEFAULT_TERMINATION_TIMEOUT
    clean_up_server_named_queues_for_non_durable_topics_on_session_close: bool = False
    declare_reply_to_destination: bool = True
    uris: list[str] = field(default_factory=list)
    ssl_context: SSLContext | None = field(default=None, compare=False, repr=False)

    @property
    def uri(self) -> str:
        """The AMQP URI equivalent to the current host, port, credentials and vhost."""
        scheme = "amqps" if self.ssl else "amqp"
        userinfo = f"{quote(self.username, safe='')}:{quote(self.password, safe='')}"
        host = f"[{self.host}]" if ":" in self.host else self.host
        return f"{scheme}://{userinfo}@{host}:{self.port}/{quote(self.virtual_host, safe='')}"

    def set_uri(self, uri: str) -> None:
        """Set host, port, credentials, vhost and TLS flag from an AMQP URI.

        Components missing from the URI take the built-in defaults, not the
        current values. An ``amqps`` URI also builds the TLS context, as
        :meth:`use_ssl_protocol` does. Nothing changes when the URI is rejected.
        """
        parsed = _parse_amqp_uri(uri)
        if parsed.ssl:
            self.use_ssl_protocol()
        else:
            self.ssl = False
            self.ssl_context = None
        self.host = parsed.host
        self.port = parsed.port
        self.username = parsed.username
        self.password = parsed.password
        self.virtual_host = parsed.virtual_host

    def set_uris(self, uris: list[str]) -> None:
        """Set the ordered list of nodes to try; the first one is applied as :attr:`uri`."""
        if not uris:
            self.uris = []
            return
        for uri in uris:
            _parse_amqp_uri(uri)
        self.uris = list(uris)
        self.set_uri(uris[0])

    def use_ssl_protocol(self, protocol: str = DEFAULT_SSL_PROTOCOL) -> None:
        """Enable TLS with a trust-all client context of at least *protocol*."""
        try:
            minimum_version = TLSVersion[protocol.replace(".", "_")]
        except KeyError as exc:
            raise SslContextUnavailableException(protocol, "unknown protocol") from exc
        try:
            context = SSLContext(PROTOCOL_TLS_CLIENT)
            context.check_hostname = False
            context.verify_mode = CERT_NONE
            context.minimum_version = minimum_version
        except (SSLError, ValueError) as exc:
            raise SslContextUnavailableException(protocol, str(exc)) from exc
        self.ssl = True
        self.ssl_context = context


@dataclass(frozen=True)
class _AmqpUri:
    ssl: bool
    host: str
    port: int
    username: str
    password: str
    virtual_host: str


def _host(netloc: str) -> str:
    """Host as written in the URI: case kept, IPv6 brackets and port removed."""
    hostinfo = netloc.rpartition("@")[2]
    if hostinfo.startswith("["):
        return hostinfo[1 : hostinfo.find("]")]
    return hostinfo.partition(":")[0]


def _parse_amqp_uri(uri: str) -> _AmqpUri:
    try:
        parts = urlsplit(uri)
        port = parts.port
    except (TypeError, ValueError) as exc:
        raise InvalidUriException(f"Could not parse AMQP URI: {exc}") from exc

    scheme = parts.scheme.lower()
    if scheme not in _SCHEMES:
        raise InvalidUriException(f"Wrong scheme in AMQP URI: {parts.scheme!r}")
    ssl = scheme == "amqps"

    virtual_host = DEFAULT_VIRTUAL_HOST
    if parts.path:
        if "/" in parts.path[1:]:
            raise InvalidUriException("Multiple segments in path of AMQP URI")
        virtual_host = unquote(parts.path[1:])

    return _AmqpUri(
        ssl=ssl,
        host=_host(parts.netloc) or DEFAULT_HOST,
        port=port if port is not None else (DEFAULT_AMQP_OVER_SSL_PORT if ssl else DEFAULT_AMQP_PORT),
        username=unquote(parts.username) if parts.username is not None else DEFAULT_USERNAME,
        password=unquote(parts.password) if parts.password is not None else DEFAULT_PASSWORD,
        virtual_host=virtual_host,
    )
