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
"""Object factory — resolves a reference or environment table into a RabbitMQ JMS object.

A container describes a resource either as a reference::

    Reference("javax.jms.ConnectionFactory", [RefAddr("host", "localhost"), ...])

or as an environment table carrying the class name under ``className``::

    {"className": "javax.jms.Queue", "destinationName": "orders"}

Valid class names are ``javax.jms.ConnectionFactory``,
``javax.jms.QueueConnectionFactory``, ``javax.jms.TopicConnectionFactory``,
``com.rabbitmq.jms.admin.RMQConnectionFactory``, ``javax.jms.Topic``,
``javax.jms.Queue`` and ``com.rabbitmq.jms.admin.RMQDestination``.

Connection factory properties are applied in this order, later ones
overriding earlier ones: ``uri``, ``uris``, ``host``, ``password``, ``port``,
``queueBrowserReadMax``, ``onMessageTimeoutMs``, ``channelsQos``, ``ssl``,
``terminationTimeout``, ``username``, ``virtualHost``,
``cleanUpServerNamedQueuesForNonDurableTopicsOnSessionClose`` and
``declareReplyToDestination``. A property that is absent keeps the value of
a default :class:`RMQConnectionFactory` (or the one set through ``uri``).

Destinations read ``destinationName`` and, when ``amqp`` is true,
``amqpExchangeName``, ``amqpRoutingKey`` and ``amqpQueueName``.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

import structlog

from rmqjms.admin.connection_factory import RMQConnectionFactory
from rmqjms.admin.destination import RMQDestination
from rmqjms.kernel.exceptions import (
    JMSException,
    MissingPropertyException,
    PropertyPresentButEmptyException,
    TlsUnavailableException,
)
from rmqjms.kernel.types import ObjectKind
from rmqjms.naming.kinds import dispatch
from rmqjms.naming.properties import PropertyReader
from rmqjms.naming.source import CLASS_NAME_KEY, open_property_source

logger = structlog.get_logger("rmqjms.naming.object_factory")


class RMQObjectFactory:
    """Stateless factory; every call is an independent resolution."""

    def get_object_instance(
        self,
        obj: Any,
        name: str | None = None,
        context: Any = None,
        environment: Mapping[str, Any] | None = None,
    ) -> RMQConnectionFactory | RMQDestination:
        """Resolve *obj* (a :class:`Reference`) or *environment* into an object.

        Raises:
            NamingException: if the source is unusable, a required property
                is missing, a number is malformed, the class name is unknown
                or TLS cannot be enabled.
        """
        source = open_property_source(obj, environment)
        class_name = source.class_name
        if class_name is None or not class_name.strip():
            raise MissingPropertyException(
                CLASS_NAME_KEY,
                message="Unable to instantiate object: type has not been specified",
            )

        reader = PropertyReader(source)
        kind = dispatch(class_name, reader)
        if kind is ObjectKind.CONNECTION_FACTORY:
            return self.create_connection_factory(reader, name)
        return self.create_destination(reader, name, topic=kind is ObjectKind.TOPIC)

    def create_connection_factory(self, reader: PropertyReader, name: str | None = None) -> RMQConnectionFactory:
        """Build a connection factory from built-in defaults plus the source's properties."""
        logger.debug("creating_connection_factory", name=name, origin=reader.source.origin)
        f = RMQConnectionFactory()

        # uri first; a bad uri leaves the defaults in place
        try:
            f.set_uri(reader.get_string("uri", default=f.uri))
        except JMSException as exc:
            logger.warning("connection_factory_uri_rejected", name=name, error=str(exc))

        uris = reader.get_string("uris")
        if uris is not None:
            try:
                f.set_uris([u.strip() for u in uris.split(",")])
            except JMSException as exc:
                logger.warning("connection_factory_uris_rejected", name=name, error=str(exc))

        # explicit properties override the uri
        f.host = reader.get_string("host", default=f.host)
        f.password = reader.get_string("password", default=f.password)
        f.port = reader.get_int("port", default=f.port)
        f.queue_browser_read_max = reader.get_int("queueBrowserReadMax", default=f.queue_browser_read_max)
        f.on_message_timeout_ms = reader.get_int("onMessageTimeoutMs", default=f.on_message_timeout_ms)
        f.channels_qos = reader.get_int("channelsQos", default=f.channels_qos)
        if reader.get_bool("ssl", default=f.ssl):
            try:
                f.use_ssl_protocol()
            except JMSException as exc:
                raise TlsUnavailableException(str(exc)) from exc
        f.termination_timeout = reader.get_long("terminationTimeout", default=f.termination_timeout)
        f.username = reader.get_string("username", default=f.username)
        f.virtual_host = reader.get_string("virtualHost", default=f.virtual_host)
        f.clean_up_server_named_queues_for_non_durable_topics_on_session_close = reader.get_bool(
            "cleanUpServerNamedQueuesForNonDurableTopicsOnSessionClose",
            default=f.clean_up_server_named_queues_for_non_durable_topics_on_session_close,
        )
        f.declare_reply_to_destination = reader.get_bool("declareReplyToDestination", default=True)
        return f

    def create_destination(
        self, reader: PropertyReader, name: str | None = None, topic: bool = False
    ) -> RMQDestination:
        """Build a destination; *topic* is ignored when the destination is AMQP-mapped."""
        logger.debug("creating_destination", name=name, origin=reader.source.origin, topic=topic)
        destination_name = reader.get_string("destinationName", required=True)
        if not destination_name:
            raise PropertyPresentButEmptyException("destinationName")
        if reader.get_bool("amqp", default=False):
            return RMQDestination.amqp_mapped(
                destination_name,
                reader.get_string("amqpExchangeName"),
                reader.get_string("amqpRoutingKey"),
                reader.get_string("amqpQueueName"),
            )
        return RMQDestination.plain(destination_name, is_queue=not topic)


def resolve(
    raw_input: Any,
    context_name: str | None = None,
    environment: Mapping[str, Any] | None = None,
) -> RMQConnectionFactory | RMQDestination:
    """Resolve a reference or environment table with a fresh :class:`RMQObjectFactory`."""
    return RMQObjectFactory().get_object_instance(raw_input, context_name, None, environment)
