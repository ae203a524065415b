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
"""RMQDestination — a queue or topic, optionally mapped onto AMQP addressing."""

from __future__ import annotations

from dataclasses import dataclass

from rmqjms.kernel.types import ObjectKind

QUEUE_EXCHANGE_NAME = "jms.durable.queues"
TOPIC_EXCHANGE_NAME = "jms.durable.topic"
TEMP_QUEUE_EXCHANGE_NAME = "jms.temp.queues"
TEMP_TOPIC_EXCHANGE_NAME = "jms.temp.topic"


@dataclass(frozen=True)
class RMQDestination:
    """Immutable destination configuration.

    Plain destinations derive their exchange and routing key from the name.
    AMQP-mapped destinations carry the exchange, routing key and queue name
    they were given; such a destination is a queue exactly when it names a
    queue to consume from.
    """

    destination_name: str
    is_queue: bool = True
    is_temporary: bool = False
    amqp: bool = False
    amqp_exchange_name: str | None = None
    amqp_routing_key: str | None = None
    amqp_queue_name: str | None = None

    def __post_init__(self) -> None:
        if not self.destination_name:
            raise ValueError("destination_name must not be empty")

    @classmethod
    def plain(cls, destination_name: str, is_queue: bool, is_temporary: bool = False) -> RMQDestination:
        return cls(destination_name, is_queue=is_queue, is_temporary=is_temporary)

    @classmethod
    def amqp_mapped(
        cls,
        destination_name: str,
        exchange_name: str | None,
        routing_key: str | None,
        queue_name: str | None,
    ) -> RMQDestination:
        return cls(
            destination_name,
            is_queue=queue_name is not None,
            amqp=True,
            amqp_exchange_name=exchange_name,
            amqp_routing_key=routing_key,
            amqp_queue_name=queue_name,
        )

    @property
    def is_topic(self) -> bool:
        return not self.is_queue

    @property
    def kind(self) -> ObjectKind:
        if self.amqp:
            return ObjectKind.AMQP_MAPPED_DESTINATION
        return ObjectKind.QUEUE if self.is_queue else ObjectKind.TOPIC

    @property
    def exchange_name(self) -> str | None:
        if self.amqp:
            return self.amqp_exchange_name
        if self.is_queue:
            return TEMP_QUEUE_EXCHANGE_NAME if self.is_temporary else QUEUE_EXCHANGE_NAME
        return TEMP_TOPIC_EXCHANGE_NAME if self.is_temporary else TOPIC_EXCHANGE_NAME

    @property
    def routing_key(self) -> str | None:
        return self.amqp_routing_key if self.amqp else self.destination_name

    @property
    def queue_name(self) -> str | None:
        if self.amqp:
            return self.amqp_queue_name
        return self.destination_name if self.is_queue else None
