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
"""Class-name dispatch onto the closed set of object kinds."""

from __future__ import annotations

from rmqjms.kernel.exceptions import UnknownClassNameException
from rmqjms.kernel.types import ObjectKind
from rmqjms.naming.properties import PropertyReader

CONNECTION_FACTORY = "javax.jms.ConnectionFactory"
QUEUE_CONNECTION_FACTORY = "javax.jms.QueueConnectionFactory"
TOPIC_CONNECTION_FACTORY = "javax.jms.TopicConnectionFactory"
RMQ_CONNECTION_FACTORY = "com.rabbitmq.jms.admin.RMQConnectionFactory"
TOPIC = "javax.jms.Topic"
QUEUE = "javax.jms.Queue"
RMQ_DESTINATION = "com.rabbitmq.jms.admin.RMQDestination"

CONNECTION_FACTORY_CLASS_NAMES = frozenset(
    {CONNECTION_FACTORY, QUEUE_CONNECTION_FACTORY, TOPIC_CONNECTION_FACTORY, RMQ_CONNECTION_FACTORY}
)

SUPPORTED_CLASS_NAMES: tuple[str, ...] = (
    CONNECTION_FACTORY,
    QUEUE_CONNECTION_FACTORY,
    TOPIC_CONNECTION_FACTORY,
    RMQ_CONNECTION_FACTORY,
    TOPIC,
    QUEUE,
    RMQ_DESTINATION,
)


def dispatch(class_name: str, reader: PropertyReader) -> ObjectKind:
    """Map *class_name* to the kind of object to build.

    ``RMQDestination`` is the only name that consults a property: ``isQueue``
    (default true) selects a queue, false selects a topic.
    """
    if class_name in CONNECTION_FACTORY_CLASS_NAMES:
        return ObjectKind.CONNECTION_FACTORY
    if class_name == TOPIC:
        return ObjectKind.TOPIC
    if class_name == QUEUE:
        return ObjectKind.QUEUE
    if class_name == RMQ_DESTINATION:
        return ObjectKind.QUEUE if reader.get_bool("isQueue", default=True) else ObjectKind.TOPIC
    raise UnknownClassNameException(class_name)
