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
"""rmqjms Naming — resolve container-supplied properties into messaging objects."""

from rmqjms.naming.kinds import SUPPORTED_CLASS_NAMES, dispatch
from rmqjms.naming.object_factory import RMQObjectFactory, resolve
from rmqjms.naming.properties import PropertyReader
from rmqjms.naming.reference import RefAddr, Reference
from rmqjms.naming.source import (
    EnvironmentPropertySource,
    PropertySource,
    ReferencePropertySource,
    open_property_source,
)

__all__ = [
    "EnvironmentPropertySource",
    "PropertyReader",
    "PropertySource",
    "RMQObjectFactory",
    "RefAddr",
    "Reference",
    "ReferencePropertySource",
    "SUPPORTED_CLASS_NAMES",
    "dispatch",
    "open_property_source",
    "resolve",
]
