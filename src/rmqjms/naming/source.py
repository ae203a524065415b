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
"""Property sources — one lookup interface over a reference or an environment table."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Protocol, runtime_checkable

from rmqjms.kernel.exceptions import SourceUnavailableException
from rmqjms.naming.reference import Reference

CLASS_NAME_KEY = "className"


@runtime_checkable
class PropertySource(Protocol):
    """Read-only view of the raw properties of a single resolution."""

    @property
    def class_name(self) -> str | None: ...

    @property
    def origin(self) -> str: ...

    def contains(self, name: str) -> bool:
        """Return True if an entry named *name* exists, even with no content."""
        ...

    def lookup(self, name: str) -> str | None:
        """Return the entry's content as a string, or None."""
        ...


class ReferencePropertySource:
    """Reads properties from the address entries of a :class:`Reference`."""

    def __init__(self, reference: Reference) -> None:
        self._reference = reference

    @property
    def class_name(self) -> str | None:
        return self._reference.class_name

    @property
    def origin(self) -> str:
        return "reference"

    def contains(self, name: str) -> bool:
        return self._reference.get(name) is not None

    def lookup(self, name: str) -> str | None:
        addr = self._reference.get(name)
        if addr is None or addr.content is None:
            return None
        return str(addr.content)

    def __repr__(self) -> str:
        return f"ReferencePropertySource(class_name={self.class_name!r}, entries={len(self._reference)})"


class EnvironmentPropertySource:
    """Reads properties from a name/value environment table.

    The class name is taken from the reserved ``className`` key.
    """

    def __init__(self, environment: Mapping[str, Any]) -> None:
        self._environment = environment

    @property
    def class_name(self) -> str | None:
        return self.lookup(CLASS_NAME_KEY)

    @property
    def origin(self) -> str:
        return "environment"

    def contains(self, name: str) -> bool:
        return name in self._environment

    def lookup(self, name: str) -> str | None:
        value = self._environment.get(name)
        return None if value is None else str(value)

    def __repr__(self) -> str:
        return f"EnvironmentPropertySource(class_name={self.class_name!r}, entries={len(self._environment)})"


def open_property_source(raw_input: Any, environment: Mapping[str, Any] | None) -> PropertySource:
    """Choose the single origin a resolution reads from.

    A :class:`Reference` always wins; otherwise a non-empty environment table
    is used. Anything else raises :class:`SourceUnavailableException`.
    """
    if isinstance(raw_input, Reference):
        return ReferencePropertySource(raw_input)
    if environment:
        return EnvironmentPropertySource(environment)
    raise SourceUnavailableException()
