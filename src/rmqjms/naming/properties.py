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
"""Typed property reader with required/optional and default semantics."""

from __future__ import annotations

import re

from rmqjms.kernel.exceptions import (
    InvalidNumericFormatException,
    MissingPropertyException,
    PropertyPresentButEmptyException,
)
from rmqjms.naming.source import PropertySource

_DECIMAL_RE = re.compile(r"[+-]?[0-9]+")

INT_MIN, INT_MAX = -(2**31), 2**31 - 1
LONG_MIN, LONG_MAX = -(2**63), 2**63 - 1


class PropertyReader:
    """Extracts string, boolean, integer and long values from a property source.

    Every getter follows the same rules:

    - the property is absent: raise :class:`MissingPropertyException` when
      *required*, else return *default*;
    - the entry exists without content: raise
      :class:`PropertyPresentButEmptyException` when *required*, else return
      *default*;
    - otherwise the raw string is converted to the requested type.
    """

    def __init__(self, source: PropertySource) -> None:
        self._source = source

    @property
    def source(self) -> PropertySource:
        return self._source

    def _content(self, name: str, required: bool) -> str | None:
        if required and not self._source.contains(name):
            raise MissingPropertyException(name)
        content = self._source.lookup(name)
        if content is None and required:
            raise PropertyPresentButEmptyException(name)
        return content

    def get_string(self, name: str, required: bool = False, default: str | None = None) -> str | None:
        content = self._content(name, required)
        return default if content is None else content

    def get_bool(self, name: str, required: bool = False, default: bool = False) -> bool:
        """Only a case-insensitive ``"true"`` is True; any other text is False."""
        content = self._content(name, required)
        if content is None:
            return default
        return content.lower() == "true"

    def get_int(self, name: str, required: bool = False, default: int = 0) -> int:
        content = self._content(name, required)
        if content is None:
            return default
        return _parse_integral(name, content, INT_MIN, INT_MAX, "an integer")

    def get_long(self, name: str, required: bool = False, default: int = 0) -> int:
        content = self._content(name, required)
        if content is None:
            return default
        return _parse_integral(name, content, LONG_MIN, LONG_MAX, "a long integer")


def _parse_integral(name: str, content: str, lower: int, upper: int, type_name: str) -> int:
    try:
        if not _DECIMAL_RE.fullmatch(content):
            raise ValueError(f"invalid literal for base 10: {content!r}")
        value = int(content)
        if not lower <= value <= upper:
            raise ValueError(f"value {content} out of range [{lower}, {upper}]")
    except ValueError as exc:
        raise InvalidNumericFormatException(name, content, type_name) from exc
    return value
