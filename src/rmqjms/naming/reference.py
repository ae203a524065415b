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
"""Reference — the address-list shape a container's naming service hands over."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class RefAddr:
    """A single named address entry; ``content`` may be None."""

    addr_type: str
    content: Any = None


@dataclass
class Reference:
    """Ordered collection of :class:`RefAddr` entries plus the target class name.

    Lookups by address type return the first matching entry, so a later
    duplicate never shadows an earlier one.
    """

    class_name: str | None
    addrs: list[RefAddr] = field(default_factory=list)
    factory: str | None = None

    @classmethod
    def of(cls, class_name: str | None, properties: dict[str, Any] | None = None, **kwargs: Any) -> Reference:
        """Build a reference whose entries come from a mapping, in insertion order."""
        return cls(class_name, [RefAddr(k, v) for k, v in (properties or {}).items()], **kwargs)

    def add(self, addr: RefAddr) -> None:
        self.addrs.append(addr)

    def extend(self, addrs: Iterable[RefAddr]) -> None:
        self.addrs.extend(addrs)

    def get(self, addr_type: str) -> RefAddr | None:
        for addr in self.addrs:
            if addr.addr_type == addr_type:
                return addr
        return None

    def __iter__(self) -> Iterator[RefAddr]:
        return iter(self.addrs)

    def __len__(self) -> int:
        return len(self.addrs)
