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
"""Unified exception hierarchy for rmqjms.

All library exceptions inherit from RmqJmsException, enabling unified
error handling across modules.

Categories:
- NamingException: a property source could not be resolved into an object
- JMSException: a connection factory or destination rejected a value
"""

from __future__ import annotations


# =============================================================================
# Base Exception
# =============================================================================


class RmqJmsException(Exception):
    """Base exception for all rmqjms errors.

    Carries an optional error code and context dict for structured error data.

    Args:
        message: Human-readable error description.
        code: Machine-readable error code (e.g. "NAMING_MISSING_PROPERTY").
        context: Arbitrary key-value pairs for error context and debugging.
    """

    def __init__(
        self,
        message: str,
        code: str | None = None,
        context: dict | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.code = code
        self.context: dict = context if context is not None else {}


# =============================================================================
# Naming Exceptions
# =============================================================================


class NamingException(RmqJmsException):
    """Resolution of a reference or environment table failed.

    The underlying failure, if any, is chained with ``raise ... from`` and
    exposed through :attr:`root_cause`.
    """

    @property
    def root_cause(self) -> BaseException | None:
        return self.__cause__


class SourceUnavailableException(NamingException):
    """Neither a reference nor a non-empty environment table was supplied."""

    def __init__(self) -> None:
        super().__init__(
            "Unable to instantiate object: obj is not a Reference instance and environment table is empty",
            code="NAMING_SOURCE_UNAVAILABLE",
        )


class MissingPropertyException(NamingException):
    """A required property has no value."""

    def __init__(self, property_name: str, message: str | None = None, code: str = "NAMING_MISSING_PROPERTY") -> None:
        super().__init__(
            message or f"Property [{property_name}] may not be null.",
            code=code,
            context={"property": property_name},
        )
        self.property_name = property_name


class PropertyPresentButEmptyException(MissingPropertyException):
    """A required property exists in the source but carries no content."""

    def __init__(self, property_name: str) -> None:
        super().__init__(
            property_name,
            message=f"Property [{property_name}] is present but is lacking a value.",
            code="NAMING_EMPTY_PROPERTY",
        )


class InvalidNumericFormatException(NamingException):
    """An integer or long property could not be parsed."""

    def __init__(self, property_name: str, raw_value: str, type_name: str = "an integer") -> None:
        super().__init__(
            f"Property [{property_name}] is present but is not {type_name} value [{raw_value}]",
            code="NAMING_INVALID_NUMBER",
            context={"property": property_name, "value": raw_value},
        )
        self.property_name = property_name
        self.raw_value = raw_value


class UnknownClassNameException(NamingException):
    """The class name does not map to any supported object kind."""

    def __init__(self, class_name: str) -> None:
        super().__init__(
            f"Unknown class [{class_name}]",
            code="NAMING_UNKNOWN_CLASS",
            context={"class_name": class_name},
        )
        self.class_name = class_name


class TlsUnavailableException(NamingException):
    """TLS was requested but no secure transport algorithm is available."""

    def __init__(self, reason: str) -> None:
        super().__init__(
            f"Error while enabling TLS: {reason}",
            code="NAMING_TLS_UNAVAILABLE",
        )


# =============================================================================
# JMS Exceptions
# =============================================================================


class JMSException(RmqJmsException):
    """A messaging client object rejected a configuration value."""


class InvalidUriException(JMSException):
    """An AMQP URI could not be parsed or applied."""

    def __init__(self, message: str) -> None:
        super().__init__(message, code="JMS_INVALID_URI")


class SslContextUnavailableException(JMSException):
    """The requested TLS protocol is not supported by the local provider."""

    def __init__(self, protocol: str, reason: str) -> None:
        super().__init__(
            f"{protocol} not available: {reason}",
            code="JMS_SSL_UNAVAILABLE",
            context={"protocol": protocol},
        )
        self.protocol = protocol
