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
"""Tests for the rmqjms exception hierarchy."""

import pytest

from rmqjms.kernel import (
    InvalidNumericFormatException,
    InvalidUriException,
    JMSException,
    MissingPropertyException,
    NamingException,
    PropertyPresentButEmptyException,
    RmqJmsException,
    SourceUnavailableException,
    SslContextUnavailableException,
    TlsUnavailableException,
    UnknownClassNameException,
)


class TestRmqJmsException:
    def test_basic_creation(self):
        exc = RmqJmsException("something went wrong")
        assert str(exc) == "something went wrong"
        assert exc.message == "something went wrong"
        assert exc.code is None
        assert exc.context == {}

    def test_context_not_shared_between_instances(self):
        exc = RmqJmsException("test")
        exc.context["key"] = "value"
        assert RmqJmsException("test2").context == {}


class TestNamingExceptions:
    @pytest.mark.parametrize(
        "exc_cls",
        [
            SourceUnavailableException,
            MissingPropertyException,
            PropertyPresentButEmptyException,
            InvalidNumericFormatException,
            UnknownClassNameException,
            TlsUnavailableException,
        ],
    )
    def test_all_are_naming_exceptions(self, exc_cls):
        assert issubclass(exc_cls, NamingException)
        assert issubclass(exc_cls, RmqJmsException)

    def test_present_but_empty_is_missing_property(self):
        exc = PropertyPresentButEmptyException("destinationName")
        assert isinstance(exc, MissingPropertyException)
        assert exc.property_name == "destinationName"
        assert exc.code == "NAMING_EMPTY_PROPERTY"
        assert str(exc) == "Property [destinationName] is present but is lacking a value."

    def test_missing_property_message(self):
        exc = MissingPropertyException("destinationName")
        assert str(exc) == "Property [destinationName] may not be null."
        assert exc.code == "NAMING_MISSING_PROPERTY"
        assert exc.context == {"property": "destinationName"}

    def test_invalid_number_carries_raw_value(self):
        exc = InvalidNumericFormatException("port", "abc")
        assert exc.raw_value == "abc"
        assert "[port]" in str(exc)
        assert "[abc]" in str(exc)

    def test_unknown_class_message(self):
        exc = UnknownClassNameException("java.lang.String")
        assert str(exc) == "Unknown class [java.lang.String]"
        assert exc.class_name == "java.lang.String"

    def test_root_cause_is_chained_exception(self):
        cause = ValueError("bad")
        try:
            raise InvalidNumericFormatException("port", "x") from cause
        except NamingException as exc:
            assert exc.root_cause is cause

    def test_root_cause_defaults_to_none(self):
        assert SourceUnavailableException().root_cause is None


class TestJMSExceptions:
    def test_jms_exceptions_are_not_naming_exceptions(self):
        assert issubclass(InvalidUriException, JMSException)
        assert issubclass(SslContextUnavailableException, JMSException)
        assert not issubclass(JMSException, NamingException)

    def test_ssl_unavailable_carries_protocol(self):
        exc = SslContextUnavailableException("TLSv9", "unknown protocol")
        assert exc.protocol == "TLSv9"
        assert str(exc) == "TLSv9 not available: unknown protocol"
