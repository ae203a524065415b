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
"""Tests for PropertyReader typed extraction."""

import pytest

from rmqjms.kernel.exceptions import (
    InvalidNumericFormatException,
    MissingPropertyException,
    PropertyPresentButEmptyException,
)
from rmqjms.naming.properties import PropertyReader
from rmqjms.naming.reference import Reference
from rmqjms.naming.source import EnvironmentPropertySource, ReferencePropertySource


def _env_reader(**values) -> PropertyReader:
    return PropertyReader(EnvironmentPropertySource({"className": "javax.jms.Queue", **values}))


def _ref_reader(**values) -> PropertyReader:
    return PropertyReader(ReferencePropertySource(Reference.of("javax.jms.Queue", values)))


class TestRequiredSemantics:
    @pytest.mark.parametrize("make_reader", [_env_reader, _ref_reader])
    def test_absent_required_raises_missing(self, make_reader):
        with pytest.raises(MissingPropertyException) as exc_info:
            make_reader().get_string("destinationName", required=True)
        assert not isinstance(exc_info.value, PropertyPresentButEmptyException)
        assert exc_info.value.property_name == "destinationName"

    @pytest.mark.parametrize("make_reader", [_env_reader, _ref_reader])
    def test_present_without_content_required_raises_empty(self, make_reader):
        with pytest.raises(PropertyPresentButEmptyException):
            make_reader(destinationName=None).get_string("destinationName", required=True)

    @pytest.mark.parametrize("make_reader", [_env_reader, _ref_reader])
    def test_present_without_content_optional_returns_default(self, make_reader):
        assert make_reader(host=None).get_string("host", default="localhost") == "localhost"

    @pytest.mark.parametrize("make_reader", [_env_reader, _ref_reader])
    def test_absent_optional_returns_default(self, make_reader):
        reader = make_reader()
        assert reader.get_string("host", default="localhost") == "localhost"
        assert reader.get_string("host") is None
        assert reader.get_int("port", default=5672) == 5672
        assert reader.get_long("terminationTimeout", default=15000) == 15000
        assert reader.get_bool("ssl", default=True) is True

    def test_required_present_value(self):
        assert _env_reader(destinationName="orders").get_string("destinationName", required=True) == "orders"


class TestBooleans:
    @pytest.mark.parametrize("raw", ["true", "TRUE", "True", "tRuE"])
    def test_true_is_case_insensitive(self, raw):
        assert _env_reader(ssl=raw).get_bool("ssl") is True

    @pytest.mark.parametrize("raw", ["false", "notabool", "yes", "1", "", " true"])
    def test_anything_else_is_false(self, raw):
        assert _env_reader(ssl=raw).get_bool("ssl", default=True) is False


class TestIntegers:
    @pytest.mark.parametrize("raw,expected", [("5672", 5672), ("-1", -1), ("+42", 42), ("007", 7)])
    def test_parses_decimal(self, raw, expected):
        assert _env_reader(port=raw).get_int("port") == expected

    @pytest.mark.parametrize("raw", ["abc", "", "1.5", " 5672", "5_672", "0x10", "2147483648"])
    def test_malformed_int(self, raw):
        with pytest.raises(InvalidNumericFormatException) as exc_info:
            _env_reader(port=raw).get_int("port")
        assert exc_info.value.property_name == "port"
        assert exc_info.value.raw_value == raw
        assert isinstance(exc_info.value.root_cause, ValueError)

    def test_int_bounds(self):
        assert _env_reader(v="2147483647").get_int("v") == 2**31 - 1
        assert _env_reader(v="-2147483648").get_int("v") == -(2**31)

    def test_long_accepts_values_beyond_int(self):
        assert _env_reader(terminationTimeout="2147483648").get_long("terminationTimeout") == 2**31

    def test_long_overflow(self):
        with pytest.raises(InvalidNumericFormatException, match="long integer"):
            _env_reader(terminationTimeout="9223372036854775808").get_long("terminationTimeout")

    def test_native_int_values_are_read(self):
        assert _env_reader(port=5671).get_int("port") == 5671
