"""
Tests for IdentifierGenerator
"""

import pytest

from damm_checksum import IdentifierGenerator, InvalidInputError, validate


class TestInit:
    def test_defaults(self) -> None:
        generator = IdentifierGenerator()
        assert generator.prefix == ""
        assert generator.serial_width == 10
        assert generator.length == 11

    def test_length_counts_prefix_and_check_digit(self) -> None:
        assert IdentifierGenerator("40", 6).length == 9

    def test_non_digit_prefix_rejected(self) -> None:
        with pytest.raises(InvalidInputError):
            IdentifierGenerator("4A")

    @pytest.mark.parametrize("width", [0, -1, 2.5, "6"])
    def test_bad_serial_width_rejected(self, width) -> None:
        with pytest.raises(ValueError):
            IdentifierGenerator("40", width)


class TestGenerate:
    def test_known_identifier(self) -> None:
        generator = IdentifierGenerator(prefix="40", serial_width=6)
        assert generator.generate(1234) == "400012346"

    def test_generated_identifiers_validate(self) -> None:
        generator = IdentifierGenerator(prefix="977", serial_width=4)
        for serial in (0, 1, 42, 999, 9999):
            identifier = generator.generate(serial)
            assert len(identifier) == generator.length
            assert identifier.startswith("977")
            assert generator.validate(identifier)
            assert validate(identifier)

    def test_serial_too_large(self) -> None:
        generator = IdentifierGenerator(serial_width=3)
        with pytest.raises(ValueError, match="does not fit"):
            generator.generate(1000)

    @pytest.mark.parametrize("serial", [-1, 1.0, "12"])
    def test_bad_serial(self, serial) -> None:
        with pytest.raises(ValueError):
            IdentifierGenerator().generate(serial)


class TestValidate:
    def setup_method(self) -> None:
        self.generator = IdentifierGenerator(prefix="40", serial_width=6)

    def test_valid(self) -> None:
        assert self.generator.validate("400012346")

    def test_bad_check_digit(self) -> None:
        assert not self.generator.validate("400012347")

    def test_wrong_length(self) -> None:
        assert not self.generator.validate("40001234")
        assert not self.generator.validate("4000123460")

    def test_wrong_prefix(self) -> None:
        other = IdentifierGenerator(prefix="41", serial_width=6).generate(1234)
        assert validate(other)
        assert not self.generator.validate(other)

    def test_non_digit(self) -> None:
        assert not self.generator.validate("40001x346")


class TestGetSerial:
    def test_round_trip(self) -> None:
        generator = IdentifierGenerator(prefix="5", serial_width=8)
        for serial in (0, 7, 12345678):
            assert generator.get_serial(generator.generate(serial)) == serial

    def test_empty_prefix(self) -> None:
        generator = IdentifierGenerator(serial_width=3)
        assert generator.get_serial("5724") == 572

    def test_invalid_identifier(self) -> None:
        with pytest.raises(ValueError, match="Invalid identifier"):
            IdentifierGenerator(prefix="40", serial_width=6).get_serial("400012347")
