"""
Identifier Generator
Builds fixed-length numeric identifiers protected by a Damm check digit
"""

import logging

from .damm import Damm, InvalidInputError

logger = logging.getLogger(__name__)


class IdentifierGenerator:
    """
    Generates and validates numeric identifiers

    Identifier Format:
    - Prefix: fixed digit string (may be empty)
    - Serial: serial_width digits (zero-padded serial number)
    - Check: 1 digit (Damm check digit over prefix + serial)
    """

    def __init__(self, prefix: str = "", serial_width: int = 10):
        """
        Initialize Identifier Generator

        Args:
            prefix: Digit string every identifier starts with (e.g., "4012")
            serial_width: Number of digits reserved for the serial
        """
        for position, symbol in enumerate(prefix):
            if not '0' <= symbol <= '9':
                raise InvalidInputError(symbol, position)

        if not isinstance(serial_width, int) or serial_width < 1:
            raise ValueError(f"serial_width must be a positive integer, got {serial_width!r}")

        self.prefix = prefix
        self.serial_width = serial_width

    @property
    def length(self) -> int:
        """Total identifier length including the check digit"""
        return len(self.prefix) + self.serial_width + 1

    def generate(self, serial: int) -> str:
        """
        Generate a valid identifier

        Args:
            serial: Non-negative serial number

        Returns:
            Identifier string of self.length digits
        """
        if not isinstance(serial, int) or serial < 0:
            raise ValueError(f"serial must be a non-negative integer, got {serial!r}")

        part = str(serial).zfill(self.serial_width)
        if len(part) > self.serial_width:
            raise ValueError(
                f"serial {serial} does not fit in {self.serial_width} digits"
            )

        return Damm.append(self.prefix + part)

    def get_serial(self, identifier: str) -> int:
        """
        Extract the serial number from an identifier

        Args:
            identifier: Identifier produced by this generator

        Returns:
            Serial number
        """
        if not self.validate(identifier):
            raise ValueError(f"Invalid identifier: {identifier!r}")

        return int(identifier[len(self.prefix):-1])

    def validate(self, identifier: str) -> bool:
        """
        Validate an identifier

        Args:
            identifier: Identifier including check digit

        Returns:
            True if valid, False otherwise
        """
        if len(identifier) != self.length:
            logger.debug(
                "Identifier %r has length %d, expected %d",
                identifier, len(identifier), self.length
            )
            return False

        if not identifier.startswith(self.prefix):
            logger.debug("Identifier %r does not start with %r", identifier, self.prefix)
            return False

        return Damm.validate(identifier)
