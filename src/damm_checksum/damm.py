"""
Damm Checksum Algorithm
Computes and validates a single decimal check digit
"""

import logging

logger = logging.getLogger(__name__)


class InvalidInputError(ValueError):
    """Raised when a digit string contains a non-digit symbol"""

    def __init__(self, symbol: str, position: int):
        self.symbol = symbol
        self.position = position
        super().__init__(
            f"Digit strings must contain digits only, got {symbol!r} at position {position}"
        )


class Damm:
    """
    Implementation of the Damm checksum algorithm

    The check digit is the final state of a fold over the digits through a
    quasigroup of order 10. Leading zeros don't change the result.
    """

    # Quasigroup table, row = current state, column = next digit
    table = (
        (0, 3, 1, 7, 5, 9, 8, 6, 4, 2),
        (7, 0, 9, 2, 1, 5, 4, 8, 6, 3),
        (4, 2, 0, 6, 8, 7, 1, 3, 5, 9),
        (1, 7, 5, 0, 9, 8, 3, 4, 2, 6),
        (6, 1, 2, 3, 0, 4, 5, 9, 7, 8),
        (3, 6, 7, 4, 2, 0, 9, 5, 8, 1),
        (5, 8, 6, 9, 7, 2, 0, 1, 3, 4),
        (8, 9, 4, 5, 3, 6, 2, 0, 1, 7),
        (9, 4, 3, 8, 6, 1, 7, 2, 0, 5),
        (2, 5, 8, 1, 4, 3, 6, 7, 9, 0),
    )

    @classmethod
    def advance(cls, state: int, digit: int) -> int:
        """Next state after folding one digit into the current state"""
        return cls.table[state][digit]

    @classmethod
    def _fold(cls, digits: str) -> int:
        state = 0
        for position, symbol in enumerate(digits):
            # ASCII only, str.isdigit() would accept other scripts
            if not '0' <= symbol <= '9':
                raise InvalidInputError(symbol, position)
            state = cls.advance(state, ord(symbol) - ord('0'))
        return state

    @classmethod
    def check_digit(cls, digits: str) -> str:
        """
        Calculate Damm check digit

        Args:
            digits: Decimal digit string to calculate check digit for

        Returns:
            Check digit as a single character ('0' for an empty string)

        Raises:
            InvalidInputError: If digits contains a non-digit symbol
        """
        return str(cls._fold(digits))

    @classmethod
    def append(cls, digits: str) -> str:
        """Return digits with their check digit appended"""
        return digits + cls.check_digit(digits)

    @classmethod
    def validate(cls, digits: str) -> bool:
        """
        Validate a number with Damm check digit

        Args:
            digits: Number including check digit

        Returns:
            True if valid, False otherwise (including non-digit input)
        """
        try:
            state = cls._fold(digits)
        except InvalidInputError as e:
            logger.debug("Damm: rejected %r: %s", digits, e)
            return False

        if state != 0:
            logger.debug("Damm: %r ends in state %d", digits, state)
            return False
        return True


def check_digit(digits: str) -> str:
    """Shortcut for Damm.check_digit"""
    return Damm.check_digit(digits)


def append_check_digit(digits: str) -> str:
    """Shortcut for Damm.append"""
    return Damm.append(digits)


def validate(digits: str) -> bool:
    """Shortcut for Damm.validate"""
    return Damm.validate(digits)
