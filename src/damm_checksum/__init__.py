"""
damm_checksum - Damm check digit computation and validation

Usage:
    from damm_checksum import Damm, IdentifierGenerator

    # Compute and validate check digits
    Damm.check_digit("572")      # '4'
    Damm.validate("5724")        # True

    # Build identifiers with a trailing check digit
    generator = IdentifierGenerator(prefix="40", serial_width=6)
    identifier = generator.generate(1234)
    generator.validate(identifier)
"""

from .damm import (
    Damm,
    InvalidInputError,
    append_check_digit,
    check_digit,
    validate,
)
from .identifier import IdentifierGenerator

__version__ = "1.0.0"
__all__ = [
    "Damm",
    "InvalidInputError",
    "IdentifierGenerator",
    "append_check_digit",
    "check_digit",
    "validate",
]
