import string

DIGITS = string.digits + string.ascii_lowercase


class NumberUtils:
    """Utility class for numeral string operations"""

    @staticmethod
    def convert_base(value: str, base_from: int, base_to: int) -> str:
        """Convert a numeral string from one base to another.

        example:
        NumberUtils.convert_base('111', 2, 10)  # '7'
        """
        if not 2 <= base_to <= len(DIGITS):
            raise ValueError(f"Unsupported target base: {base_to}")

        number = int(value, base_from)
        if number < 0:
            raise ValueError(f"Negative numerals are not supported: {value}")
        if number == 0:
            return '0'

        digits = []
        while number:
            number, remainder = divmod(number, base_to)
            digits.append(DIGITS[remainder])
        return ''.join(reversed(digits))

    @staticmethod
    def zfill(value, length: int) -> str:
        """Fill value with leading zeros"""
        return str(value).rjust(length, '0')
