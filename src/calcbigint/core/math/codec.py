"""
Codec — Decimal Text ↔ BigInteger

Единственное текстовое представление числа:
- Вход: необязательные пробелы, необязательный знак '+'/'-', десятичные цифры
- Выход: каноническая форма без ведущих нулей, без '+', без пробелов

Цифры группируются в limbs по 9 штук начиная с младшего конца:
последние 9 символов строки → limb 0, предыдущие 9 → limb 1, и т.д.

При форматировании старший limb выводится без дополнения нулями,
все остальные дополняются нулями до ровно 9 цифр.
"""

from typing import Final

from calcbigint.core.domain.big_integer import BigInteger
from calcbigint.core.domain.limbs import LIMB_DIGITS

# Допустимые символы цифр (str.isdigit() пропускает '²', '٣' и т.п.)
DECIMAL_DIGITS: Final[frozenset[str]] = frozenset("0123456789")


# =============================================================================
# EXCEPTIONS
# =============================================================================


class InvalidFormat(ValueError):
    """
    Текст не является десятичным целым числом.

    Возникает, если после удаления пробелов и знака остаётся символ,
    не являющийся десятичной цифрой. Размер числа никогда не является
    причиной ошибки.
    """

    def __init__(self, text: str, reason: str):
        super().__init__(f"invalid integer literal {text!r}: {reason}")
        self.text = text
        self.reason = reason


# =============================================================================
# PARSE
# =============================================================================


def parse(text: str) -> BigInteger:
    """
    Разбор десятичного текста в BigInteger.

    Args:
        text: Текст числа, например "  -000123456789012  "

    Returns:
        BigInteger в канонической форме

    Raises:
        InvalidFormat: Если встречен символ, не являющийся десятичной цифрой

    Examples:
        >>> str(parse("0042"))
        '42'
        >>> str(parse("-0"))
        '0'
        >>> parse("-").is_zero()
        True
    """
    if not isinstance(text, str):
        raise TypeError(f"text must be str, got {type(text).__name__}")

    body = text.strip()

    sign = 1
    if body[:1] in ("+", "-"):
        if body[0] == "-":
            sign = -1
        body = body[1:]

    for position, char in enumerate(body):
        if char not in DECIMAL_DIGITS:
            raise InvalidFormat(
                text, f"unexpected character {char!r} at offset {position}"
            )

    # Ведущие нули, пустая строка и голый знак дают канонический ноль
    digits = body.lstrip("0")
    if not digits:
        return BigInteger.zero()

    limbs = []
    end = len(digits)
    while end > 0:
        start = max(0, end - LIMB_DIGITS)
        limbs.append(int(digits[start:end]))
        end = start

    return BigInteger.from_limbs(sign, limbs)


# =============================================================================
# FORMAT
# =============================================================================


def format(value: BigInteger) -> str:
    """
    Каноническое десятичное представление BigInteger.

    Старший limb без дополнения, остальные — ровно 9 цифр с ведущими нулями.

    Examples:
        >>> format(BigInteger(magnitude=(7, 1), sign=-1))
        '-1000000007'
    """
    if value.is_zero():
        return "0"

    magnitude = value.magnitude
    parts = [str(magnitude[-1])]
    parts.extend(str(limb).zfill(LIMB_DIGITS) for limb in reversed(magnitude[:-1]))

    text = "".join(parts)
    if value.sign < 0:
        return "-" + text
    return text
