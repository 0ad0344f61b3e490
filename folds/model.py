from typing import Any, List, Sequence

from marshmallow import ValidationError
from marshmallow.fields import Field, Integer, List as ListField
from marshmallow.validate import Range

from folds.general.functional.error_handling import throw
from folds.general.model import build, required


DECIMAL_DIGITS = '0123456789'


class InvalidInput(ValueError):
    """Raised when input to a captcha computation is outside its domain."""


class DigitField(Integer):
    """A non-negative integer; booleans, floats and numeric strings are refused."""

    def __init__(self, **kwargs) -> None:
        super().__init__(strict=True, validate=Range(min=0), **kwargs)

    def _deserialize(self, value, attr, data, **kwargs):
        return (
            throw(ValidationError(f'{value!r} is a boolean, expected a non-negative integer')) if isinstance(value, bool) else
            super()._deserialize(value, attr, data, **kwargs)
        )


class DigitStringField(Field):
    def _serialize(self, value, attr, obj, **kwargs):
        return ''.join(str(digit) for digit in value)

    def _deserialize(self, value, attr, data, **kwargs):
        if not isinstance(value, str):
            raise ValidationError(f'{attr} is of type {type(value).__name__}, expected a string of digits')
        text = value.strip()
        return [
            int(c) if c in DECIMAL_DIGITS else
            throw(ValidationError(f'"{c}" at position {i} of "{text}" is not a decimal digit'))
            for i, c in enumerate(text)
        ]


Digits, DigitsSchema = build('Digits', {
    'digits': required(ListField, cls_or_instance=DigitField())
})


DigitString, DigitStringSchema = build('DigitString', {
    'digits': required(DigitStringField)
})


def _load(schema_type, payload: Any) -> List[int]:
    try:
        return schema_type().load(payload).digits
    except ValidationError as exc:
        raise InvalidInput(f'Invalid digits: {exc.messages}') from exc


def validate_digits(digits: Sequence[int]) -> List[int]:
    """Check that every element of ``digits`` is a non-negative integer.

    Raises:
        InvalidInput: If any element is negative, not an integer, or a boolean.
    """
    return _load(DigitsSchema, {'digits': digits})


def parse_digits(text: str) -> List[int]:
    """Decode a string such as ``"1122"`` into ``[1, 1, 2, 2]``.

    Raises:
        InvalidInput: If ``text`` holds anything but decimal digits and surrounding whitespace.
    """
    return _load(DigitStringSchema, {'digits': text})
