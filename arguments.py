"""Command line argument validation for calc_average."""

from __future__ import annotations

import re
from typing import List, Sequence

from pydantic import BaseModel, Field, ValidationError, model_validator

# -------------------------
# Messages
# -------------------------
MISSING_ARGUMENTS_MESSAGE = (
    "Please provide two positive integers as the maximum and minimum for this "
    "exercise and the number of integers to generate."
)
RANGE_MESSAGE = (
    "Please make sure your first number is less than your second number and "
    "that they are both positive integers."
)
COUNT_MESSAGE = "Please make sure the number of integers to generate is zero or more."

INTEGER_LITERAL = re.compile(r"\s*[+-]?[0-9]+\s*", re.ASCII)

ORDINALS = ("first", "second", "third")
REQUIRED_ARGUMENTS = len(ORDINALS)


class ArgumentError(ValueError):
    """Base class for invalid command line input."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class MissingArguments(ArgumentError):
    pass


class ParseError(ArgumentError):
    def __init__(self, position: int) -> None:
        super().__init__(f"Trouble converting the {ORDINALS[position]} argument to a number.")
        self.position = position


class RangeError(ArgumentError):
    pass


class SampleRequest(BaseModel):
    """Validated minimum, maximum and sample count for one run."""

    minimum: int = Field(..., description="Inclusive lower bound of the samples")
    maximum: int = Field(..., description="Inclusive upper bound of the samples")
    count: int = Field(..., description="How many samples to generate")

    @model_validator(mode="after")
    def validate_bounds(self) -> "SampleRequest":
        if self.maximum <= self.minimum or self.minimum < 0 or self.maximum < 0:
            raise ValueError(RANGE_MESSAGE)
        if self.count < 0:
            raise ValueError(COUNT_MESSAGE)
        return self


def parse_arguments(tokens: Sequence[str]) -> SampleRequest:
    """Convert the positional tokens into a validated :class:`SampleRequest`.

    Only the first three tokens are read.

    Raises:
        MissingArguments: If fewer than three tokens are given.
        ParseError: If a token is not an integer literal.
        RangeError: If the range or the count is out of bounds.
    """

    if len(tokens) < REQUIRED_ARGUMENTS:
        raise MissingArguments(MISSING_ARGUMENTS_MESSAGE)

    values: List[int] = []
    for position, token in enumerate(tokens[:REQUIRED_ARGUMENTS]):
        try:
            values.append(_to_int(token))
        except (TypeError, ValueError) as exc:
            raise ParseError(position) from exc

    minimum, maximum, count = values
    try:
        return SampleRequest(minimum=minimum, maximum=maximum, count=count)
    except ValidationError as exc:
        raise RangeError(_first_error_message(exc)) from exc


def _to_int(token: str) -> int:
    # int() alone also takes "1_000" and non-ASCII digits
    if not INTEGER_LITERAL.fullmatch(token):
        raise ValueError(f"not an integer literal: {token!r}")
    return int(token)


def _first_error_message(exc: ValidationError) -> str:
    for error in exc.errors():
        # pydantic keeps the validator's ValueError under ctx["error"]
        original = error.get("ctx", {}).get("error")
        if original is not None:
            return str(original)
    return RANGE_MESSAGE
