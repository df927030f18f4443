import typing

import pydantic as pc

# Non-finite floats must survive a JSON round trip, NaN marks a degenerate result
ScalarConfig = pc.ConfigDict(ser_json_inf_nan="constants")


def clamp_normalized(value: float) -> float:
    """Clamp to the closed interval [0, 1]. NaN is passed through."""
    if value > 1.0:
        return 1.0
    if value < 0.0:
        return 0.0
    return value


def clamp_non_negative(value: float) -> float:
    """Clamp to [0, +inf). NaN is passed through."""
    if value < 0.0:
        return 0.0
    return value


Normalized: typing.TypeAlias = typing.Annotated[
    float, pc.AfterValidator(clamp_normalized)
]

NonNegative: typing.TypeAlias = typing.Annotated[
    float, pc.AfterValidator(clamp_non_negative)
]

Channel: typing.TypeAlias = typing.Annotated[int, pc.Field(ge=0, le=255)]

NormalizedAdapter = pc.TypeAdapter(Normalized, config=ScalarConfig)
NonNegativeAdapter = pc.TypeAdapter(NonNegative, config=ScalarConfig)


def normalized(value: float) -> float:
    return NormalizedAdapter.validate_python(value)


def non_negative(value: float) -> float:
    return NonNegativeAdapter.validate_python(value)
