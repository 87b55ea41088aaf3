from typing import Any, Callable

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel
from pydantic_core import core_schema


class WireModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
        frozen=True,
        from_attributes=True,
    )


def raw_int_schema(cls: type, max_value: int, build: Callable[[int], Any]) -> core_schema.CoreSchema:
    """Schema for a wrapper type that travels as a bare unsigned integer.

    Any integer in ``0..max_value`` is accepted, named or not. Python callers may
    also hand over an instance of the wrapper itself.
    """
    from_int = core_schema.no_info_after_validator_function(
        build,
        core_schema.int_schema(ge=0, le=max_value, strict=True),
    )
    return core_schema.json_or_python_schema(
        json_schema=from_int,
        python_schema=core_schema.union_schema(
            [core_schema.is_instance_schema(cls), from_int],
            custom_error_type="raw_int",
            custom_error_message=f"Input should be an integer between 0 and {max_value}",
        ),
        serialization=core_schema.plain_serializer_function_ser_schema(
            int, return_schema=core_schema.int_schema(),
        ),
    )
