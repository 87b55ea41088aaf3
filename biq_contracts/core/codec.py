import json
import math
from typing import Iterator, List, Type, TypeVar, Union

from pydantic import BaseModel, TypeAdapter, ValidationError

from biq_contracts.core import config
from biq_contracts.core.errors import DecodeError, EncodeError
from biq_contracts.utils.logger import get_logger

logger = get_logger(__name__)

M = TypeVar("M", bound=BaseModel)

Payload = Union[str, bytes, bytearray, dict]


def _non_finite(value, path: str) -> Iterator[str]:
    if isinstance(value, float):
        if not math.isfinite(value):
            yield path
    elif isinstance(value, dict):
        for key, item in value.items():
            yield from _non_finite(item, f"{path}.{key}" if path else str(key))
    elif isinstance(value, list):
        for index, item in enumerate(value):
            yield from _non_finite(item, f"{path}.{index}" if path else str(index))


def _check_finite(record: BaseModel) -> None:
    # JSON has no NaN or infinity; writing them as null would read back as absent.
    fields = list(_non_finite(record.model_dump(by_alias=True, exclude_none=True), ""))
    if fields:
        model = type(record).__name__
        logger.warning("encode_failed", model=model, fields=fields)
        raise EncodeError(model, fields)


# Absent optional fields are left out rather than written as null.
def encode(record: BaseModel) -> str:
    _check_finite(record)
    return record.model_dump_json(by_alias=True, exclude_none=True)


def encode_bytes(record: BaseModel) -> bytes:
    return encode(record).encode("utf-8")


def encode_many(records: List[BaseModel]) -> str:
    for record in records:
        _check_finite(record)
    items = [record.model_dump(mode="json", by_alias=True, exclude_none=True) for record in records]
    return json.dumps(items, ensure_ascii=False, separators=(",", ":"))


def _fail(model: str, exc: ValidationError, payload) -> DecodeError:
    error = DecodeError.from_validation_error(model, exc)
    context = {"model": model, "errors": error.errors}
    if config.LOG_DECODE_PAYLOADS:
        if isinstance(payload, (bytes, bytearray)):
            payload = bytes(payload).decode("utf-8", "replace")
        context["payload"] = payload
    logger.warning("decode_failed", **context)
    return error


def decode(model: Type[M], payload: Payload) -> M:
    """Build ``model`` from a JSON document or an already parsed dict.

    Missing keys and null both mean absent. Unknown keys are ignored.
    """
    try:
        if isinstance(payload, dict):
            return model.model_validate(payload)
        return model.model_validate_json(payload)
    except ValidationError as exc:
        raise _fail(model.__name__, exc, payload) from exc


def decode_many(model: Type[M], payload: Union[str, bytes, bytearray, list]) -> List[M]:
    # one bad item fails the whole list
    adapter = TypeAdapter(List[model])
    try:
        if isinstance(payload, (str, bytes, bytearray)):
            return adapter.validate_json(payload)
        return adapter.validate_python(payload)
    except ValidationError as exc:
        raise _fail(f"List[{model.__name__}]", exc, payload) from exc
