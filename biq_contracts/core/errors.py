from pydantic import ValidationError


class ContractError(Exception):
    pass


class DecodeError(ContractError, ValueError):
    # Unknown keys, flag bits and limit codes never end up here, only malformed input.

    def __init__(self, model: str, errors: dict):
        self.model = model
        self.errors = errors
        fields = ", ".join(f"{field}: {msg}" for field, msg in errors.items())
        super().__init__(f"cannot decode {model} ({fields})")

    @classmethod
    def from_validation_error(cls, model: str, exc: ValidationError) -> "DecodeError":
        errors = {}
        for err in exc.errors():
            loc = err["loc"]
            field = ".".join(str(part) for part in loc) if loc else "body"
            # first message per field is the useful one
            errors.setdefault(field, err["msg"])
        return cls(model, errors)

    def to_response(self) -> dict:
        return {
            "code": 422,
            "message": "Validation error",
            "errors": self.errors,
        }


class EncodeError(ContractError, ValueError):
    """A record holds a value JSON cannot carry (NaN or infinity)."""

    def __init__(self, model: str, fields: list[str]):
        self.model = model
        self.fields = fields
        super().__init__(f"cannot encode {model}, non-finite value in {', '.join(fields)}")


class FirmwareChainError(ContractError):
    def __init__(self, version: str, chain: list[str]):
        self.version = version
        self.chain = chain
        super().__init__(f"firmware chain cycles at {version}: {' -> '.join(chain)}")
