"""Result types returned by the validators and the list operations."""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class ValidationResult:
    """Either valid, or invalid with the first failure reason."""

    reason: str | None = None

    @classmethod
    def ok(cls) -> "ValidationResult":
        return cls()

    @classmethod
    def invalid(cls, reason: str) -> "ValidationResult":
        return cls(reason=reason)

    @property
    def is_valid(self) -> bool:
        return self.reason is None

    @property
    def message(self) -> str:
        """Wire-compatible form: empty string when valid."""
        return self.reason or ""

    def __bool__(self) -> bool:
        return self.is_valid


@dataclass
class BatchItemResult:
    """Validation outcome for one entry of a batch."""

    index: int
    valid: bool
    song_id: str | None = None
    errors: list[str] = field(default_factory=list)

    def to_dict(self) -> dict:
        """Convert to JSON-serializable dictionary, omitting absent fields."""
        result: dict = {"index": self.index, "valid": self.valid}
        if self.song_id is not None:
            result["songId"] = self.song_id
        if not self.valid:
            result["errors"] = list(self.errors)
        return result


@dataclass(frozen=True)
class InputError:
    """Structured error for payloads of the wrong shape."""

    message: str

    def to_dict(self) -> dict:
        return {"error": self.message}
