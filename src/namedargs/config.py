from dataclasses import dataclass

INT64_MAX = 2**63 - 1


@dataclass(slots=True, frozen=True)
class ParserConfig:
    max_integer: int = INT64_MAX
    max_input_length: int | None = None

    def __post_init__(self) -> None:
        if self.max_integer < 0:
            raise ValueError(f"max_integer must be non-negative, got {self.max_integer}")
        if self.max_input_length is not None and self.max_input_length <= 0:
            raise ValueError(
                f"max_input_length must be positive, got {self.max_input_length}"
            )


DEFAULT_CONFIG = ParserConfig()
