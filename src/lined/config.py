"""Editor configuration and constants."""

from __future__ import annotations

import os
from dataclasses import dataclass, replace
from typing import Mapping, Optional

ENV_PREFIX = "LINED_"

DEFAULT_SENTINEL = "."
DEFAULT_NUMBER_WIDTH = 4
DEFAULT_FAREWELL = "Goodbye!"
DEFAULT_SWAP_SUFFIX = ".swp"

# Characters with a meaning inside address prefixes.
ADDRESS_CHARACTERS = "^$,+-"


@dataclass(frozen=True, slots=True)
class EditorConfig:
    """Settings shared by the parser, the handlers and the hosts."""

    sentinel: str = DEFAULT_SENTINEL
    number_width: int = DEFAULT_NUMBER_WIDTH
    farewell: str = DEFAULT_FAREWELL
    swap_suffix: str = DEFAULT_SWAP_SUFFIX
    prompt: str = ""

    def __post_init__(self) -> None:
        if (
            len(self.sentinel) != 1
            or self.sentinel.isalnum()
            or self.sentinel.isspace()
            or self.sentinel in ADDRESS_CHARACTERS
        ):
            raise ValueError(
                f"sentinel must be a single punctuation character, got {self.sentinel!r}"
            )
        if self.number_width < 1:
            raise ValueError("number_width must be positive")
        if not self.swap_suffix:
            raise ValueError("swap_suffix cannot be empty")

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "EditorConfig":
        env = os.environ if environ is None else environ

        def _get(name: str, default: str) -> str:
            return env.get(f"{ENV_PREFIX}{name}", default)

        width = _get("NUMBER_WIDTH", str(DEFAULT_NUMBER_WIDTH))
        try:
            number_width = int(width)
        except ValueError as exc:
            raise ValueError(f"{ENV_PREFIX}NUMBER_WIDTH must be an integer") from exc

        return cls(
            sentinel=_get("SENTINEL", DEFAULT_SENTINEL),
            number_width=number_width,
            farewell=_get("FAREWELL", DEFAULT_FAREWELL),
            swap_suffix=_get("SWAP_SUFFIX", DEFAULT_SWAP_SUFFIX),
            prompt=_get("PROMPT", ""),
        )

    def override(self, **changes: object) -> "EditorConfig":
        """Return a copy with every non-``None`` change applied."""

        values = {key: value for key, value in changes.items() if value is not None}
        return replace(self, **values)


__all__ = ["EditorConfig", "ENV_PREFIX"]
