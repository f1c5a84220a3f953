from __future__ import annotations

from dataclasses import asdict, dataclass, fields
from typing import Any, Mapping, cast

from moxie.core.keys import KEY_STRATEGIES, KeyStrategy
from moxie.core.report import DEFAULT_ABSENT_TOKEN


@dataclass(frozen=True)
class MoxieConfig:
    key_strategy: KeyStrategy = "repr"
    absent_token: str = DEFAULT_ABSENT_TOKEN
    thread_check: bool = False
    verbose: bool = False

    def __post_init__(self) -> None:
        _validate_config(self)

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, raw: Mapping[str, Any] | None) -> MoxieConfig:
        if raw is None:
            return cls()
        if not isinstance(raw, Mapping):
            raise ValueError("Config must be a mapping.")

        known = {f.name for f in fields(cls)}
        unknown = sorted(set(raw) - known)
        if unknown:
            raise ValueError(f"Unknown config keys: {unknown}")

        return cls(
            key_strategy=parse_key_strategy(raw.get("key_strategy")),
            absent_token=str(_coalesce(raw.get("absent_token"), DEFAULT_ABSENT_TOKEN)),
            thread_check=bool(_coalesce(raw.get("thread_check"), False)),
            verbose=bool(_coalesce(raw.get("verbose"), False)),
        )


def parse_key_strategy(raw: str | None) -> KeyStrategy:
    if raw is None:
        return "repr"
    cleaned = str(raw).strip().lower()
    if cleaned not in KEY_STRATEGIES:
        choices = ", ".join(KEY_STRATEGIES)
        raise ValueError(f"Unsupported key strategy '{cleaned}'. Supported values: {choices}")
    return cast(KeyStrategy, cleaned)


def _coalesce(value: Any, default: Any) -> Any:
    return value if value is not None else default


def _validate_config(config: MoxieConfig) -> None:
    if config.key_strategy not in KEY_STRATEGIES:
        choices = ", ".join(KEY_STRATEGIES)
        raise ValueError(f"key_strategy must be one of: {choices}")
    if not isinstance(config.absent_token, str) or not config.absent_token.strip():
        raise ValueError("absent_token must be a non-empty string")


__all__ = ["MoxieConfig", "parse_key_strategy"]
