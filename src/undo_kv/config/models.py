from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, model_validator

# Config models map YAML sections to typed structures.


class StoreSection(BaseModel):
    # thread_safe wraps the store in a single re-entrant lock.
    model_config = ConfigDict(extra="forbid")
    thread_safe: bool = False


class LoggingSection(BaseModel):
    model_config = ConfigDict(extra="forbid")
    sink: Literal["none", "stdout", "jsonl"] = "none"
    path: str | None = None

    @model_validator(mode="after")
    def _require_path_for_jsonl(self) -> LoggingSection:
        if self.sink == "jsonl" and not self.path:
            raise ValueError("logging.path is required when logging.sink is jsonl")
        return self


class StoreAppConfig(BaseModel):
    # Top-level config; every section is optional and defaults to a plain, silent store.
    model_config = ConfigDict(extra="forbid")
    store: StoreSection = Field(default_factory=StoreSection)
    logging: LoggingSection = Field(default_factory=LoggingSection)
