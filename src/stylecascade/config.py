from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class CascadeConfig:
    inline_style_attr: str = "style"
    indent: int = 2  # styled tree printer indentation
    log_level: str = "WARNING"
