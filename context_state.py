from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict

from runtime import Module
from yamlmodule import new_module


@dataclass
class ContextState:
    """Typed wrapper around Click's context store."""

    config: Dict[str, Any] = field(default_factory=dict)
    verbose: bool = False
    quiet: bool = False
    duplicate_keys: str = "last"
    module: Module = field(default_factory=new_module)
