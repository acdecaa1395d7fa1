"""
Run Config
==========
Immutable settings for one annotation run.

Built once at startup from ``docgen.core.config`` and handed to the walker,
annotator and policy factory. Nothing reads the config module after this
object exists, so tests can build a RunConfig directly.
"""
import os
from dataclasses import dataclass
from typing import Tuple

from docgen.core import config
from docgen.core.constants import SOURCE_SUFFIXES, POLICIES


@dataclass(frozen=True)
class RunConfig:
    """Per-run settings. Frozen: never mutated once the run starts."""
    root_dir: str
    ignore_config_path: str = ".ignoreconfig"
    suffixes: Tuple[str, ...] = SOURCE_SUFFIXES
    policy: str = "replace"
    trim_leading: int = 1
    trim_trailing: int = 2
    max_concurrency: int = 4
    provider: str = "gemini"
    results_path: str = ""

    def __post_init__(self) -> None:
        if self.policy not in POLICIES:
            raise ValueError(
                f"Unknown annotation policy {self.policy!r}; expected one of {POLICIES}"
            )
        if self.max_concurrency < 1:
            raise ValueError("max_concurrency must be at least 1")
        if self.trim_leading < 0 or self.trim_trailing < 0:
            raise ValueError("trim line counts must not be negative")

    @classmethod
    def from_env(cls, root_dir: str) -> "RunConfig":
        """Build a RunConfig for ``root_dir`` from the environment-backed config module."""
        return cls(
            root_dir=root_dir,
            ignore_config_path=os.path.join(root_dir, config.IGNORE_CONFIG_FILE),
            policy=config.ANNOTATION_POLICY.strip().lower(),
            trim_leading=config.TRIM_LEADING_LINES,
            trim_trailing=config.TRIM_TRAILING_LINES,
            max_concurrency=config.MAX_CONCURRENCY,
            provider=config.LLM_PROVIDER.strip().lower(),
            results_path=config.RESULTS_PATH,
        )
