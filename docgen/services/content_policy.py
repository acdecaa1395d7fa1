"""
Content Policy
==============
Turns a generated response into the new file content.

Policies (exactly one per run, chosen by ANNOTATION_POLICY):

    replace  — the response replaces the whole file. The backend wraps the
               annotated code in a preamble line and a closing fence plus
               trailing line, so ``leading`` lines are dropped from the top
               and ``trailing`` lines from the bottom. A response too short
               to trim is not written at all.

    prepend  — the original file is kept and the raw response is placed in
               a block comment in front of it.

``apply`` returns the content to write, or None when the file must be left
as it is.
"""
from dataclasses import dataclass
from typing import Optional, Union

from docgen.core.constants import (
    BLOCK_COMMENT_OPEN, BLOCK_COMMENT_CLOSE, POLICY_REPLACE, POLICY_PREPEND,
)


@dataclass(frozen=True)
class ReplacePolicy:
    leading: int = 1
    trailing: int = 2
    name: str = POLICY_REPLACE

    def apply(self, generated: str, original: str) -> Optional[str]:
        lines = generated.split("\n")
        if len(lines) < self.leading + self.trailing:
            return None
        return "\n".join(lines[self.leading:len(lines) - self.trailing])


@dataclass(frozen=True)
class PrependPolicy:
    open_delimiter: str = BLOCK_COMMENT_OPEN
    close_delimiter: str = BLOCK_COMMENT_CLOSE
    name: str = POLICY_PREPEND

    def apply(self, generated: str, original: str) -> Optional[str]:
        return f"{self.open_delimiter}\n{generated}\n{self.close_delimiter}\n\n{original}"


ContentPolicy = Union[ReplacePolicy, PrependPolicy]


def build_policy(name: str, leading: int = 1, trailing: int = 2) -> ContentPolicy:
    """
    Return the policy object for ``name``.

    Raises
    ------
    ValueError
        If ``name`` is not "replace" or "prepend".
    """
    if name == POLICY_REPLACE:
        return ReplacePolicy(leading=leading, trailing=trailing)
    if name == POLICY_PREPEND:
        return PrependPolicy()
    raise ValueError(f"Unknown annotation policy: {name!r}")
