"""
Tree Walker
===========
Recursively walks a directory and hands eligible files to the Annotator.

Per directory entry:
    1. full path = join(directory, name)
    2. ignored by pattern         → skipped, no recursion
    3. stat fails                 → logged, entry skipped
    4. directory                  → walked recursively
    5. file ending in a suffix    → annotated
    6. anything else              → ignored

Scheduling:
    - Listing order is whatever os.listdir returns (not sorted)
    - Children of a directory run concurrently and are joined with
      asyncio.gather before the directory's walk returns, so walk(root)
      returns only once the whole tree is finished
    - At most ``max_concurrency`` annotations are in flight at any time
    - Blocking filesystem calls run in worker threads

A directory listing failure skips that subtree only. Each real directory is
descended at most once, which cuts symlink cycles.
"""
import asyncio
import logging
import os
import stat
from typing import Iterable, Optional, Set, Tuple

from docgen.agents.annotator import Annotator
from docgen.core.constants import SOURCE_SUFFIXES
from docgen.models.run_summary import PathError, RunSummary
from docgen.utils.ignore_rules import should_ignore

logger = logging.getLogger(__name__)


class TreeWalker:
    """
    Usage:
        walker = TreeWalker(annotator, patterns=("node_modules",), max_concurrency=4)
        summary = await walker.walk(os.getcwd())
    """

    def __init__(
        self,
        annotator: Annotator,
        patterns: Tuple[str, ...] = (),
        suffixes: Iterable[str] = SOURCE_SUFFIXES,
        max_concurrency: int = 4,
    ) -> None:
        if max_concurrency < 1:
            raise ValueError("max_concurrency must be at least 1")
        self.annotator = annotator
        self.patterns = tuple(patterns)
        self.suffixes = tuple(suffixes)
        self.max_concurrency = max_concurrency

    async def walk(self, root: str) -> RunSummary:
        """Walk ``root`` and return once every file under it has been handled."""
        summary = RunSummary(root=root, policy=self.annotator.policy.name)
        semaphore = asyncio.Semaphore(self.max_concurrency)
        visited: Set[str] = set()

        logger.info("Walking %s (max %d concurrent file(s))", root, self.max_concurrency)
        await self._walk_dir(root, summary, semaphore, visited)
        logger.info(
            "Finished %s: %d processed, %d written, %d unchanged, %d failed",
            root, summary.files_processed, summary.files_written,
            summary.files_unchanged, summary.files_failed,
        )
        return summary

    def is_source_file(self, name: str) -> bool:
        return name.endswith(self.suffixes)

    async def _walk_dir(
        self,
        directory: str,
        summary: RunSummary,
        semaphore: asyncio.Semaphore,
        visited: Set[str],
    ) -> None:
        real = os.path.realpath(directory)
        if real in visited:
            logger.debug("Already walked %s, skipping", directory)
            return
        visited.add(real)

        try:
            names = await asyncio.to_thread(os.listdir, directory)
        except OSError as e:
            logger.error("Error reading directory %s: %s", directory, e)
            summary.directory_errors.append(PathError(path=directory, error=str(e)))
            return

        tasks = [
            self._handle_entry(directory, name, summary, semaphore, visited)
            for name in names
        ]
        await asyncio.gather(*tasks)

    async def _handle_entry(
        self,
        directory: str,
        name: str,
        summary: RunSummary,
        semaphore: asyncio.Semaphore,
        visited: Set[str],
    ) -> None:
        full_path = os.path.join(directory, name)
        if should_ignore(full_path, self.patterns):
            logger.debug("Ignoring %s", full_path)
            return

        kind = await self._entry_kind(full_path, summary)
        if kind == "dir":
            await self._walk_dir(full_path, summary, semaphore, visited)
        elif kind == "file" and self.is_source_file(name):
            async with semaphore:
                result = await self.annotator.annotate(full_path)
            summary.results.append(result)

    async def _entry_kind(self, path: str, summary: RunSummary) -> Optional[str]:
        """Return "dir", "file", "other", or None if the status lookup failed."""
        try:
            st = await asyncio.to_thread(os.stat, path)
        except OSError as e:
            logger.error("Error reading file stats for %s: %s", path, e)
            summary.stat_errors.append(PathError(path=path, error=str(e)))
            return None

        if stat.S_ISDIR(st.st_mode):
            return "dir"
        if stat.S_ISREG(st.st_mode):
            return "file"
        return "other"
