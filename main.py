import asyncio
import logging
import os
import sys

from docgen.agents.annotator import Annotator
from docgen.agents.tree_walker import TreeWalker
from docgen.core import config
from docgen.llm.client import LLMClient
from docgen.llm.router import get_provider
from docgen.models.run_config import RunConfig
from docgen.models.run_summary import RunSummary
from docgen.services.content_policy import build_policy
from docgen.services.results_writer import ResultsWriter
from docgen.utils.ignore_rules import load_ignore_patterns
from docgen.utils.logging_config import setup_logging

logger = logging.getLogger("main")


async def run_documentation(run_config: RunConfig, client: LLMClient) -> RunSummary:
    """Annotate every eligible file under ``run_config.root_dir``."""
    patterns = load_ignore_patterns(run_config.ignore_config_path)
    provider = get_provider(run_config.provider)
    policy = build_policy(
        run_config.policy, run_config.trim_leading, run_config.trim_trailing
    )
    annotator = Annotator(client, provider, policy)
    walker = TreeWalker(
        annotator,
        patterns=patterns,
        suffixes=run_config.suffixes,
        max_concurrency=run_config.max_concurrency,
    )
    try:
        return await walker.walk(run_config.root_dir)
    finally:
        await client.close()


def run() -> int:
    setup_logging(level=config.LOG_LEVEL, log_dir=config.LOG_DIR)
    logger.info("Running Documentation Generator...")

    run_config = RunConfig.from_env(os.getcwd())
    logger.info(
        "Policy: %s | provider: %s | max concurrency: %d",
        run_config.policy, run_config.provider, run_config.max_concurrency,
    )

    summary = asyncio.run(run_documentation(run_config, LLMClient()))

    if summary.files_failed:
        logger.warning(
            "%d of %d file(s) could not be annotated",
            summary.files_failed, summary.files_processed,
        )
    if summary.directory_errors or summary.stat_errors:
        logger.warning(
            "%d directory and %d stat error(s) during the walk",
            len(summary.directory_errors), len(summary.stat_errors),
        )

    if run_config.results_path:
        ResultsWriter.write_results(summary, run_config.results_path)

    return 0


if __name__ == "__main__":
    sys.exit(run())
