"""
Annotator
=========
Documents a single source file with generated text.

Pipeline (per file):
    1. Read the whole file as UTF-8
    2. Build the prompt: fixed instruction + full file content
    3. Call the configured provider
    4. Transform the response with the run's content policy
    5. Overwrite the file in place (no backup, no atomic rename)

Fault Tolerance:
    - Any failure in steps 1-5 is logged with the file path and returned as
      a failed AnnotationResult; it never propagates to the walker
    - If the write itself fails after a successful call, the generated text
      is lost and the file is left as the write left it
    - A response too short for the replace policy leaves the file untouched

Re-running over an already annotated tree annotates the files again; no
marker of earlier processing is kept.
"""
import asyncio
import logging

from docgen.llm.client import LLMClient
from docgen.llm.prompts import build_documentation_prompt
from docgen.llm.router import ProviderConfig
from docgen.models.annotation_result import AnnotationResult
from docgen.services.content_policy import ContentPolicy

logger = logging.getLogger(__name__)


def _read_text(file_path: str) -> str:
    with open(file_path, "r", encoding="utf-8", newline="") as f:
        return f.read()


def _write_text(file_path: str, content: str) -> None:
    with open(file_path, "w", encoding="utf-8", newline="") as f:
        f.write(content)


class Annotator:
    """
    Usage:
        annotator = Annotator(LLMClient(), GEMINI_CONFIG, ReplacePolicy())
        result = await annotator.annotate("src/index.js")
    """

    def __init__(self, client: LLMClient, provider: ProviderConfig, policy: ContentPolicy) -> None:
        self.client = client
        self.provider = provider
        self.policy = policy

    async def annotate(self, file_path: str) -> AnnotationResult:
        result = AnnotationResult(
            file_path=file_path,
            policy=self.policy.name,
            provider_used=self.provider.name,
        )
        try:
            original = await asyncio.to_thread(_read_text, file_path)
            result.original_length = len(original)

            prompt = build_documentation_prompt(original)
            generated = await self.client.generate(prompt, self.provider)

            updated = self.policy.apply(generated, original)
            if updated is None:
                result.success = True
                result.warning = "Generated response too short to trim; file left unchanged"
                logger.warning(
                    "Generated response for %s is too short to trim (%d line(s)); "
                    "leaving file unchanged",
                    file_path, len(generated.split("\n")),
                )
                return result

            await asyncio.to_thread(_write_text, file_path, updated)
            result.written = True
            result.written_length = len(updated)
            result.success = True
            logger.info("Documentation added to: %s", file_path)

        except Exception as e:
            result.success = False
            result.error_message = f"{type(e).__name__}: {e}"
            logger.error("Error processing %s: %s", file_path, result.error_message)

        return result
