"""
End-to-End Run Tests
====================
RunConfig construction, main.run_documentation wiring, and the JSON
results report. The LLM client is mocked.
"""
import asyncio
import importlib
import json
import logging
import os
from unittest.mock import AsyncMock, MagicMock, patch

import pytest

import main
from docgen.core import config
from docgen.llm.client import LLMClient
from docgen.models.annotation_result import AnnotationResult
from docgen.models.run_config import RunConfig
from docgen.models.run_summary import PathError, RunSummary
from docgen.services.results_writer import ResultsWriter
from docgen.utils.logging_config import ColoredFormatter, setup_logging


def _mock_client(response: str) -> MagicMock:
    client = MagicMock(spec=LLMClient)
    client.generate = AsyncMock(return_value=response)
    client.close = AsyncMock()
    return client


# ---------------------------------------------------------------------------
# 1. RunConfig
# ---------------------------------------------------------------------------
class TestRunConfig:

    def test_defaults(self, tmp_path):
        cfg = RunConfig(root_dir=str(tmp_path))
        assert cfg.policy == "replace"
        assert cfg.suffixes == (".js", ".ts")
        assert (cfg.trim_leading, cfg.trim_trailing) == (1, 2)

    def test_from_env_reads_config_module(self, tmp_path, monkeypatch):
        monkeypatch.setattr(config, "ANNOTATION_POLICY", " Prepend ")
        monkeypatch.setattr(config, "MAX_CONCURRENCY", 7)
        monkeypatch.setattr(config, "LLM_PROVIDER", "groq")
        monkeypatch.setattr(config, "IGNORE_CONFIG_FILE", ".myignore")

        cfg = RunConfig.from_env(str(tmp_path))
        assert cfg.policy == "prepend"
        assert cfg.max_concurrency == 7
        assert cfg.provider == "groq"
        assert cfg.ignore_config_path == os.path.join(str(tmp_path), ".myignore")

    def test_frozen(self, tmp_path):
        cfg = RunConfig(root_dir=str(tmp_path))
        with pytest.raises(Exception):
            cfg.policy = "prepend"

    @pytest.mark.parametrize("kwargs", [
        {"policy": "both"},
        {"max_concurrency": 0},
        {"trim_leading": -1},
    ])
    def test_invalid_values_rejected(self, tmp_path, kwargs):
        with pytest.raises(ValueError):
            RunConfig(root_dir=str(tmp_path), **kwargs)


# ---------------------------------------------------------------------------
# 2. run_documentation
# ---------------------------------------------------------------------------
class TestRunDocumentation:

    def test_replace_run_honours_ignore_file(self, tmp_path):
        (tmp_path / ".ignoreconfig").write_text("# skip vendored code\nvendor\n", encoding="utf-8")
        (tmp_path / "a.js").write_text("const a = 1;", encoding="utf-8")
        (tmp_path / "vendor").mkdir()
        (tmp_path / "vendor" / "b.js").write_text("const b = 2;", encoding="utf-8")

        client = _mock_client("```js\n// a is one\nconst a = 1;\n```\n")
        cfg = RunConfig(root_dir=str(tmp_path), ignore_config_path=str(tmp_path / ".ignoreconfig"))
        summary = asyncio.run(main.run_documentation(cfg, client))

        assert (tmp_path / "a.js").read_text(encoding="utf-8") == "// a is one\nconst a = 1;"
        assert (tmp_path / "vendor" / "b.js").read_text(encoding="utf-8") == "const b = 2;"
        assert summary.files_processed == 1
        assert summary.policy == "replace"
        client.close.assert_awaited_once()

    def test_prepend_run(self, tmp_path):
        (tmp_path / "a.ts").write_text("const a = 1;", encoding="utf-8")
        client = _mock_client("Adds one.")
        cfg = RunConfig(root_dir=str(tmp_path), policy="prepend",
                        ignore_config_path=str(tmp_path / ".ignoreconfig"))
        asyncio.run(main.run_documentation(cfg, client))

        assert (tmp_path / "a.ts").read_text(encoding="utf-8") == "/*\nAdds one.\n*/\n\nconst a = 1;"

    def test_unknown_provider_fails_at_startup(self, tmp_path):
        client = _mock_client("x")
        cfg = RunConfig(root_dir=str(tmp_path), provider="nope")
        with pytest.raises(ValueError):
            asyncio.run(main.run_documentation(cfg, client))
        client.generate.assert_not_awaited()


# ---------------------------------------------------------------------------
# 3. Results report
# ---------------------------------------------------------------------------
class TestResultsWriter:

    def test_writes_summary_json(self, tmp_path):
        summary = RunSummary(
            root="/repo",
            policy="replace",
            results=[
                AnnotationResult(file_path="/repo/a.js", success=True, written=True),
                AnnotationResult(file_path="/repo/b.js", success=False, error_message="boom"),
                AnnotationResult(file_path="/repo/c.js", success=True, warning="short"),
            ],
            directory_errors=[PathError(path="/repo/locked", error="denied")],
        )
        out = tmp_path / "report.json"
        assert ResultsWriter.write_results(summary, str(out)) is True

        data = json.loads(out.read_text(encoding="utf-8"))
        assert data["files_processed"] == 3
        assert data["files_written"] == 1
        assert data["files_failed"] == 1
        assert data["files_unchanged"] == 1
        assert data["directory_errors"][0]["path"] == "/repo/locked"

    def test_unwritable_path_returns_false(self, tmp_path):
        summary = RunSummary(root="/repo")
        assert ResultsWriter.write_results(summary, str(tmp_path / "missing" / "r.json")) is False


# ---------------------------------------------------------------------------
# 4. Logging setup
# ---------------------------------------------------------------------------
class TestLoggingSetup:

    def test_console_and_file_handlers(self, tmp_path):
        root = logging.getLogger()
        saved_handlers, saved_level = root.handlers[:], root.level
        try:
            setup_logging(level="DEBUG", log_dir=str(tmp_path / "logs"))
            assert root.level == logging.DEBUG
            assert any(isinstance(h.formatter, ColoredFormatter) for h in root.handlers)
            assert any(isinstance(h, logging.FileHandler) for h in root.handlers)
            assert os.listdir(tmp_path / "logs")
        finally:
            for h in root.handlers[:]:
                root.removeHandler(h)
                h.close()
            for h in saved_handlers:
                root.addHandler(h)
            root.setLevel(saved_level)

    def test_empty_log_dir_disables_file_handler(self):
        root = logging.getLogger()
        saved_handlers, saved_level = root.handlers[:], root.level
        try:
            setup_logging(level=logging.INFO, log_dir="")
            assert not any(isinstance(h, logging.FileHandler) for h in root.handlers)
        finally:
            for h in root.handlers[:]:
                root.removeHandler(h)
            for h in saved_handlers:
                root.addHandler(h)
            root.setLevel(saved_level)


# ---------------------------------------------------------------------------
# 5. Entry point
# ---------------------------------------------------------------------------
class TestEntryPoint:

    def _summary(self, root: str) -> RunSummary:
        return RunSummary(
            root=root,
            policy="replace",
            results=[
                AnnotationResult(file_path=os.path.join(root, "ok.js"), success=True, written=True),
                AnnotationResult(file_path=os.path.join(root, "bad.js"), success=False,
                                 error_message="HTTPStatusError: boom"),
                AnnotationResult(file_path=os.path.join(root, "worse.ts"), success=False,
                                 error_message="LLMResponseError: empty"),
            ],
        )

    def test_failures_reported_once_as_count(self, tmp_path, monkeypatch, caplog):
        monkeypatch.chdir(tmp_path)
        monkeypatch.setattr(config, "RESULTS_PATH", "")
        summary = self._summary(str(tmp_path))

        with patch("main.setup_logging"), \
             patch("main.run_documentation", new=AsyncMock(return_value=summary)), \
             caplog.at_level(logging.INFO, logger="main"):
            assert main.run() == 0

        main_records = [r for r in caplog.records if r.name == "main"]
        assert not any(r.levelno >= logging.ERROR for r in main_records)
        assert not any("bad.js" in r.getMessage() for r in main_records)
        assert any("2 of 3 file(s)" in r.getMessage() for r in main_records)

    def test_log_dir_disabled_by_default(self, monkeypatch):
        monkeypatch.delenv("LOG_DIR", raising=False)
        try:
            reloaded = importlib.reload(config)
            assert reloaded.LOG_DIR == ""
        finally:
            importlib.reload(config)

    def test_run_creates_no_logs_dir_in_root(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        monkeypatch.setattr(config, "LOG_DIR", "")
        monkeypatch.setattr(config, "RESULTS_PATH", "")
        root = logging.getLogger()
        saved_handlers, saved_level = root.handlers[:], root.level
        try:
            with patch("main.run_documentation", new=AsyncMock(return_value=self._summary(str(tmp_path)))):
                assert main.run() == 0
        finally:
            for h in root.handlers[:]:
                root.removeHandler(h)
            for h in saved_handlers:
                root.addHandler(h)
            root.setLevel(saved_level)

        assert not (tmp_path / "logs").exists()
