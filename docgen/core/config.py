"""
Configuration
=============
Loads environment variables from .env file using python-dotenv.

Environment Variables:
    GEMINI_API_KEY           — Primary LLM provider API key (Google Gemini)
    GROQ_API_KEY             — Alternative provider API key (Groq)
    OPENROUTER_API_KEY       — Alternative provider API key (OpenRouter)
    LLM_PROVIDER             — Provider used for the whole run (default: gemini)
    GEMINI_MODEL             — Gemini model name (default: gemini-2.0-flash)
    ANNOTATION_POLICY        — "replace" or "prepend" (default: replace)
    TRIM_LEADING_LINES       — Lines dropped from the top of a response (default: 1)
    TRIM_TRAILING_LINES      — Lines dropped from the bottom of a response (default: 2)
    MAX_CONCURRENCY          — Max files annotated at the same time (default: 4)
    REQUEST_TIMEOUT_SECONDS  — HTTP timeout for one backend call (default: 120)
    IGNORE_CONFIG_FILE       — Ignore-pattern file in the run root (default: .ignoreconfig)
    RESULTS_PATH             — Optional JSON run report path (default: disabled)
    LOG_LEVEL                — Logging level name (default: INFO)
    LOG_DIR                  — Directory for the daily log file (default: disabled)

Annotation Policy:
    Exactly one policy is active per run. "replace" overwrites each file with
    the trimmed response; "prepend" keeps the file and puts the response in a
    leading block comment. The two are never applied together.
"""
import os
from dotenv import load_dotenv

load_dotenv()

GEMINI_API_KEY = os.getenv("GEMINI_API_KEY")
GROQ_API_KEY = os.getenv("GROQ_API_KEY")
OPENROUTER_API_KEY = os.getenv("OPENROUTER_API_KEY")

LLM_PROVIDER = os.getenv("LLM_PROVIDER", "gemini")
GEMINI_MODEL = os.getenv("GEMINI_MODEL", "gemini-2.0-flash")

ANNOTATION_POLICY = os.getenv("ANNOTATION_POLICY", "replace")

# Line-trimming heuristic for the replace policy (tuned for Gemini output)
TRIM_LEADING_LINES = int(os.getenv("TRIM_LEADING_LINES", 1))
TRIM_TRAILING_LINES = int(os.getenv("TRIM_TRAILING_LINES", 2))

# Concurrency bound for in-flight annotations
MAX_CONCURRENCY = int(os.getenv("MAX_CONCURRENCY", 4))

REQUEST_TIMEOUT_SECONDS = float(os.getenv("REQUEST_TIMEOUT_SECONDS", 120))

IGNORE_CONFIG_FILE = os.getenv("IGNORE_CONFIG_FILE", ".ignoreconfig")
RESULTS_PATH = os.getenv("RESULTS_PATH", "")

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
LOG_DIR = os.getenv("LOG_DIR", "")
