"""
LLM Prompts
===========
The fixed instruction sent with every file.

The instruction and the file content go out as a single user prompt; there
is no system prompt.
"""

DOCUMENTATION_INSTRUCTION = "Write clear, professional comments for the following code:"


def build_documentation_prompt(file_content: str) -> str:
    """Return the instruction followed by a blank line and the full file content."""
    return f"{DOCUMENTATION_INSTRUCTION}\n\n{file_content}"
