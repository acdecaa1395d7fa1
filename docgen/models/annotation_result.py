"""
Annotation Result Model
=======================
Pydantic model describing what happened to one file.

Fields:
    file_path        — path handed to the annotator
    success          — False if reading, generating, or writing raised
    written          — True if the file on disk was overwritten
    policy           — policy applied ("replace" / "prepend")
    provider_used    — backend provider name
    original_length  — characters in the file before the run
    written_length   — characters written back (0 when nothing was written)
    warning          — non-fatal note (e.g. response too short to trim)
    error_message    — error text when success is False
"""
from pydantic import BaseModel


class AnnotationResult(BaseModel):
    file_path: str
    success: bool = False
    written: bool = False
    policy: str = ""
    provider_used: str = ""
    original_length: int = 0
    written_length: int = 0
    warning: str = ""
    error_message: str = ""
