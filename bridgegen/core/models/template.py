"""
Generated file model — one bridging header held in memory before writing.
"""

from __future__ import annotations

from pydantic import BaseModel


class GeneratedFile(BaseModel):
    """A bridging header produced by the generation phase.

    Attributes:
        target:  Target name the file was generated for.
        path:    Path relative to the output directory (the target name).
        content: Full file content.
        reason:  Why this file was generated.
    """

    target: str
    path: str
    content: str
    reason: str = ""

    def encoded(self) -> bytes:
        """Content as UTF-8 bytes, exactly as it will be written."""
        return self.content.encode("utf-8")
