"""
Domain models — Pydantic types for bridging header generation.

    from bridgegen.core.models import GeneratorConfig, TargetSpec, GeneratedFile
"""

from bridgegen.core.models.config import GeneratorConfig, TargetSpec
from bridgegen.core.models.template import GeneratedFile

__all__ = [
    # template.py
    "GeneratedFile",
    # config.py
    "GeneratorConfig",
    "TargetSpec",
]
