"""
Generate use case — load the config and run the batch generator.

Every core error is captured into the result so the CLI can render it
and choose an exit status.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

from bridgegen.core.config.loader import find_config_file, load_config
from bridgegen.core.engine.batch import BatchGenerator, BatchReport
from bridgegen.core.errors import BridgegenError, WritePhaseError
from bridgegen.core.models.config import GeneratorConfig

logger = logging.getLogger(__name__)


@dataclass
class GenerateResult:
    """Result of the generate use case."""

    config: GeneratorConfig | None = None
    config_path: Path | None = None
    report: BatchReport | None = None
    error: str | None = None
    error_kind: str | None = None

    @property
    def ok(self) -> bool:
        return self.error is None and (self.report is None or self.report.status == "ok")

    def to_dict(self) -> dict:
        result: dict = {
            "ok": self.ok,
            "config_path": str(self.config_path) if self.config_path else None,
        }
        if self.error:
            result["error"] = self.error
            result["error_kind"] = self.error_kind
        if self.report:
            result["report"] = self.report.to_dict()
        return result


def run_generate(
    config_path: Path | None = None,
    config: GeneratorConfig | None = None,
    dry_run: bool = False,
    check: bool = False,
) -> GenerateResult:
    """Generate every configured bridging header.

    Args:
        config_path: Optional explicit path to the config file.
        config: Already-loaded config; skips loading when given.
        dry_run: Generate but don't write.
        check: Compare against existing files instead of writing.

    Returns:
        GenerateResult with the batch report or the error that stopped it.
    """
    result = GenerateResult()

    try:
        if config is None:
            if config_path is None:
                config_path = find_config_file()
            result.config_path = config_path
            config = load_config(config_path)
        result.config = config

        result.report = BatchGenerator(config).run(dry_run=dry_run, check=check)

    except WritePhaseError as e:
        result.report = e.report
        result.error = str(e)
        result.error_kind = type(e).__name__
    except BridgegenError as e:
        result.error = str(e)
        result.error_kind = type(e).__name__

    return result
