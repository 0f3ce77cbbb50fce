"""
Batch generator — the two-phase generation loop.

Flow:
    validate config → resolve roots → generate every target (read-only)
        → [any failure: abort, nothing written]
        → write every document (per-file atomic)

The generation phase holds all documents in memory. Nothing touches the
output directory until every target has produced its document, so a bad
target never leaves stale or half-generated files behind. The write phase
is not transactional across files: a failure on one file is recorded and
reported, but files already written stay on disk.
"""

from __future__ import annotations

import logging
import os
import tempfile
from dataclasses import dataclass, field
from pathlib import Path

from bridgegen.core.errors import (
    BridgegenError,
    ConfigurationError,
    EncodingError,
    WriteError,
    WritePhaseError,
)
from bridgegen.core.models.config import GeneratorConfig, TargetSpec
from bridgegen.core.models.template import GeneratedFile
from bridgegen.core.services.generators.bridging_header import generate_bridging_header
from bridgegen.core.services.header_scan import scan_headers
from bridgegen.core.services.paths import resolve_directory, resolve_path

logger = logging.getLogger(__name__)

# Permissions for generated files (mkstemp creates 0600)
_OUTPUT_MODE = 0o644


@dataclass
class WriteOutcome:
    """What happened to one target's output file.

    Status is one of: written, unchanged, planned (dry run),
    stale (check mode), failed.
    """

    target: str
    path: Path
    status: str
    error: WriteError | None = None

    @property
    def ok(self) -> bool:
        return self.status in ("written", "unchanged", "planned")

    def to_dict(self) -> dict:
        result = {
            "target": self.target,
            "path": str(self.path),
            "status": self.status,
        }
        if self.error is not None:
            result["error"] = self.error.message
        return result


@dataclass
class BatchReport:
    """Result of a batch run."""

    output_directory: Path
    base_search_path: Path
    documents: list[GeneratedFile] = field(default_factory=list)
    outcomes: list[WriteOutcome] = field(default_factory=list)
    dry_run: bool = False
    check: bool = False

    def _count(self, status: str) -> int:
        return sum(1 for o in self.outcomes if o.status == status)

    @property
    def total(self) -> int:
        return len(self.outcomes)

    @property
    def written(self) -> int:
        return self._count("written")

    @property
    def unchanged(self) -> int:
        return self._count("unchanged")

    @property
    def stale(self) -> int:
        return self._count("stale")

    @property
    def failed(self) -> int:
        return self._count("failed")

    @property
    def status(self) -> str:
        if self.failed:
            return "partial" if self.written or self.unchanged else "failed"
        if self.stale:
            return "stale"
        return "ok"

    def to_dict(self) -> dict:
        return {
            "status": self.status,
            "output_directory": str(self.output_directory),
            "base_search_path": str(self.base_search_path),
            "dry_run": self.dry_run,
            "check": self.check,
            "total": self.total,
            "written": self.written,
            "unchanged": self.unchanged,
            "stale": self.stale,
            "failed": self.failed,
            "outcomes": [o.to_dict() for o in self.outcomes],
        }


def validate_target_name(name: str) -> None:
    """Target names become output filenames, so they must be bare names.

    Raises:
        ConfigurationError: For empty names, ``.``/``..``, or names holding a
            path separator or NUL byte.
    """
    separators = [os.sep] + ([os.altsep] if os.altsep else []) + ["/", "\0"]
    if not name or name in (".", "..") or any(sep in name for sep in separators):
        raise ConfigurationError(
            "Target name must be a plain filename", target=name or "<empty>"
        )


def write_if_changed(path: Path, data: bytes) -> bool:
    """Atomically write *data* to *path* unless it already holds those bytes.

    Writes to a temp file in the same directory, then renames over the
    target, so readers never see a half-written header.

    Returns:
        True if the file was written, False if it was already up to date.

    Raises:
        OSError: If the file cannot be written.
    """
    if _current_bytes(path) == data:
        return False

    fd, tmp_path = tempfile.mkstemp(
        dir=path.parent,
        prefix=f".{path.name}.",
        suffix=".tmp",
    )
    tmp = Path(tmp_path)
    try:
        with os.fdopen(fd, "wb") as fh:
            fh.write(data)
        tmp.chmod(_OUTPUT_MODE)
        tmp.replace(path)
    except Exception:
        tmp.unlink(missing_ok=True)
        raise
    return True


def _current_bytes(path: Path) -> bytes | None:
    """Existing file content, or None if there is no readable regular file."""
    if not path.is_file():
        return None
    try:
        return path.read_bytes()
    except OSError as e:
        logger.debug("Cannot read existing %s: %s", path, e)
        return None


class BatchGenerator:
    """Generate every configured bridging header in one run."""

    def __init__(self, config: GeneratorConfig) -> None:
        self.config = config

    # ── Phase 0: validation ─────────────────────────────────────

    def validate(self) -> None:
        """Reject a configuration the generator cannot run.

        Raises:
            ConfigurationError: No targets, or a target name that is not a
                plain filename.
        """
        if not self.config.targets:
            raise ConfigurationError("No targets configured. Nothing to generate.")
        for name in self.config.targets:
            validate_target_name(name)

    def resolve_roots(self) -> tuple[Path, Path]:
        """Resolve the output directory and the base search path.

        Returns:
            (output_directory, base_search_path), both canonical directories.
        """
        base = resolve_path(self.config.base_path, Path.cwd())
        output_dir = resolve_directory(self.config.output_directory, base)
        search_root = resolve_directory(self.config.base_search_path, base)

        logger.info("Base working path: %s", base)
        logger.info("Output directory: %s", output_dir)
        logger.info("Base header search directory: %s", search_root)
        return output_dir, search_root

    # ── Phase 1: generation (read-only) ─────────────────────────

    def generate_target(
        self,
        name: str,
        spec: TargetSpec,
        search_root: Path,
    ) -> GeneratedFile:
        """Scan one target's search path and assemble its document."""
        try:
            path = resolve_path(spec.search_path, search_root)
            logger.info("Generating %s (scanning %s)", name, path)
            headers = scan_headers(
                path,
                recursive=spec.recursive,
                ignore_pattern=spec.ignore_pattern,
            )
            document = generate_bridging_header(name, spec.framework_name, headers)
            try:
                document.encoded()
            except UnicodeEncodeError as e:
                raise EncodingError(f"Content is not representable as UTF-8: {e}") from e
        except BridgegenError as e:
            if e.target is None:
                e.target = name
            raise

        logger.debug("%s: %s", name, document.reason)
        return document

    def generate_all(self, search_root: Path) -> list[GeneratedFile]:
        """Generate documents for every target, sorted by target name.

        Raises:
            BridgegenError: On the first failing target. Nothing is written.
        """
        documents: list[GeneratedFile] = []
        for name, spec in self.config.sorted_targets():
            try:
                documents.append(self.generate_target(name, spec, search_root))
            except BridgegenError as e:
                logger.error("Error while generating: %s. No files have been changed", e)
                raise
        return documents

    # ── Phase 2: write ──────────────────────────────────────────

    def write_document(self, document: GeneratedFile, output_dir: Path) -> WriteOutcome:
        """Write one document, capturing failure as a WriteError outcome."""
        path = output_dir / document.path
        try:
            changed = write_if_changed(path, document.encoded())
        except OSError as e:
            error = WriteError(f"Cannot write {path}: {e}", target=document.target)
            logger.error("Error while writing %s: %s", document.target, e)
            return WriteOutcome(document.target, path, "failed", error)

        if changed:
            logger.info("Wrote %s", path)
            return WriteOutcome(document.target, path, "written")
        logger.info("Unchanged %s", path)
        return WriteOutcome(document.target, path, "unchanged")

    def check_document(self, document: GeneratedFile, output_dir: Path) -> WriteOutcome:
        """Compare a document with the file on disk without writing."""
        path = output_dir / document.path
        status = "unchanged" if _current_bytes(path) == document.encoded() else "stale"
        if status == "stale":
            logger.warning("%s is out of date", path)
        return WriteOutcome(document.target, path, status)

    # ── Entry point ─────────────────────────────────────────────

    def run(self, dry_run: bool = False, check: bool = False) -> BatchReport:
        """Run both phases.

        Args:
            dry_run: Generate everything but write nothing.
            check: Generate everything and compare with the files on disk.

        Returns:
            BatchReport with one outcome per target.

        Raises:
            BridgegenError: Any generation-phase failure (nothing written).
            WritePhaseError: One or more files failed to write.
        """
        self.validate()
        output_dir, search_root = self.resolve_roots()
        documents = self.generate_all(search_root)

        report = BatchReport(
            output_directory=output_dir,
            base_search_path=search_root,
            documents=documents,
            dry_run=dry_run,
            check=check,
        )

        for document in documents:
            if check:
                outcome = self.check_document(document, output_dir)
            elif dry_run:
                outcome = WriteOutcome(document.target, output_dir / document.path, "planned")
            else:
                outcome = self.write_document(document, output_dir)
            report.outcomes.append(outcome)

        if report.failed:
            raise WritePhaseError(
                f"{report.failed} of {report.total} file(s) could not be written", report
            )
        return report
