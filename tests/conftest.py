"""
Shared test fixtures and configuration.
"""

from pathlib import Path

import pytest

from bridgegen.core.models.config import GeneratorConfig


@pytest.fixture
def header_tree(tmp_path: Path) -> Path:
    """A small source tree:

        Sources/
          Public/        A.h  B.h  Umbrella.h  notes.txt
            Internal/    C.h  FooPrivate.h
          Other/         D.h
          Generated/     (output directory)
    """
    sources = tmp_path / "Sources"
    public = sources / "Public"
    internal = public / "Internal"
    other = sources / "Other"
    for d in (public, internal, other, sources / "Generated"):
        d.mkdir(parents=True)

    for name in ("A.h", "B.h", "Umbrella.h", "notes.txt"):
        (public / name).write_text(f"// {name}\n")
    for name in ("C.h", "FooPrivate.h"):
        (internal / name).write_text(f"// {name}\n")
    (other / "D.h").write_text("// D.h\n")
    return tmp_path


@pytest.fixture
def make_config(header_tree: Path):
    """Build a GeneratorConfig anchored at ``header_tree``."""

    def _make(targets: dict, **overrides) -> GeneratorConfig:
        data = {
            "outputDirectory": "Sources/Generated",
            "basePath": "Sources",
            "targets": targets,
            "base_path": str(header_tree),
        }
        data.update(overrides)
        return GeneratorConfig.model_validate(data)

    return _make
