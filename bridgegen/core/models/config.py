"""
Generator configuration — the parsed form of bridgegen.yml.

Built once by the loader (or directly in code) and never mutated while
a run is in progress. Keys are accepted in the camelCase spelling used by
the config file as well as the snake_case field names.
"""

from __future__ import annotations

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator


class TargetSpec(BaseModel):
    """One bridging header to generate.

    The search path is resolved against the config's base search path at
    generation time and must point at an existing directory.
    """

    model_config = ConfigDict(frozen=True)

    search_path: str = Field(
        validation_alias=AliasChoices("path", "searchPath", "search_path"),
    )
    recursive: bool = False
    ignore_pattern: str | None = Field(
        default=None,
        validation_alias=AliasChoices(
            "ignoreNames", "ignoredNames", "ignorePattern", "ignore_pattern"
        ),
    )
    framework_name: str | None = Field(
        default=None,
        validation_alias=AliasChoices("frameworkName", "framework_name"),
    )

    @field_validator("framework_name")
    @classmethod
    def _blank_framework_to_none(cls, value: str | None) -> str | None:
        if value is not None and not value.strip():
            return None
        return value


class GeneratorConfig(BaseModel):
    """Root configuration for a batch run.

    Attributes:
        output_directory: Where generated headers are written.
        base_search_path: Root that per-target search paths are resolved against.
        targets:          Target name (= output filename) → spec.
        base_path:        Directory the two paths above are relative to.
                          The loader sets it to the config file's directory.
    """

    model_config = ConfigDict(frozen=True)

    output_directory: str = Field(
        validation_alias=AliasChoices("outputDirectory", "outputDir", "output_directory"),
    )
    base_search_path: str = Field(
        default=".",
        validation_alias=AliasChoices("basePath", "baseSearchPath", "base_search_path"),
    )
    targets: dict[str, TargetSpec] = Field(
        default_factory=dict,
        validation_alias=AliasChoices("targets", "headers"),
    )
    base_path: str = "."

    def sorted_targets(self) -> list[tuple[str, TargetSpec]]:
        """Targets in a stable (name-sorted) order."""
        return sorted(self.targets.items())

    def get_target(self, name: str) -> TargetSpec | None:
        return self.targets.get(name)
