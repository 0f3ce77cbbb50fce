"""
bridgegen — CLI entrypoint.

Usage:
    python -m bridgegen.main --help
    python -m bridgegen.main generate
    python -m bridgegen.main config check
"""

from __future__ import annotations

import json
import sys
from pathlib import Path

import click

from bridgegen import __version__
from bridgegen.core.observability.logging_config import resolve_level, setup_from_environment


@click.group()
@click.version_option(version=__version__, prog_name="bridgegen")
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose output.")
@click.option("--quiet", "-q", is_flag=True, help="Suppress non-essential output.")
@click.option("--debug", is_flag=True, help="Enable debug logging (very verbose).")
@click.option(
    "--config",
    "-c",
    "config_path",
    type=click.Path(exists=False),
    default=None,
    help="Path to bridgegen.yml (default: auto-detect).",
)
@click.pass_context
def cli(
    ctx: click.Context,
    verbose: bool,
    quiet: bool,
    debug: bool,
    config_path: str | None,
) -> None:
    """bridgegen — generate bridging headers from your source tree."""
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose
    ctx.obj["quiet"] = quiet
    ctx.obj["debug"] = debug
    ctx.obj["config_path"] = Path(config_path) if config_path else None

    # ── Logging setup (once, at process start) ──────────────────
    setup_from_environment(resolve_level(debug=debug, verbose=verbose, quiet=quiet))


@cli.command()
@click.option("--json-output", "--json", "as_json", is_flag=True, help="Output as JSON.")
@click.option("--dry-run", is_flag=True, help="Generate but don't write any file.")
@click.option("--check", is_flag=True, help="Fail if any generated header is out of date.")
@click.pass_context
def generate(ctx: click.Context, as_json: bool, dry_run: bool, check: bool) -> None:
    """Generate every configured bridging header.

    Examples:

        bridgegen generate

        bridgegen --config Tools/bridgegen.yml generate --dry-run

        bridgegen generate --check
    """
    from bridgegen.core.use_cases.generate import run_generate

    result = run_generate(
        config_path=ctx.obj.get("config_path"),
        dry_run=dry_run,
        check=check,
    )

    if as_json:
        click.echo(json.dumps(result.to_dict(), indent=2))
        sys.exit(0 if result.ok else 1)

    quiet = ctx.obj.get("quiet", False)
    report = result.report

    if report is not None:
        mode_label = "[check] " if check else "[dry-run] " if dry_run else ""
        if not quiet:
            click.secho(f"\n🔗 {mode_label}Bridging headers", fg="cyan", bold=True)
            click.echo(f"   Output: {report.output_directory}")
            click.echo(f"   Search: {report.base_search_path}")
            click.echo()

        icons = {
            "written": ("✓", "green"),
            "unchanged": ("=", "white"),
            "planned": ("•", "cyan"),
            "stale": ("!", "yellow"),
            "failed": ("✗", "red"),
        }
        for outcome in report.outcomes:
            if quiet and outcome.ok:
                continue
            icon, color = icons.get(outcome.status, ("?", "white"))
            click.secho(f"   {icon} {outcome.target} ", fg=color, nl=False)
            click.echo(f"({outcome.status})")
            if outcome.error is not None:
                click.echo(f"     │ {outcome.error.message}")
            if ctx.obj.get("verbose") and dry_run:
                document = next(d for d in report.documents if d.target == outcome.target)
                for line in document.content.splitlines():
                    click.echo(f"     │ {line}")

    if result.error:
        click.secho(f"❌ {result.error}", fg="red")
        if report is None:
            click.echo("   No files have been changed.")
        sys.exit(1)

    assert report is not None  # guaranteed when there is no error

    if report.stale:
        click.echo()
        click.secho(
            f"   {report.stale} header(s) out of date. Run 'bridgegen generate'.",
            fg="yellow",
            bold=True,
        )
        sys.exit(1)

    if not quiet:
        click.echo()
        click.secho(
            f"   Result: {report.written} written, {report.unchanged} unchanged"
            f" ({report.total} target(s))",
            fg="green",
            bold=True,
        )
        click.echo()


@cli.group()
def config() -> None:
    """Configuration commands."""


@config.command("check")
@click.option("--json-output", "--json", "as_json", is_flag=True, help="Output as JSON.")
@click.pass_context
def config_check(ctx: click.Context, as_json: bool) -> None:
    """Validate bridgegen.yml configuration."""
    from bridgegen.core.use_cases.config_check import check_config

    result = check_config(config_path=ctx.obj.get("config_path"))

    if as_json:
        click.echo(json.dumps(result.to_dict(), indent=2))
        sys.exit(0 if result.valid else 1)

    if result.valid:
        assert result.config is not None  # guaranteed when valid
        click.secho("✅ Configuration is valid", fg="green", bold=True)
        click.echo(f"   Config: {result.config_path}")
        click.echo(f"   Targets: {len(result.config.targets)}")
        for name, spec in result.config.sorted_targets():
            fw = f" <{spec.framework_name}/…>" if spec.framework_name else ""
            rec = " (recursive)" if spec.recursive else ""
            click.echo(f"     • {name}{fw}{rec}  ← {spec.search_path}")
    else:
        click.secho("❌ Configuration errors:", fg="red", bold=True)
        for err in result.errors:
            click.echo(f"   • {err}")

    if result.warnings:
        click.echo()
        click.secho("⚠️  Warnings:", fg="yellow")
        for warn in result.warnings:
            click.echo(f"   • {warn}")

    if not result.valid:
        click.echo()
        sys.exit(1)

    click.echo()


if __name__ == "__main__":
    cli()
