"""
Bridging header generator — render the import list for one target.

Output is deterministic: headers are sorted, so an unchanged tree always
renders byte-identical content.
"""

from __future__ import annotations

from collections.abc import Iterable

from bridgegen.core.models.template import GeneratedFile

_NOTICE = """\
//
//  This bridging header has been automatically generated by bridgegen.
//  DO NOT EDIT MANUALLY.
//  Re-run bridgegen to add or remove headers.
//

"""


def import_line(header: str, framework_name: str | None = None) -> str:
    """A single ``#import`` directive for *header*."""
    if framework_name:
        return f"#import <{framework_name}/{header}>"
    return f'#import "{header}"'


def render_bridging_header(
    target_name: str,
    framework_name: str | None,
    headers: Iterable[str],
) -> str:
    """Render the full text of a bridging header.

    The header named like the target itself is skipped so the file never
    imports itself.
    """
    lines = [import_line(h, framework_name) for h in sorted(set(headers)) if h != target_name]

    content = f"//  {target_name}\n{_NOTICE}"
    if lines:
        content += "\n".join(lines) + "\n"
    return content


def generate_bridging_header(
    target_name: str,
    framework_name: str | None,
    headers: Iterable[str],
) -> GeneratedFile:
    """Generate the bridging header for *target_name*.

    Args:
        target_name: Target name, also the output filename.
        framework_name: Qualify imports as ``<Framework/Header.h>`` when set.
        headers: Header basenames found by the scanner.

    Returns:
        GeneratedFile to be written as ``<output dir>/<target_name>``.
    """
    headers = list(headers)
    imported = sum(1 for h in set(headers) if h != target_name)
    qualifier = f" from framework {framework_name}" if framework_name else ""

    return GeneratedFile(
        target=target_name,
        path=target_name,
        content=render_bridging_header(target_name, framework_name, headers),
        reason=f"Imports {imported} header(s){qualifier}",
    )
