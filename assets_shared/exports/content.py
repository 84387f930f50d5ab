"""Aggregator file content."""
from pathlib import Path

from .contracts import SOURCE_SUFFIX, ExportUnit


def module_specifier(root: Path | str, unit_path: Path | str) -> str:
    """Import specifier of unit_path relative to its assets root, e.g. ./hooks/useWeek."""
    relative = Path(unit_path).relative_to(root).as_posix()
    if relative.endswith(SOURCE_SUFFIX):
        relative = relative[:-len(SOURCE_SUFFIX)]
    return f"./{relative}"


def synthesize_content(root: Path | str, units: list[ExportUnit]) -> str:
    """Render the aggregator: namespace imports followed by one export block."""
    if not units:
        return "export {};\n"

    imports = [
        f"import * as {unit.name} from '{module_specifier(root, unit.path)}';\n"
        for unit in units
    ]
    names = ", ".join(unit.name for unit in units)
    return "".join(imports) + f"\nexport {{ {names} }};\n"
