"""Export name derivation: hooks/useWeek.ts -> hooksUseWeek."""
from pathlib import Path


def derive_export_name(parent: Path | str, file_name: str) -> str:
    """Join the parent directory name with the capitalized file stem.

    The stem ends at the first dot, so ``use.week.ts`` contributes ``Use``.
    Names are not sanitized; directory and file names must already be valid
    identifier fragments.
    """
    folder = Path(parent).name
    stem = file_name.split(".", 1)[0]
    return f"{folder}{stem[:1].upper()}{stem[1:]}"
