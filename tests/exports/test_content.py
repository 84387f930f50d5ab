"""Tests for aggregator content synthesis."""

from pathlib import Path

from assets_shared.exports import ExportUnit, module_specifier, synthesize_content

ROOT = Path("/proj/src/views/home/assets")


def _parse(content: str) -> tuple[list[str], list[str]]:
    imports = [line for line in content.splitlines() if line.startswith("import ")]
    export_line = next(line for line in content.splitlines() if line.startswith("export"))
    inner = export_line[len("export {"):-len("};")].strip()
    names = [n.strip() for n in inner.split(",") if n.strip()]
    return imports, names


class TestModuleSpecifier:
    def test_relative_to_root_without_extension(self) -> None:
        assert module_specifier(ROOT, ROOT / "hooks" / "useWeek.ts") == "./hooks/useWeek"

    def test_component_index(self) -> None:
        path = ROOT / "components" / "Button" / "index.ts"
        assert module_specifier(ROOT, path) == "./components/Button/index"

    def test_ancestor_named_assets_does_not_confuse(self) -> None:
        root = Path("/assets/views/assets")
        assert module_specifier(root, root / "a" / "b.ts") == "./a/b"


class TestSynthesizeContent:
    def test_single_unit(self) -> None:
        units = [ExportUnit(ROOT / "hooks" / "useFoo.ts", "hooksUseFoo")]
        assert synthesize_content(ROOT, units) == (
            "import * as hooksUseFoo from './hooks/useFoo';\n"
            "\n"
            "export { hooksUseFoo };\n"
        )

    def test_one_import_per_unit_and_names_in_order(self) -> None:
        units = [
            ExportUnit(ROOT / "utils" / "format.ts", "utilsFormat"),
            ExportUnit(ROOT / "hooks" / "useA.ts", "hooksUseA"),
            ExportUnit(ROOT / "components" / "Tag" / "index.ts", "TagIndex"),
        ]
        imports, names = _parse(synthesize_content(ROOT, units))
        assert len(imports) == 3
        assert names == ["utilsFormat", "hooksUseA", "TagIndex"]
        assert imports[2] == "import * as TagIndex from './components/Tag/index';"

    def test_duplicates_are_kept(self) -> None:
        units = [
            ExportUnit(ROOT / "a" / "hooks" / "useA.ts", "hooksUseA"),
            ExportUnit(ROOT / "b" / "hooks" / "useA.ts", "hooksUseA"),
        ]
        imports, names = _parse(synthesize_content(ROOT, units))
        assert len(imports) == 2
        assert names == ["hooksUseA", "hooksUseA"]

    def test_empty_units(self) -> None:
        assert synthesize_content(ROOT, []) == "export {};\n"
