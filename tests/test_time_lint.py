import importlib.util
from pathlib import Path
from types import ModuleType

SCRIPT_PATH = Path(__file__).resolve().parents[1] / "scripts" / "time_lint.py"


def load_time_lint() -> ModuleType:
    spec = importlib.util.spec_from_file_location("time_lint", SCRIPT_PATH)
    assert spec is not None and spec.loader is not None
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


def test_load_scripts_picks_csc_files_case_insensitively(tmp_path: Path) -> None:
    (tmp_path / "nested").mkdir()
    (tmp_path / "a.csc").write_text("FIX\nENDFIX\n", encoding="utf-8")
    (tmp_path / "nested" / "b.CSC").write_text("FIX\n", encoding="utf-8")
    (tmp_path / "notes.txt").write_text("FIX\n", encoding="utf-8")

    texts = load_time_lint()._load_scripts(tmp_path)

    assert texts == ["FIX\nENDFIX\n", "FIX\n"]


def test_lint_pass_counts_diagnostics() -> None:
    duration, diagnostics = load_time_lint()._lint_pass(["FIX\n", "a,,b\n", "IF\nENDIF\n"])

    assert duration >= 0
    assert diagnostics == 2
