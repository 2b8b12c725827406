import importlib.util
from pathlib import Path

SCRIPT = Path(__file__).resolve().parent.parent / "scripts" / "distribution_demo.py"


def load_script():
    spec = importlib.util.spec_from_file_location("distribution_demo", SCRIPT)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


def test_value_counts_include_unseen_values():
    demo = load_script()
    assert demo.value_counts([2, 2, 4], 1, 4) == [0, 2, 0, 1]


def test_report_lists_every_value_and_statistic():
    demo = load_script()
    lines = demo.build_report(1, 4, 400, seed=5)

    assert [line.split(":")[0] for line in lines[:4]] == ["1", "2", "3", "4"]
    assert sum(int(line.split(": ")[1]) for line in lines[:4]) == 400
    assert lines[4].startswith("chi-squared: ")
    assert " p=" in lines[4]
    assert "df=3, seed=5" in lines[4]
