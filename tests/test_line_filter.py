from __future__ import annotations

import pytest

from remove_print_cli.line_filter import (
    filter_lines,
    is_print_statement,
    read_lines,
    strip_print_statements,
)


@pytest.mark.parametrize(
    "line",
    [
        "print('hi');",
        "    print(\"value: $x\");",
        "\tprint(a, b);",
        "  print('done'); // trailing comment",
        "print(foo(bar));",
    ],
)
def test_matches_single_line_print(line: str) -> None:
    assert is_print_statement(line)


@pytest.mark.parametrize(
    "line",
    [
        "debugPrint('hi');",
        "  x = 1; print('hi');",
        "  print('unterminated')",
        "  print(",
        "// print('commented');",
        "  printf('x');",
        "",
    ],
)
def test_ignores_other_lines(line: str) -> None:
    assert not is_print_statement(line)


def test_filter_lines_keeps_order() -> None:
    lines = ["a", "print(1);", "b", "  print(2);", "c"]
    assert filter_lines(lines) == ["a", "b", "c"]


def test_read_lines_normalises_line_breaks(tmp_path) -> None:
    path = tmp_path / "mixed.dart"
    path.write_bytes(b"one\r\ntwo\rthree\nfour\n")
    assert read_lines(path) == ["one", "two", "three", "four"]


def test_read_lines_empty_file(tmp_path) -> None:
    path = tmp_path / "empty.dart"
    path.write_bytes(b"")
    assert read_lines(path) == []


def test_scenario_file_loses_print_line(tmp_path) -> None:
    path = tmp_path / "main.dart"
    path.write_text("void main() {\n  print('hi');\n}\n", encoding="utf-8")

    result = strip_print_statements(path)

    assert result.removed == 1
    assert result.changed
    assert path.read_text(encoding="utf-8") == "void main() {\n}"


def test_line_count_drops_by_removed(tmp_path) -> None:
    lines = ["class A {", "  void f() {", "    print('a');", "    g();", "    print('b');", "  }", "}"]
    path = tmp_path / "a.dart"
    path.write_text("\n".join(lines), encoding="utf-8")

    result = strip_print_statements(path)

    assert result.removed == 2
    assert len(read_lines(path)) == len(lines) - 2
    assert result.kept_lines == read_lines(path)


def test_untouched_file_is_byte_identical(tmp_path) -> None:
    path = tmp_path / "clean.dart"
    original = b"void main() {\r\n  debugPrint('x');\r\n}\r\n"
    path.write_bytes(original)
    before = path.stat().st_mtime_ns

    result = strip_print_statements(path)

    assert result.removed == 0
    assert not result.changed
    assert path.read_bytes() == original
    assert path.stat().st_mtime_ns == before


def test_multiline_print_is_left_alone(tmp_path) -> None:
    path = tmp_path / "multi.dart"
    content = "void main() {\n  print(\n    'hi');\n}\n"
    path.write_text(content, encoding="utf-8")

    result = strip_print_statements(path)

    assert result.removed == 0
    assert path.read_text(encoding="utf-8") == content


def test_second_pass_removes_nothing(tmp_path) -> None:
    path = tmp_path / "twice.dart"
    path.write_text("print(1);\nx();\nprint(2);\n", encoding="utf-8")

    assert strip_print_statements(path).removed == 2
    assert strip_print_statements(path).removed == 0
    assert path.read_text(encoding="utf-8") == "x();"
