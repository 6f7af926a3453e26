import pytest

from dts_to_cjs.rewriter import assembler


@pytest.mark.parametrize(
    "file_name,expected",
    [
        ("dist/index.d.ts", "index"),
        ("/abs/path/123-my.pkg.d.ts", "_123mypkg"),
        ("123-my.pkg", "_123mypkg"),
        ("dist/my-lib_utils.d.ts", "mylibutils"),
        ("dist/---.d.ts", "Library"),
        ("", "Library"),
    ],
)
def test_default_namespace_name(file_name: str, expected: str) -> None:
    assert assembler.default_namespace_name(file_name) == expected


def test_assemble_default_branch_drops_named_exports() -> None:
    body = "declare const a: 1;\nSomething;"
    output = assembler.assemble(body, ["a"], "Something;", "index.d.ts")
    assert output == "declare const a: 1;\n\n\nexport = Something;"
    assert "namespace" not in output


def test_assemble_default_branch_removes_payload_only_at_line_start() -> None:
    body = "declare function make(): Widget;\nWidget;"
    output = assembler.assemble(body, [], "Widget;", "index.d.ts")
    assert output.startswith("declare function make(): Widget;")
    assert output.endswith("export = Widget;")
    assert output.count("Widget;") == 2


def test_assemble_namespace_branch() -> None:
    output = assembler.assemble("declare const a: 1;", ["a", "b", "a"], None, "dist/my-lib.d.ts")
    assert output == (
        "declare const a: 1;\n\n"
        "declare namespace mylib {\n"
        "  export { a, b };\n"
        "}\n\n"
        "export = mylib;"
    )


def test_assemble_namespace_branch_uses_override() -> None:
    seen = []

    def override(file_name: str) -> str:
        seen.append(file_name)
        return "Custom"

    output = assembler.assemble("declare const a: 1;", ["a"], None, "dist/index.d.ts", override)
    assert seen == ["dist/index.d.ts"]
    assert "declare namespace Custom {" in output
    assert output.endswith("export = Custom;")


def test_assemble_empty_branch_does_not_call_override() -> None:
    def override(_file_name: str) -> str:
        raise AssertionError("should not be called")

    assert assembler.assemble("  declare const a: 1;\n", [], None, "x.d.ts", override) == (
        "declare const a: 1;\n\n\nexport {};"
    )
