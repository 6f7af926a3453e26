from dts_to_cjs.rewriter.stripper import strip_exports


def test_strip_declared_exports() -> None:
    assert strip_exports("export declare function foo(): void;") == "declare function foo(): void;"


def test_strip_default_export_keeps_payload() -> None:
    assert strip_exports("export default Something;") == "Something;"


def test_strip_removes_export_list_lines() -> None:
    content = "declare const foo: number;\nexport { foo, bar as baz };\ndeclare const bar: string;"
    stripped = strip_exports(content)
    assert "export" not in stripped
    assert "{" not in stripped
    assert "declare const foo: number;" in stripped
    assert "declare const bar: string;" in stripped


def test_strip_removes_multiline_export_list() -> None:
    stripped = strip_exports("declare const a: 1;\nexport {\n  a\n};\n")
    assert stripped.strip() == "declare const a: 1;"


def test_strip_bare_export_keyword() -> None:
    assert strip_exports("export interface Options {\n  debug: boolean;\n}") == "interface Options {\n  debug: boolean;\n}"


def test_strip_leaves_nested_exports_alone() -> None:
    content = "declare namespace Inner {\n  export const x: number;\n}"
    assert strip_exports(content) == content


def test_strip_reexport_from_other_document_keeps_list() -> None:
    # not a recognised form; only the keyword is dropped
    assert strip_exports("export { foo } from './foo';") == "{ foo } from './foo';"
