import os
import re
from typing import Callable, List, Optional


DEFAULT_NAMESPACE_NAME = "Library"
DECLARATION_SUFFIX = ".d.ts"

NamespaceNameGetter = Callable[[str], str]


def default_namespace_name(file_name: str) -> str:
    """
    Derive a namespace identifier from a declaration file name.

    `dist/123-my.pkg.d.ts` becomes `_123mypkg`; a name with no usable characters
    falls back to `Library`.
    """
    base_name = os.path.basename(file_name)
    if base_name.endswith(DECLARATION_SUFFIX):
        base_name = base_name[: -len(DECLARATION_SUFFIX)]
    name = re.sub(r"[^a-zA-Z0-9]", "", base_name)
    name = re.sub(r"^(\d)", r"_\1", name)
    return name or DEFAULT_NAMESPACE_NAME


def assemble_default_export(body: str, default_payload: str) -> str:
    # the payload was left behind as a bare statement when `export default ` was stripped
    result = re.sub(rf"^{re.escape(default_payload)}", "", body, count=1, flags=re.MULTILINE)
    value = re.sub(r";$", "", default_payload)
    result += f"\n\nexport = {value};"
    return result.strip()


def assemble_namespace(body: str, names: List[str], namespace_name: str) -> str:
    members = ", ".join(dict.fromkeys(names))
    result = body
    result += f"\n\ndeclare namespace {namespace_name} {{\n"
    result += f"  export {{ {members} }};\n"
    result += f"}}\n\nexport = {namespace_name};"
    return result.strip()


def assemble_empty_module(body: str) -> str:
    return (body + "\n\nexport {};").strip()


def assemble(
    body: str,
    names: List[str],
    default_payload: Optional[str],
    file_name: str,
    get_namespace_name: Optional[NamespaceNameGetter] = None,
) -> str:
    """
    Build the CommonJS declaration text from a stripped body.

    Exactly one shape is produced: `export = <default>` when a default export exists
    (named exports are then dropped), a `declare namespace` wrapper when there are named
    exports, or `export {};` so that an export-less document stays a module.

    Args:
        body (str): Declaration text with export syntax removed.
        names (List[str]): Exported names in first-seen order.
        default_payload (Optional[str]): Text following `export default`, if any.
        file_name (str): Source file name, used to derive the namespace name.
        get_namespace_name (Optional[Callable[[str], str]]): Replaces the derived namespace name.

    Returns:
        str: The rewritten document, stripped of surrounding whitespace.
    """
    if default_payload:
        return assemble_default_export(body, default_payload)

    if names:
        namespace_name = get_namespace_name(file_name) if get_namespace_name else default_namespace_name(file_name)
        return assemble_namespace(body, names, namespace_name)

    return assemble_empty_module(body)
