from typing import Optional

from dts_to_cjs.rewriter.assembler import NamespaceNameGetter, assemble, default_namespace_name
from dts_to_cjs.rewriter.scanner import scan_exports
from dts_to_cjs.rewriter.stripper import strip_exports


def convert_dts_to_commonjs(
    content: str, file_name: str, get_namespace_name: Optional[NamespaceNameGetter] = None
) -> str:
    """
    Rewrite an ES module declaration document into its `export =` form.

    This is a one-shot transform: feeding the output back in is not expected to be
    a fixed point.

    Args:
        content (str): The `.d.ts` document text.
        file_name (str): Source identifier; only used to derive the namespace name.
        get_namespace_name (Optional[Callable[[str], str]]): Called with `file_name` to
            name the namespace wrapper instead of deriving it from the file name.

    Returns:
        str: The rewritten document.
    """
    names, default_payload = scan_exports(content)
    body = strip_exports(content)
    return assemble(body, names, default_payload, file_name, get_namespace_name)


rewrite = convert_dts_to_commonjs

__all__ = ["convert_dts_to_commonjs", "default_namespace_name", "rewrite"]
