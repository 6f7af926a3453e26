import re
from typing import List, Optional, Tuple


DECLARATION_KEYWORDS = ("function", "const", "let", "var", "class", "interface", "type", "enum")

_DECLARED_EXPORT_RE = re.compile(
    rf"^export\s+declare\s+(?:{'|'.join(DECLARATION_KEYWORDS)})\s+(\w+)", re.MULTILINE | re.ASCII
)
# a trailing `from '...'` re-exports another document and is not matched
_EXPORT_LIST_RE = re.compile(r"^export\s+\{([^}]*)\}(?!\s*from\b)", re.MULTILINE)
_ALIAS_RE = re.compile(r"(\w+)\s+as\s+(\w+)", re.ASCII)
_DEFAULT_EXPORT_RE = re.compile(r"^export\s+default\s+([^\r\n]+)", re.MULTILINE)


def scan_declared_exports(content: str) -> List[str]:
    return [match.group(1) for match in _DECLARED_EXPORT_RE.finditer(content)]


def parse_export_list(items: str) -> List[str]:
    """Effective names of an `export { ... }` list body; `a as b` exports `b`."""
    names = []
    for item in items.split(","):
        trimmed = item.strip()
        if not trimmed:
            continue
        alias = _ALIAS_RE.search(trimmed)
        names.append(alias.group(2) if alias else trimmed)
    return names


def scan_export_lists(content: str) -> List[str]:
    names = []
    for match in _EXPORT_LIST_RE.finditer(content):
        names.extend(parse_export_list(match.group(1)))
    return names


def scan_default_export(content: str) -> Optional[str]:
    """Return the text following the first `export default`, or None."""
    match = _DEFAULT_EXPORT_RE.search(content)
    if match is None:
        return None
    payload = match.group(1).strip()
    return payload or None


def scan_exports(content: str) -> Tuple[List[str], Optional[str]]:
    """
    Collect the public surface of a declaration document.

    Args:
        content (str): The declaration document text.

    Returns:
        Tuple[List[str], Optional[str]]: Exported names, de-duplicated in first-seen order,
        and the default export payload (None when the document has no default export).
    """
    names = scan_declared_exports(content) + scan_export_lists(content)
    return list(dict.fromkeys(names)), scan_default_export(content)
