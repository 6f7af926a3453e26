import re


# Applied in order. Export lists must be deleted before the bare `export ` rule runs,
# otherwise the list loses only its keyword and a dangling `{ ... }` block is left behind.
STRIP_RULES = (
    (re.compile(r"^export\s+declare\s+", re.MULTILINE), "declare "),
    (re.compile(r"^export\s+default\s+", re.MULTILINE), ""),
    (re.compile(r"^export\s+\{[^}]*\}\s*;?\s*$", re.MULTILINE), ""),
    (re.compile(r"^export\s+", re.MULTILINE), ""),
)


def strip_exports(content: str) -> str:
    """Remove export syntax, leaving only ambient declarations."""
    result = content
    for pattern, replacement in STRIP_RULES:
        result = pattern.sub(replacement, result)
    return result
