from functools import partial
import json
from pathlib import Path
import re

from dts_to_cjs.rewriter.assembler import NamespaceNameGetter


def fixed_namespace_name(_file_name: str, name: str) -> str:
    return name


def to_camel_case(name: str) -> str:
    """`my-cool-lib` -> `myCoolLib`"""
    return re.sub(r"-.", lambda match: match.group(0)[1].upper(), name)


def read_package_name(package_json: Path) -> str:
    """Read the `name` field of a package.json, without any `@scope/` prefix."""
    with package_json.open("r", encoding="utf-8") as fin:
        manifest = json.load(fin)

    name = manifest.get("name") if isinstance(manifest, dict) else None
    if not isinstance(name, str) or not name:
        raise ValueError("Name property in package.json is missing.")
    return name.rsplit("/", 1)[-1]


def package_namespace_name(package_json: Path) -> NamespaceNameGetter:
    """
    Build a namespace-name override that names every wrapper after the package.

    A `functools.partial` of a module-level function is returned instead of a closure
    so that the override can be shipped to worker processes.
    """
    return partial(fixed_namespace_name, name=to_camel_case(read_package_name(package_json)))


def static_namespace_name(name: str) -> NamespaceNameGetter:
    return partial(fixed_namespace_name, name=name)
