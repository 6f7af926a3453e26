from fnmatch import fnmatch
import glob
import os
from pathlib import Path
import re
import time
from typing import Any, Dict, List, Optional, Sequence

from dts_to_cjs.rewriter import convert_dts_to_commonjs
from dts_to_cjs.rewriter.assembler import NamespaceNameGetter


DEFAULT_OUT_DIR = Path("dist")
DEFAULT_PATTERN = "**/*.d.ts"
DEFAULT_IGNORE = ("**/*.d.cts", "**/*.d.mts")

_COMMENT_RE = re.compile(r"/\*[\s\S]*?\*/|//.*$", re.MULTILINE)
_DTS_SUFFIX_RE = re.compile(r"\.d\.ts$")


def is_ignored(relative_path: str, ignore: Sequence[str]) -> bool:
    for pattern in ignore:
        if fnmatch(relative_path, pattern):
            return True
        # `**/` also matches files directly under the search root
        if pattern.startswith("**/") and fnmatch(relative_path, pattern[3:]):
            return True
    return False


def find_declaration_files(
    out_dir: Path, pattern: str = DEFAULT_PATTERN, ignore: Sequence[str] = DEFAULT_IGNORE
) -> List[Path]:
    """Find declaration files under out_dir, sorted and absolute"""
    if not out_dir.is_dir():
        raise FileNotFoundError(f"Output directory {out_dir} does not exist")

    root = out_dir.resolve()
    files = []
    for match in glob.glob(os.path.join(glob.escape(str(root)), pattern), recursive=True):
        path = Path(match)
        if not path.is_file():
            continue
        if is_ignored(path.relative_to(root).as_posix(), ignore):
            continue
        files.append(path)
    return sorted(files)


def has_meaningful_content(content: str) -> bool:
    """Check if anything other than comments and whitespace is left."""
    return bool(_COMMENT_RE.sub("", content).strip())


def cjs_output_path(path: Path) -> Path:
    output = Path(_DTS_SUFFIX_RE.sub(".d.cts", str(path)))
    if output == path:
        raise ValueError(f"{path} is not a .d.ts file, refusing to overwrite it")
    return output


def process_declaration_file(path: Path, get_namespace_name: Optional[NamespaceNameGetter] = None) -> Dict[str, Any]:
    result: Dict[str, Any] = {"source": path, "status": "converted", "output": None, "error": None}
    try:
        content = path.read_text(encoding="utf-8")
        if not has_meaningful_content(content):
            result["status"] = "skipped"
            return result

        output_path = cjs_output_path(path)
        converted = convert_dts_to_commonjs(content, str(path), get_namespace_name)
        output_path.write_text(converted, encoding="utf-8")
        result["output"] = output_path
    except Exception as e:
        # one broken document must not stop the rest of the batch
        result["status"] = "failed"
        result["error"] = f"{type(e).__name__}: {e}"
    return result


def split_into_chunks(items: list, n_workers: int) -> list[list]:
    """Split items into roughly equal chunks for workers"""
    chunk_size = len(items) // n_workers
    remainder = len(items) % n_workers

    chunks = []
    start = 0

    for i in range(n_workers):
        # Distribute remainder across first few chunks
        current_chunk_size = chunk_size + (1 if i < remainder else 0)
        if current_chunk_size > 0:
            chunks.append(items[start : start + current_chunk_size])
            start += current_chunk_size

    return chunks


def process_chunk(args: tuple[list[Path], Optional[NamespaceNameGetter], int]) -> Dict[str, Any]:
    """Convert a chunk of declaration files inside one worker"""
    chunk, get_namespace_name, worker_id = args
    start_time = time.time()

    results = [process_declaration_file(path, get_namespace_name) for path in chunk]

    return {
        "results": results,
        "items_processed": len(chunk),
        "processing_time": time.time() - start_time,
        "worker_id": worker_id,
    }
