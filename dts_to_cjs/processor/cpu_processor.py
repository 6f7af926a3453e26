from multiprocessing import Pool, cpu_count
import os
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence

from tqdm import tqdm

from dts_to_cjs.global_vars import get_logger
from dts_to_cjs.rewriter.assembler import NamespaceNameGetter
from dts_to_cjs.utils import (
    DEFAULT_IGNORE,
    DEFAULT_OUT_DIR,
    DEFAULT_PATTERN,
    find_declaration_files,
    process_chunk,
    split_into_chunks,
)


def _display_path(path: Path) -> str:
    try:
        return os.path.relpath(path, os.getcwd())
    except ValueError:
        return str(path)


def _run_chunks(
    chunks: List[List[Path]], get_namespace_name: Optional[NamespaceNameGetter], n_workers: int
) -> List[Dict[str, Any]]:
    args_list = [(chunk, get_namespace_name, i) for i, chunk in enumerate(chunks)]
    progress = tqdm(total=sum(len(chunk) for chunk in chunks), desc="Converting declarations", unit="file")

    worker_results = []
    with progress:
        if n_workers == 1:
            # one file per call so the bar advances per document
            for chunk, _, worker_id in args_list:
                for path in chunk:
                    worker_results.append(process_chunk(([path], get_namespace_name, worker_id)))
                    progress.update(1)
        else:
            with Pool(n_workers) as pool:
                for result in pool.imap(process_chunk, args_list):
                    worker_results.append(result)
                    progress.update(result["items_processed"])
    return worker_results


def convert_declarations(
    out_dir: Path = DEFAULT_OUT_DIR,
    pattern: str = DEFAULT_PATTERN,
    ignore: Sequence[str] = DEFAULT_IGNORE,
    get_namespace_name: Optional[NamespaceNameGetter] = None,
    n_workers: int = 1,
) -> Dict[str, List[Dict[str, Any]]]:
    """
    Write a `.d.cts` companion for every `.d.ts` file under out_dir.

    Comment-only documents are skipped. A document that fails to convert is logged
    and reported without stopping the others; only a failure to list out_dir aborts.

    Returns:
        Dict[str, List[Dict[str, Any]]]: Per-file results grouped under
        "converted", "skipped" and "failed", in file order.
    """
    logger = get_logger()
    n_workers = n_workers or cpu_count()

    files = find_declaration_files(out_dir, pattern, ignore)
    logger.info(f"Converting {len(files)} .d.ts files to CommonJS format using {n_workers} workers...")

    summary: Dict[str, List[Dict[str, Any]]] = {"converted": [], "skipped": [], "failed": []}
    if not files:
        return summary

    chunks = split_into_chunks(files, min(n_workers, len(files)))
    worker_results = _run_chunks(chunks, get_namespace_name, min(n_workers, len(chunks)))

    total_time = sum(result["processing_time"] for result in worker_results)
    logger.debug(f"  Chunks processed in {total_time / len(worker_results):.2f}s average per worker")

    for worker_result in worker_results:
        for result in worker_result["results"]:
            summary[result["status"]].append(result)
            if result["status"] == "converted":
                logger.info(f"  {_display_path(result['source'])} -> {_display_path(result['output'])}")
            elif result["status"] == "failed":
                logger.error(f"  Failed to convert {result['source']}: {result['error']}")

    logger.info(
        f"CommonJS declaration files generated. Converted: {len(summary['converted'])}, "
        f"skipped: {len(summary['skipped'])}, failed: {len(summary['failed'])}"
    )
    return summary
