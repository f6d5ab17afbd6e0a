"""Write an EntityGraph to a parcel output directory.

The output directory is a projection of the current run. Files this package
manages (indexed entities, relationships and the error artifact) that the
new graph does not produce are removed; everything else in the directory is
left alone. All documents are rendered before the directory is touched, then
staged in a sibling temp directory and moved into place with ``os.replace``.
"""

from __future__ import annotations

import json
import logging
import os
import re
import shutil
import tempfile
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Mapping

from .graph import EntityGraph


logger = logging.getLogger("parcel_graph.materialize")

INDEXED_KINDS = (
    "structure",
    "utility",
    "layout",
    "person",
    "company",
    "sales_history",
    "deed",
    "file",
    "tax",
)

MANAGED_PATTERNS = (
    re.compile(r"^(?:%s)_\d+\.json$" % "|".join(INDEXED_KINDS)),
    re.compile(r"^relationship_.+\.json$"),
    re.compile(r"^error\.json$"),
)

ERROR_FILE = "error.json"
STAGING_PREFIX = ".staging-"


@dataclass
class MaterializeReport:
    written: List[str] = field(default_factory=list)
    removed: List[str] = field(default_factory=list)
    dry_run: bool = False


def is_managed(name: str) -> bool:
    return any(pattern.match(name) for pattern in MANAGED_PATTERNS)


def render_document(payload: Mapping[str, Any]) -> str:
    return json.dumps(payload, indent=2, ensure_ascii=True) + "\n"


def stale_files(output_dir: Path, keep: List[str]) -> List[str]:
    if not output_dir.is_dir():
        return []
    keep_set = set(keep)
    return sorted(
        entry.name
        for entry in output_dir.iterdir()
        if entry.is_file() and is_managed(entry.name) and entry.name not in keep_set
    )


def leftover_staging_dirs(output_dir: Path) -> List[Path]:
    if not output_dir.is_dir():
        return []
    return sorted(
        entry
        for entry in output_dir.iterdir()
        if entry.is_dir() and entry.name.startswith(STAGING_PREFIX)
    )


def materialize(graph: EntityGraph, output_dir, *, dry_run: bool = False) -> MaterializeReport:
    out = Path(output_dir)
    rendered: Dict[str, str] = {
        name: render_document(payload) for name, payload in graph.documents().items()
    }
    names = list(rendered)
    removed = stale_files(out, names)

    if dry_run:
        return MaterializeReport(written=names, removed=removed, dry_run=True)

    out.mkdir(parents=True, exist_ok=True)
    # An interrupted run can leave its staging directory behind.
    for leftover in leftover_staging_dirs(out):
        shutil.rmtree(leftover)
        logger.info("removed leftover staging directory %s", leftover.name)
    staging = Path(tempfile.mkdtemp(prefix=STAGING_PREFIX, dir=out))
    try:
        for name, text in rendered.items():
            (staging / name).write_text(text, encoding="utf-8")
        for name in removed:
            (out / name).unlink()
            logger.debug("removed stale %s", name)
        for name in names:
            os.replace(staging / name, out / name)
            logger.debug("wrote %s", name)
    finally:
        shutil.rmtree(staging, ignore_errors=True)

    return MaterializeReport(written=names, removed=removed)


def write_error_file(output_dir, error: Mapping[str, Any]) -> Path:
    """Write the structured error artifact; no other file is touched."""

    out = Path(output_dir)
    out.mkdir(parents=True, exist_ok=True)
    path = out / ERROR_FILE
    path.write_text(render_document(error), encoding="utf-8")
    return path
