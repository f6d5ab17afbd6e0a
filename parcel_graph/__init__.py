"""Compatibility shim for src-layout imports.

The real package lives in src/parcel_graph. Tests run the CLI via
`python -m parcel_graph` from the repo root, where Python would otherwise
find this top-level directory first and treat it as an incomplete package.

This shim extends the package search path to include the real implementation.
"""

from __future__ import annotations

from pathlib import Path
import sys

_SRC_DIR = Path(__file__).resolve().parent.parent / "src"
_IMPL_PKG_DIR = _SRC_DIR / "parcel_graph"

if _IMPL_PKG_DIR.is_dir():
    src_str = str(_SRC_DIR)
    if src_str not in sys.path:
        sys.path.insert(0, src_str)

    impl_str = str(_IMPL_PKG_DIR)
    if impl_str not in list(__path__):  # type: ignore[name-defined]
        __path__.append(impl_str)  # type: ignore[name-defined]

    __all__ = ["run_parcel", "ParcelRunResult"]
else:
    __all__ = []


def __getattr__(name: str):
    if name == "run_parcel":
        from .pipeline import run_parcel

        return run_parcel
    if name == "ParcelRunResult":
        from .pipeline import ParcelRunResult

        return ParcelRunResult
    raise AttributeError(name)
