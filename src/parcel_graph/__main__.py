import argparse
import json
import logging
from pathlib import Path

from .adapters import get_adapter, supported_counties
from .errors import EnumResolutionError, ExtractionError
from .feature_flags import get_flags
from .materialize import write_error_file
from .pipeline import run_parcel
from .seeds import load_seeds


def _build_parser():
    parser = argparse.ArgumentParser(
        description="Normalize one parcel page into entity and relationship files",
    )
    parser.add_argument(
        "--county",
        required=True,
        help=f"County adapter to use ({', '.join(supported_counties())})",
    )
    parser.add_argument(
        "--input",
        required=True,
        help="Parcel page HTML file",
    )
    parser.add_argument(
        "--output",
        required=True,
        help="Directory that receives the entity and relationship files",
    )
    parser.add_argument(
        "--seeds-dir",
        default=None,
        help="Directory holding owner/structure/utility/layout seed documents "
        "(default: <input dir>/owners)",
    )
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Build the graph and print planned file names without writing",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        help="Logging level (DEBUG, INFO, etc.)",
    )
    parser.add_argument(
        "--log-json",
        action="store_true",
        help="Emit one JSON summary line for the run",
    )
    return parser


def main(argv=None):
    args = _build_parser().parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, str(args.log_level).upper(), logging.WARNING),
        format="%(levelname)s %(name)s: %(message)s",
    )

    input_path = Path(args.input)
    seeds_dir = Path(args.seeds_dir) if args.seeds_dir else input_path.parent / "owners"
    try:
        adapter = get_adapter(args.county)
        bundle = adapter.extract(input_path.read_text(encoding="utf-8"))
        seeds = load_seeds(seeds_dir, bundle.parcel_id)
        result = run_parcel(bundle, args.output, seeds=seeds, dry_run=args.dry_run)
    except (EnumResolutionError, ExtractionError) as exc:
        print(json.dumps(exc.to_dict()))
        if get_flags().emit_error_file and not args.dry_run:
            write_error_file(args.output, exc.to_dict())
        raise SystemExit(1)

    if args.dry_run:
        for name in result.files_written:
            print(name)
        for name in result.files_removed:
            print(f"remove {name}")
    else:
        print(
            f"Wrote {len(result.files_written)} file(s) to {result.output_dir} "
            f"({len(result.files_removed)} stale removed)"
        )
    if args.log_json:
        print(json.dumps(result.to_dict()))


def _safe_main():
    try:
        main()
    except SystemExit:
        raise
    except Exception as exc:
        print(json.dumps({"error": str(exc)}))
        raise SystemExit(1)


if __name__ == "__main__":
    _safe_main()
