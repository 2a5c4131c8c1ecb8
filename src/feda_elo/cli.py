"""Command-line interface for loading the FEDA rating list."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Optional, Sequence

from feda_elo.config.targets import iter_extensions
from feda_elo.config_loader import RunProfile
from feda_elo.errors import ConfigurationError, FedaEloError
from feda_elo.pipeline import Pipeline


def _parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Load the FEDA ELO rating list into SQLite or CSV")
    parser.add_argument("folder", nargs="?", default=None, help="Existing working folder")
    parser.add_argument(
        "--target",
        default=None,
        help=f"Destination file inside the folder ({', '.join(sorted(iter_extensions()))}); empty for a dry run",
    )
    parser.add_argument("--url", default=None, help="URL of the ZIP archive holding the spreadsheet")
    parser.add_argument(
        "--spreadsheet",
        type=Path,
        default=None,
        help="Parse an existing local .xls/.xlsx instead of downloading",
    )
    parser.add_argument(
        "--strict",
        action="store_true",
        help="Abort on the first rejected record instead of skipping it",
    )
    parser.add_argument("--keep", action="store_true", help="Keep the downloaded spreadsheet")
    parser.add_argument("-v", "--verbose", action="store_true", help="Show progress messages")
    parser.add_argument("--report", type=Path, default=None, help="Optional path to write the load report JSON")
    parser.add_argument("--load-profile", type=Path, help="Load run options JSON", default=None)
    parser.add_argument("--save-profile", type=Path, help="Save run options JSON", default=None)
    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = _parse_args(argv)
    logging.basicConfig(
        stream=sys.stdout,
        level=logging.INFO if args.verbose else logging.WARNING,
        format="%(message)s",
    )

    profile = RunProfile.load(args.load_profile) if args.load_profile else RunProfile()
    folder = args.folder or profile.folder
    target = args.target if args.target is not None else profile.target
    url = args.url or profile.url
    strict = args.strict or profile.strict

    if not folder:
        print("A working folder is required (argument or profile)", file=sys.stderr)
        return 2

    try:
        pipeline = Pipeline(
            folder,
            target=target,
            url=url,
            verbose=args.verbose,
            strict=strict,
            spreadsheet=args.spreadsheet,
        )
    except ConfigurationError as exc:
        print(f"Configuration error: {exc}", file=sys.stderr)
        return 2

    if args.save_profile:
        RunProfile(folder=str(folder), target=target, url=url, strict=strict).save(args.save_profile)
        print(f"Saved run profile to {args.save_profile}")

    try:
        if args.spreadsheet is not None:
            count = pipeline.parse()
        elif args.keep:
            count = pipeline.parse() if pipeline.download() else 0
        else:
            count = pipeline.run()
    except FedaEloError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    destination = pipeline.destination or "NULL target"
    print(f"Loaded {count} records into {destination}")
    report = pipeline.report
    if report is not None and report.records_rejected:
        preview = ", ".join(report.rejected_rows[:5])
        more = report.records_rejected - 5
        suffix = f", +{more} more" if more > 0 else ""
        print(f"Rejected rows: {preview}{suffix}")
    if args.report and report is not None:
        args.report.write_text(json.dumps(report.to_dict(), indent=2), encoding="utf-8")
        print(f"Wrote load report to {args.report}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
