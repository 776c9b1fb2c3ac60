import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from tqdm import tqdm

from .exceptions import ExifWrapError
from .metadata.extract import ExifToolExtractor, ToolCommand
from .models import MediaRecord
from .reporting import SummaryReport

def setup_logging(verbose: bool, log_file: Optional[Path] = None):
    """Sets up logging to the console and, optionally, to a file."""
    log_level = logging.DEBUG if verbose else logging.INFO

    handlers = [logging.StreamHandler(sys.stdout)]
    if log_file:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(log_file, encoding='utf-8'))

    logging.basicConfig(
        level=log_level,
        format="%(asctime)s [%(levelname)s] %(message)s",
        handlers=handlers,
        force=True,
    )

def parse_args(argv=None):
    p = argparse.ArgumentParser(description="Dump exiftool metadata for media files")

    p.add_argument("files", type=Path, nargs="+", help="Files to analyze")

    p.add_argument("--exiftool", type=str, default=None,
                   help="Command to run instead of looking up exiftool on PATH (e.g. 'perl /opt/exiftool')")
    p.add_argument("--arg", dest="tool_args", action="append", default=[],
                   help="Extra exiftool argument, repeatable (use --arg=-n for dashed values)")
    p.add_argument("--summary", action="store_true", help="Print camera, lens, date and GPS state only")
    p.add_argument("--csv", type=Path, default=None, help="Write a summary CSV instead of printing")
    p.add_argument("--log-file", type=Path, default=None, help="Also write the log to this file")
    p.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")

    args = p.parse_args(argv)
    if args.exiftool is not None:
        try:
            args.exiftool = ToolCommand.parse(args.exiftool)
        except ValueError as e:
            p.error(f"--exiftool: {e}")
    return args

def format_summary(record: MediaRecord) -> str:
    row = SummaryReport().build_row(record)
    path, camera, lens, date, geotagged = (value or "-" for value in row)
    return f"{path}\n\tCamera: {camera}\n\tLens: {lens}\n\tDate: {date}\n\tGeotagged: {geotagged}\n"

def main(argv=None) -> int:
    args = parse_args(argv)
    setup_logging(args.verbose, args.log_file)

    extractor = ExifToolExtractor(args.exiftool)

    records: List[MediaRecord] = []
    failures = 0

    try:
        files = tqdm(args.files, desc="Reading metadata") if args.csv else args.files
        for path in files:
            try:
                record = extractor.extract(path, args.tool_args)
            except ExifWrapError as e:
                logging.error(f"{path}: {e}")
                failures += 1
                continue

            if args.csv:
                records.append(record)
            elif args.summary:
                print(format_summary(record), end="")
            else:
                print(record, end="")

        if args.csv:
            SummaryReport().write_csv(records, args.csv)
    except KeyboardInterrupt:
        logging.warning("Operation cancelled by user.")
        return 1

    if failures:
        logging.warning(f"{failures} of {len(args.files)} files failed.")
        return 1
    return 0

if __name__ == "__main__":
    sys.exit(main())
