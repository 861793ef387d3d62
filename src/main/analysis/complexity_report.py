import argparse
import logging
import sys
from pathlib import Path
from typing import Iterable, List, Optional, Sequence

import pandas as pd
from tqdm import tqdm

from src.main.collect.source_file import SourceFile
from src.main.complexity.analyzer import Analyzer
from src.main.complexity.config import DEFAULT_EXTENSIONS, DEFAULT_THRESHOLD, ROOT_SIGNATURE

logger = logging.getLogger(__name__)

COLUMNS = ["file", "signature", "location", "depth", "score"]


def collect_files(paths: Iterable[Path], extensions: Sequence[str] = DEFAULT_EXTENSIONS) -> List[Path]:
    """
    Expand files and directories into a sorted list of source files.

    Raises:
        FileNotFoundError: A path does not exist.
        ValueError: Nothing with a matching extension was found.
    """
    found = set()
    for path in map(Path, paths):
        if path.is_file():
            found.add(path)
        elif path.is_dir():
            found.update(p for p in path.rglob("*") if p.is_file() and p.suffix in extensions)
        else:
            raise FileNotFoundError(f"No such file or directory: {path}")

    if not found:
        raise ValueError("No JavaScript files found.")

    return sorted(found)


def analyze_files(files: Sequence[Path], analyzer: Optional[Analyzer] = None) -> pd.DataFrame:
    analyzer = analyzer or Analyzer()
    rows = []
    for path in tqdm(files, desc="Scoring", disable=len(files) < 2):
        source = SourceFile.from_path(path)
        for record in source.analyze(analyzer):
            rows.append([source.name, record.signature(), record.location(), record.depth(), record.score()])
        logger.info("%s: %d scopes, score %s", source.name, len(source.records), source.score())
    return pd.DataFrame(rows, columns=COLUMNS)


def summarize(df: pd.DataFrame, threshold: float = DEFAULT_THRESHOLD) -> pd.DataFrame:
    """Non-root scopes scoring at least `threshold`, worst first."""
    hits = df[(df["score"] >= threshold) & (df["signature"] != ROOT_SIGNATURE)]
    return hits.sort_values(
        ["score", "file", "location"], ascending=[False, True, True]
    ).reset_index(drop=True)


def render(df: pd.DataFrame, fmt: str) -> str:
    if fmt == "json":
        return df.to_json(orient="records", indent=2)
    if fmt == "csv":
        return df.to_csv(index=False)
    if df.empty:
        return "No scopes to report."
    return df.to_string(index=False)


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        description="Score JavaScript functions by weighted branch, call and nesting penalties"
    )
    parser.add_argument(
        "paths",
        type=Path,
        nargs="+",
        help="Files or directories to analyze",
    )
    parser.add_argument(
        "--threshold",
        type=float,
        default=DEFAULT_THRESHOLD,
        help="Report scopes scoring at least this much",
    )
    parser.add_argument(
        "--format",
        choices=["table", "json", "csv"],
        default="table",
        help="Output format",
    )
    parser.add_argument(
        "--output",
        type=Path,
        default=None,
        help="Write the report to this file instead of stdout",
    )
    parser.add_argument(
        "--all",
        action="store_true",
        help="Report every scope, including program scopes",
    )
    parser.add_argument("--verbose", action="store_true", help="Log per-file progress")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.INFO if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        files = collect_files(args.paths)
    except (FileNotFoundError, ValueError) as e:
        print(e, file=sys.stderr)
        return 1

    df = analyze_files(files)
    hits = summarize(df, args.threshold)
    report = render(df if args.all else hits, args.format)

    if args.output is not None:
        args.output.write_text(report, encoding="utf-8")
        print(f"Report saved to {args.output}")
    else:
        print(report)

    return 2 if not hits.empty else 0


if __name__ == "__main__":
    sys.exit(main())
