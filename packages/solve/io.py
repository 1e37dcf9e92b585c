"""
I/O utilities for solve runs.

Responsibilities:
- write_words_csv: one row per matched word (rank, word).
- write_manifest:  dump a JSON manifest with config, constraints, and metadata.
- timestamp_id:    stable UTC run ID string.
- git_commit_or_unknown: best-effort short commit hash for reproducibility.
"""

from __future__ import annotations

from pathlib import Path
from typing import Dict, Iterable
import csv
import json
import subprocess
import datetime as dt


def write_words_csv(words: Iterable[str], path: str) -> str:
    """
    Serialize matched words to CSV.

    Schema (columns): rank, word   (rank is 1-based, in result order)

    Returns:
      The path written (string).
    """
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)

    with p.open("w", newline="", encoding="utf-8") as f:
        w = csv.DictWriter(f, fieldnames=["rank", "word"])
        w.writeheader()
        for rank, word in enumerate(words, start=1):
            w.writerow({"rank": rank, "word": word})

    return str(p)


def write_manifest(manifest: Dict, path: str) -> str:
    """
    Write a JSON manifest describing a solve run.

    Typical keys:
      - run_id, git_commit
      - config: CLI args (source, dictionary, limit, outdir)
      - constraints: WordConstraints.to_dict()
      - wordlist: output of datasets.validate_wordlist(...) when a file was used
      - count, time_ms
    """
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)
    with p.open("w", encoding="utf-8") as f:
        json.dump(manifest, f, indent=2)
    return str(p)


def timestamp_id() -> str:
    """
    Return a compact UTC timestamp suitable for filenames, e.g. 20250820T024121Z.
    """
    return dt.datetime.now(dt.timezone.utc).strftime("%Y%m%dT%H%M%SZ")


def git_commit_or_unknown() -> str:
    """
    Best-effort short git hash of the current repo state.
    Returns 'unknown' if git is not available or the call fails.
    """
    try:
        return (
            subprocess.check_output(
                ["git", "rev-parse", "--short", "HEAD"],
                stderr=subprocess.DEVNULL,
            )
            .decode()
            .strip()
        )
    except (OSError, subprocess.CalledProcessError):
        return "unknown"
