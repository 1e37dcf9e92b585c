# apps/cli/solve.py
"""
CLI entry point for wordfinder.

This script:
  1) Builds WordConstraints from flags (--accepted/--denied/--known/--rejected)
     and/or guess feedback (--history crane:-Y--G, repeatable).
  2) Picks a word source (enumerate, wordlist, remote, wordfreq) and, for
     enumeration, a dictionary oracle.
  3) Streams candidates through the matcher with a live progress indicator,
     prints the matches, and optionally writes:
       - CSV:  rank, word
       - JSON: manifest with config, constraints, word-list hash, git commit

Examples:
    python -m apps.cli.solve --history crane:-Y--G --history pilot:--Y-G
    python -m apps.cli.solve --source wordlist --words data/words_5.txt --denied rnes
"""

from __future__ import annotations

import argparse
import json
import sys
import time
from pathlib import Path
from typing import Iterator, Optional

from tqdm import tqdm

from packages.datasets import validate_wordlist, pretty_summary
from packages.dictionary import DictionaryUnavailableError, get_dictionary
from packages.engine import WordConstraints, constraints_from_history, parse_history_arg
from packages.engine.normalize import parse_constraints_from_query
from packages.solve import solve, write_manifest, write_words_csv
from packages.solve.io import git_commit_or_unknown, timestamp_id
from packages.sources import (
    BaseWordSource,
    DEFAULT_WORD_LIST_URL,
    WordListUnavailableError,
    create_source,
    get_source_ids,
)

EXIT_UNAVAILABLE = 2


def _char_list(raw: Optional[str]) -> str:
    """
    Accept either 'a,b,c' or 'abc' and return the comma form the query
    parser expects.
    """
    if not raw:
        return ""
    if "," in raw:
        return raw
    return ",".join(raw.strip())


def _merge(a: WordConstraints, b: WordConstraints) -> WordConstraints:
    """Union of two constraint sets (b wins on conflicting known positions)."""
    rejected = {p: list(cs) for p, cs in a.rejected_positions.items()}
    for p, cs in b.rejected_positions.items():
        rejected.setdefault(p, []).extend(cs)
    return WordConstraints(
        accepted_chars=a.accepted_chars + b.accepted_chars,
        denied_chars=a.denied_chars + b.denied_chars,
        known_positions={**a.known_positions, **b.known_positions},
        rejected_positions=rejected,
    )


def build_constraints(args: argparse.Namespace) -> WordConstraints:
    flags = parse_constraints_from_query({
        "acceptedChars": _char_list(args.accepted),
        "deniedChars": _char_list(args.denied),
        "knownPositions": args.known or "",
        "rejectedPositions": args.rejected or "",
    })
    if not args.history:
        return flags
    history = constraints_from_history(parse_history_arg(h) for h in args.history)
    return _merge(history, flags)


def build_source(args: argparse.Namespace):
    if args.source == "wordlist":
        if not args.words:
            raise SystemExit("--source wordlist requires --words PATH")
        return create_source("wordlist", path=args.words)
    if args.source == "remote":
        return create_source("remote", url=args.url)
    return create_source(args.source)


def main(argv=None):
    """
    Parse CLI args, run the solve with progress, print and write outputs.
    """
    source_choices = get_source_ids()

    ap = argparse.ArgumentParser(description="wordfinder: list words consistent with Wordle feedback")
    ap.add_argument("--accepted", help="letters known to be in the word ('abc' or 'a,b,c')")
    ap.add_argument("--denied", help="letters known NOT to be in the word")
    ap.add_argument("--known", help='JSON map of position -> letter, e.g. \'{"1": "c"}\'')
    ap.add_argument("--rejected", help='JSON map of position -> letters, e.g. \'{"3": ["a"]}\'')
    ap.add_argument("--history", action="append", default=[],
                    help="GUESS:PATTERN feedback row, pattern of G/Y/- (repeatable)")
    ap.add_argument("--source", choices=source_choices, default="enumerate",
                    help=f"word source (one of: {', '.join(source_choices)})")
    ap.add_argument("--words", help="word-list path for --source wordlist")
    ap.add_argument("--url", default=DEFAULT_WORD_LIST_URL, help="JSON word list for --source remote")
    ap.add_argument("--dictionary",
                    help="dictionary word list, or hunspell .dic/.aff pair (default: wordfreq frequencies)")
    ap.add_argument("--no-dictionary", action="store_true",
                    help="skip dictionary validation (enumeration then returns every pattern match)")
    ap.add_argument("--limit", type=int, help="stop after this many matches")
    ap.add_argument("--outdir", help="write CSV + JSON manifest to this directory")
    ap.add_argument("--json", action="store_true", help="print the result as JSON")
    ap.add_argument(
        "--progress",
        choices=["auto", "bar", "plain", "off"],
        default="auto",
        help="Show candidate progress (auto=bar on a terminal, else off)."
    )
    args = ap.parse_args(argv)
    if args.limit is not None and args.limit < 0:
        ap.error("--limit must be >= 0")

    try:
        constraints = build_constraints(args)
    except ValueError as e:
        ap.error(str(e))

    source = build_source(args)

    report = None
    if args.words:
        report = validate_wordlist(args.words)
        print(pretty_summary(report), file=sys.stderr)

    mode = args.progress
    if mode == "auto":
        mode = "bar" if sys.stderr.isatty() else "off"

    # Enumerated strings need an oracle; pre-validated lists don't
    try:
        dictionary = None
        if not args.no_dictionary and not source.prevalidated:
            dictionary = get_dictionary(args.dictionary)

        start = time.time()
        result = solve(constraints, ProgressSource(source, mode), dictionary, limit=args.limit)
        elapsed_ms = (time.time() - start) * 1000.0
    except (DictionaryUnavailableError, WordListUnavailableError) as e:
        print(f"error: {e}", file=sys.stderr)
        return EXIT_UNAVAILABLE

    if args.json:
        print(json.dumps(result.to_dict(), indent=2))
    else:
        for w in result.words:
            print(w)
        print(f"{result.count} word(s) in {elapsed_ms:.0f} ms", file=sys.stderr)

    if args.outdir:
        run_id = timestamp_id()
        outdir = Path(args.outdir)
        csv_path = write_words_csv(result.words, str(outdir / f"solve_{run_id}.csv"))
        manifest_path = write_manifest({
            "run_id": run_id,
            "git_commit": git_commit_or_unknown(),
            "config": vars(args),
            "source_id": source.id,
            "constraints": constraints.to_dict(),
            "wordlist": report,
            "count": result.count,
            "time_ms": round(elapsed_ms, 3),
        }, str(outdir / f"solve_{run_id}_manifest.json"))
        print(f"Wrote: {csv_path}", file=sys.stderr)
        print(f"Wrote: {manifest_path}", file=sys.stderr)

    return 0


class ProgressSource(BaseWordSource):
    """
    Wraps another word source and reports candidate progress on stderr
    (mode: "bar" = tqdm, "plain" = one status line per second, "off").
    """

    def __init__(self, inner: BaseWordSource, mode: str = "off"):
        self.inner = inner
        self.mode = mode
        self.id = inner.id
        self.name = inner.name
        self.prevalidated = inner.prevalidated

    def estimate(self, constraints: WordConstraints) -> Optional[int]:
        return self.inner.estimate(constraints)

    def candidates(self, constraints: WordConstraints) -> Iterator[str]:
        it = self.inner.candidates(constraints)
        if self.mode == "bar":
            bar = tqdm(it, total=self.estimate(constraints), ncols=80, desc="Candidates",
                       unit="w", unit_scale=True, mininterval=0.5)
            try:
                yield from bar
            finally:
                bar.close()
        elif self.mode == "plain":
            yield from _plain_progress(it, self.estimate(constraints))
        else:
            yield from it


def _plain_progress(candidates, total):
    """Pass candidates through, printing a one-line status to stderr every second."""
    start = time.time()
    last_print = 0.0
    idx = 0
    for idx, w in enumerate(candidates, 1):
        now = time.time()
        if now - last_print >= 1.0:
            elapsed = now - start
            rate = (idx / elapsed) if elapsed > 0 else 0.0
            if total:
                remaining = (total - idx) / rate if rate > 0 else 0.0
                pct = 100.0 * idx / max(1, total)
                sys.stderr.write(
                    f"\r[{idx}/{total}] {pct:5.1f}% | elapsed {elapsed:6.1f}s | ETA {remaining:5.1f}s"
                )
            else:
                sys.stderr.write(f"\r[{idx}] elapsed {elapsed:6.1f}s")
            sys.stderr.flush()
            last_print = now
        yield w
    sys.stderr.write(f"\r[{idx}] done{' ' * 40}\n")
    sys.stderr.flush()


if __name__ == "__main__":
    sys.exit(main())
