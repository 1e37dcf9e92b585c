"""
Build a clean five-letter word list for the "wordlist" source / dictionary.

Features:
- Pull words from wordfreq's top-N English list (default) or a remote JSON list.
- Keep only lowercase a-z, exactly five letters.
- Stable dedupe (keeps frequency / source order by default).
- Optional alphabetical sort after dedupe.

Usage:
    python -m script.build_wordlist --out data/words_5.txt
    python -m script.build_wordlist --from remote --out data/words_5.txt --sort
"""

import argparse

from wordfreq import top_n_list

from packages.datasets.io import unique_preserve_order, write_lines
from packages.sources import DEFAULT_WORD_LIST_URL, clean_word_list, fetch_word_list


def collect_words(origin: str, n_top: int, url: str) -> list[str]:
    if origin == "remote":
        return fetch_word_list(url)
    return clean_word_list(top_n_list("en", n_top))


def main():
    ap = argparse.ArgumentParser(description="Build a five-letter word list")
    ap.add_argument("--from", dest="origin", choices=["wordfreq", "remote"], default="wordfreq")
    ap.add_argument("--n-top", type=int, default=50000, help="wordfreq: how many top words to scan")
    ap.add_argument("--url", default=DEFAULT_WORD_LIST_URL, help="remote: JSON word list URL")
    ap.add_argument("--out", default="data/words_5.txt")
    ap.add_argument("--sort", action="store_true", help="sort alphabetically after dedupe "
                                                        "(otherwise keep source order)")
    args = ap.parse_args()

    words = unique_preserve_order(collect_words(args.origin, args.n_top, args.url))
    if args.sort:
        words = sorted(words)

    path = write_lines(words, args.out)
    print(f"Wrote {len(words)} five-letter words -> {path}")


if __name__ == "__main__":
    main()
