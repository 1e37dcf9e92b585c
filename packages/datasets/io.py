from __future__ import annotations
from pathlib import Path
from typing import Callable, Iterable, List, Optional


def read_lines(p: Path | str) -> List[str]:
    """
    Read a UTF-8 text file into a list of lines, stripping trailing CR/LF.
    Raises FileNotFoundError if the path doesn't exist.
    """
    p = Path(p)
    if not p.exists():
        raise FileNotFoundError(p)
    return [ln.rstrip("\r\n") for ln in p.read_text(encoding="utf-8").splitlines()]


def write_lines(lines: Iterable[str], p: Path | str) -> str:
    """
    Write lines to a UTF-8 text file, ensuring a trailing newline.
    Returns the string path written.
    """
    p = Path(p)
    p.parent.mkdir(parents=True, exist_ok=True)
    p.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return str(p)


def unique_preserve_order(items: Iterable[str],
                          key: Optional[Callable[[str], str]] = None) -> List[str]:
    seen, out = set(), []
    for s in items:
        k = key(s) if key else s
        if k not in seen:
            seen.add(k)
            out.append(s)
    return out


def load_words(p: Path | str) -> List[str]:
    """
    Load a plain one-per-line word list, lowercased, blanks dropped,
    order preserved.
    """
    p = Path(p)
    raw = read_lines(p)
    return [w.strip().lower() for w in raw if w.strip()]
