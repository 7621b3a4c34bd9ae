"""Reading figure files that carry ``//`` and ``/* */`` comments."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import List, Optional, Union

from .ast import Figure
from .builder import FigureBuilder
from .parser import parse_figure

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


def strip_comments(text: str) -> str:
    """Remove comments outside of JSON string literals.

    Newlines inside block comments are kept so decoder error positions still
    match the file.
    """

    out: List[str] = []
    i = 0
    n = len(text)
    in_string = False
    while i < n:
        ch = text[i]
        if in_string:
            out.append(ch)
            if ch == "\\" and i + 1 < n:
                out.append(text[i + 1])
                i += 2
                continue
            if ch == '"':
                in_string = False
            i += 1
            continue
        if ch == '"':
            in_string = True
            out.append(ch)
            i += 1
        elif text.startswith("//", i):
            end = text.find("\n", i)
            i = n if end == -1 else end
        elif text.startswith("/*", i):
            end = text.find("*/", i + 2)
            stop = n if end == -1 else end + 2
            out.append("\n" * text.count("\n", i, stop))
            i = stop
        else:
            out.append(ch)
            i += 1
    return "".join(out)


def read_figure_text(path: PathLike) -> str:
    path = Path(path)
    logger.debug("Reading figure text from %s", path)
    return strip_comments(path.read_text(encoding="utf-8"))


def load_figure(path: PathLike, builder: Optional[FigureBuilder] = None) -> Optional[Figure]:
    return parse_figure(read_figure_text(path), builder)
