"""Tokens shared by the chain and DSL parsers."""

import re
from typing import Iterator, List, Optional, Tuple

# One or more dashes followed by '>', or a unicode arrow
ARROW_RE = re.compile(r"-+>|→")

# "|label| target" -- the label belongs to the edge pointing into target
HOP_LABEL_RE = re.compile(r"^\|([^|]*)\|\s*(.*)$", re.DOTALL)

LEADING_ARROW_RE = re.compile(r"^(?:-+>|→)")
TRAILING_ARROW_RE = re.compile(r"(?:-+>|→)$")


def has_arrow(line: str) -> bool:
    return ARROW_RE.search(line) is not None


def split_arrows(line: str) -> list:
    return ARROW_RE.split(line)


def split_hop(hop: str) -> Tuple[str, str, Optional[str]]:
    """
    Split one hop into (edge_label, target, problem).

    ``problem`` is None for a well-formed hop. A hop that opens with a pipe
    but is not ``|label|target`` is read as a bare target.
    """
    hop = hop.strip()
    match = HOP_LABEL_RE.match(hop)
    if match:
        return match.group(1).strip(), match.group(2).strip(), None
    if hop.startswith("|"):
        return "", hop.strip("|").strip(), f"malformed edge label in hop {hop!r}"
    return "", hop, None


def join_wrapped_lines(text: str) -> Iterator[Tuple[int, str]]:
    """
    Yield (line_no, line) for the non-blank lines of ``text``, gluing a line
    that ends with an arrow to the next one, and a line that starts with an
    arrow to the previous one.

        A -> B ->          A -> B -> C
        C          ==>

    ``line_no`` is the number of the first physical line in the group.
    """
    pending: List[str] = []
    start = 0
    for line_no, raw_line in enumerate(text.splitlines(), start=1):
        line = raw_line.strip()
        if not line:
            continue
        if pending and not (TRAILING_ARROW_RE.search(pending[-1]) or LEADING_ARROW_RE.match(line)):
            yield start, " ".join(pending)
            pending = []
        if not pending:
            start = line_no
        pending.append(line)
    if pending:
        yield start, " ".join(pending)


def normalize_edge_label(text: str) -> str:
    """
    Flatten an edge label so it survives inside ``|...|`` on a single line.

    Line breaks become spaces, pipes become ``/`` and arrows become ``=>``.
    """
    text = " ".join(part.strip() for part in (text or "").splitlines() if part.strip())
    text = text.replace("|", "/")
    return ARROW_RE.sub("=>", text).strip()
