# notation.py
# Letter/number board coordinates ("A19" is the top-left point of a 19x19 board).
from typing import List

from godojo.goban_model import Point

MAX_LABELLED_SIZE = 25


# Utility: column labels A.. (skip I)
def column_labels(n: int) -> List[str]:
    if n > MAX_LABELLED_SIZE:
        raise ValueError(f"Column labels only go up to size {MAX_LABELLED_SIZE}")
    labels = []
    ch = ord('A')
    while len(labels) < n:
        c = chr(ch)
        ch += 1
        if c == 'I':
            continue
        labels.append(c)
    return labels


def row_labels(size: int) -> List[str]:
    return [str(size - i) for i in range(size)]


def point_to_label(point, size: int) -> str:
    r, c = point
    if not (0 <= r < size and 0 <= c < size):
        raise ValueError(f"Point {(r, c)} is off a {size}x{size} board")
    return f"{column_labels(size)[c]}{size - r}"


def label_to_point(label: str, size: int) -> Point:
    text = label.strip().upper()
    if len(text) < 2 or not text[1:].isdigit():
        raise ValueError(f"Malformed coordinate {label!r}")
    columns = column_labels(size)
    if text[0] not in columns:
        raise ValueError(f"Column {text[0]!r} is not on a {size}x{size} board")
    number = int(text[1:])
    if not 1 <= number <= size:
        raise ValueError(f"Row {number} is not on a {size}x{size} board")
    return Point(size - number, columns.index(text[0]))
