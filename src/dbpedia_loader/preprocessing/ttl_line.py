"""
Tolerant parser for DBpedia short-abstract lines.

A line looks like::

    <http://dbpedia.org/resource/Foo> <http://www.w3.org/2000/01/rdf-schema#comment> "Foo is a bar."@en .

Only the three delimited spans are extracted: subject and predicate between
``<`` and ``>``, object between double quotes. This is not an N-Triples
parser: language tags, datatypes and escape sequences other than a
backslash directly before the closing delimiter are left untouched.
"""
from typing import Optional, Tuple

from dbpedia_loader.errors import MalformedLineError
from dbpedia_loader.schema import Triple

ESCAPE_CHAR = "\\"


def next_field(
    line: str,
    start_char: str,
    end_char: str,
    cursor: int = 0,
) -> Tuple[Optional[str], int]:
    """
    Extract the next ``start_char ... end_char`` span at or after ``cursor``.

    Returns ``(value, new_cursor)`` where ``new_cursor`` points just past the
    closing delimiter. When the span cannot be located the value is ``None``
    and the cursor is returned unchanged.

    An end delimiter immediately preceded by a backslash does not terminate
    the span. A doubled backslash is not special: ``\\\\"`` still reads as an
    escaped quote.
    """
    start = line.find(start_char, cursor)
    if start == -1:
        return None, cursor

    value_start = start + 1
    search_from = value_start
    while True:
        end = line.find(end_char, search_from)
        if end == -1:
            return None, cursor
        if line[end - 1] != ESCAPE_CHAR:
            break
        search_from = end + 1

    return line[value_start:end], end + 1


def parse_line(line: str) -> Triple:
    """
    Parse one dump line into a :class:`Triple`.

    Raises:
        MalformedLineError: if no complete ``<subject>`` span exists.
    """
    subject, cursor = next_field(line, "<", ">")
    if subject is None:
        raise MalformedLineError(line)

    predicate, cursor = next_field(line, "<", ">", cursor)
    if predicate is None:
        return Triple(subject=subject)

    obj, _ = next_field(line, '"', '"', cursor)
    return Triple(subject=subject, predicate=predicate, object=obj)
