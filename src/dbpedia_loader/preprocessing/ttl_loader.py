"""
Streaming reader for compressed triple dumps.

Decompresses a ``.ttl.bz2`` dump line by line, drops ``#`` comments and
hands every parsed line to a callback.
"""
import bz2
import contextlib
import io
from pathlib import Path
from typing import BinaryIO, Callable, ContextManager, Iterator, Optional, Union

from tqdm import tqdm

from dbpedia_loader.core.logging import get_logger
from dbpedia_loader.schema import Triple
from .ttl_line import parse_line

logger = get_logger(__name__)

COMMENT_PREFIX = "#"


# ============================================================================
# LINE SOURCES
# ============================================================================

class LineSource:
    """Protocol for anything that yields decoded text lines."""

    def open(self) -> ContextManager[Iterator[str]]:
        """Open the source; the context manager yields lines without terminators."""
        raise NotImplementedError


class Bz2LineSource(LineSource):
    """
    UTF-8 lines from a bzip2 stream.

    Accepts a path or an already opened binary stream positioned at the start
    of the compressed data. Concatenated bzip2 members are read in sequence.
    Undecodable bytes become U+FFFD unless another ``errors`` handler is given.
    A stream passed in by the caller is not closed by this source.
    """

    def __init__(
        self,
        source: Union[str, Path, BinaryIO],
        encoding: str = "utf-8",
        errors: str = "replace",
    ):
        self.source = source
        self.encoding = encoding
        self.errors = errors

    @contextlib.contextmanager
    def open(self) -> Iterator[Iterator[str]]:
        with contextlib.ExitStack() as stack:
            if isinstance(self.source, (str, Path)):
                raw = stack.enter_context(open(self.source, "rb"))
            else:
                raw = self.source
            decompressed = stack.enter_context(bz2.BZ2File(raw, "rb"))
            text = stack.enter_context(
                io.TextIOWrapper(
                    decompressed, encoding=self.encoding, errors=self.errors, newline=""
                )
            )
            yield (line.rstrip("\r\n") for line in text)

    def __repr__(self) -> str:
        return f"Bz2LineSource({self.source!r})"


# ============================================================================
# LOADER
# ============================================================================

class TtlLoader:
    """Feeds every non-comment line of a :class:`LineSource` to a callback."""

    def __init__(self, source: LineSource):
        self.source = source

    def load(
        self,
        limit: Optional[int],
        on_line: Callable[[Triple], None],
        progress: bool = False,
    ) -> int:
        """
        Parse lines and invoke ``on_line`` for each of them.

        Args:
            limit: Stop after this many processed lines (``None`` reads to the end)
            on_line: Callback receiving each parsed :class:`Triple`
            progress: Display a tqdm progress bar

        Returns:
            Number of lines handed to ``on_line``

        Raises:
            MalformedLineError: a line has no subject
            OSError: reading or decompressing failed
        """
        if limit is not None and limit < 1:
            raise ValueError(f"limit must be a positive integer or None, got {limit}")

        count = 0
        with self.source.open() as lines, tqdm(
            lines, desc="Loading triples", unit=" lines", disable=not progress
        ) as bar:
            for line in bar:
                if line.startswith(COMMENT_PREFIX):
                    continue
                on_line(parse_line(line))
                count += 1
                if count == limit:
                    break

        logger.debug("ttl_load_finished", source=repr(self.source), lines=count)
        return count
