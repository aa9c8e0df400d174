"""
Short-abstract indexing pipeline.

Flow: dump line → Triple → DocumentUpdate → batch buffer → update API

The dump is read strictly in order; documents are sent in batches of
``buffer_size`` and one final partial batch once the dump is exhausted.
"""

import threading
from typing import List, Optional, Sequence

from pydantic import BaseModel

from dbpedia_loader.preprocessing import LineSource, TtlLoader
from dbpedia_loader.schema import DocumentUpdate, LanguageEnum, Triple
from dbpedia_loader.core.logging import get_logger

logger = get_logger(__name__)

DBPEDIA_RESOURCE_PREFIX = "http://dbpedia.org/resource/"
TITLE_SUFFIX = " - Wikipedia"
CONTENT_BASE_TYPE = "text/html"


# ============================================================================
# RESULT MODELS
# ============================================================================

class LoadResult(BaseModel):
    """Result from loading an entire dump."""
    lines_processed: int
    documents_indexed: int
    batches_flushed: int


# ============================================================================
# COMPONENT PROTOCOLS (Abstract Interfaces)
# ============================================================================

class DocumentSink:
    """Protocol for the search service update API."""

    def update_documents(self, index_name: str, documents: Sequence[DocumentUpdate]):
        """Send one batch of documents to ``index_name``."""
        raise NotImplementedError


# ============================================================================
# DOCUMENT BUILDER
# ============================================================================

def wikipedia_url_prefix(language: LanguageEnum) -> str:
    return f"https://{language.code}.wikipedia.org/wiki/"


def build_document(triple: Triple, language: LanguageEnum) -> Optional[DocumentUpdate]:
    """
    Map a short-abstract triple to a Wikipedia-like search document.

    Returns None when the triple carries no abstract or its subject has no
    path segment.
    """
    if not triple.object:
        return None
    parts = [part for part in triple.subject.split("/") if part]
    if not parts:
        return None

    url_prefix = wikipedia_url_prefix(language)
    url = triple.subject.replace(DBPEDIA_RESOURCE_PREFIX, url_prefix).replace(
        f"http://{language.code}.dbpedia.org/resource/", url_prefix
    )
    title = parts[-1].replace("_", " ") + TITLE_SUFFIX

    return (
        DocumentUpdate(lang=language)
        .add_field("url", url)
        .add_field("title", title)
        .add_field("content", triple.object)
        .add_field("contentBaseType", CONTENT_BASE_TYPE)
        .add_field("host", f"{language.code}.wikipedia.org")
        .add_field("lang", language.code)
    )


# ============================================================================
# BATCH FLUSHER
# ============================================================================

class BatchFlusher:
    """
    Buffers documents and sends them to a :class:`DocumentSink` in batches.

    ``accept`` and ``flush`` share one lock: the append, the size check and
    the hand-off to the sink form a single critical section.
    """

    def __init__(self, sink: DocumentSink, index_name: str, buffer_size: int):
        if buffer_size < 1:
            raise ValueError(f"buffer_size must be at least 1, got {buffer_size}")
        self.sink = sink
        self.index_name = index_name
        self.buffer_size = buffer_size
        self._buffer: List[DocumentUpdate] = []
        self._lock = threading.RLock()
        self.batches_flushed = 0
        self.documents_flushed = 0

    @property
    def pending(self) -> int:
        with self._lock:
            return len(self._buffer)

    def accept(self, document: DocumentUpdate) -> None:
        with self._lock:
            self._buffer.append(document)
            if len(self._buffer) >= self.buffer_size:
                self.flush()

    def flush(self) -> None:
        """Send the buffered documents, if any, then empty the buffer.

        If the sink raises, the error propagates and the buffer is kept.
        """
        with self._lock:
            if not self._buffer:
                return
            self.sink.update_documents(self.index_name, self._buffer)
            count = len(self._buffer)
            self._buffer = []
            self.batches_flushed += 1
            self.documents_flushed += count
            logger.info("batch_flushed", index=self.index_name, documents=count)


# ============================================================================
# MAIN LOADING PIPELINE
# ============================================================================

class ShortAbstractLoader:
    """
    Loads a short-abstract dump into a search index.

    Flow:
    1. Stream and parse the dump (comments skipped)
    2. Build one document per triple carrying an abstract
    3. Buffer and flush in batches
    4. Flush the trailing partial batch
    """

    def __init__(
        self,
        source: LineSource,
        sink: DocumentSink,
        index_name: str,
        buffer_size: int,
        language: LanguageEnum = LanguageEnum.ENGLISH,
    ):
        self.loader = TtlLoader(source)
        self.flusher = BatchFlusher(sink, index_name, buffer_size)
        self.language = language

        logger.info(
            "short_abstract_loader_initialized",
            source=repr(source),
            index=index_name,
            buffer_size=buffer_size,
            language=language.code,
        )

    def accept(self, triple: Triple) -> None:
        document = build_document(triple, self.language)
        if document is not None:
            self.flusher.accept(document)

    def run(self, limit: Optional[int] = None, progress: bool = False) -> LoadResult:
        """Load the dump; an error aborts the run without the final flush."""
        lines = self.loader.load(limit, self.accept, progress=progress)
        self.flusher.flush()

        result = LoadResult(
            lines_processed=lines,
            documents_indexed=self.flusher.documents_flushed,
            batches_flushed=self.flusher.batches_flushed,
        )
        logger.info("short_abstract_load_complete", **result.model_dump())
        return result
