from pathlib import Path
from typing import Optional, Union

import requests
from tqdm import tqdm

from dbpedia_loader.core.logging import get_logger

logger = get_logger(__name__)

CHUNK_SIZE = 1024 * 1024


def ensure_dump_file(
    url: str,
    path: Union[str, Path],
    session: Optional[requests.Session] = None,
    timeout: float = 60,
    progress: bool = False,
) -> Path:
    """
    Download ``url`` to ``path`` unless the file already exists.

    The body is streamed to ``<path>.part`` and renamed once complete, so an
    interrupted download is never mistaken for a finished dump.
    """
    path = Path(path)
    if path.exists():
        logger.debug("dump_file_present", path=str(path))
        return path

    path.parent.mkdir(parents=True, exist_ok=True)
    partial = path.with_name(path.name + ".part")
    http = session or requests.Session()

    logger.info("dump_download_started", url=url, path=str(path))
    try:
        with http.get(url, stream=True, timeout=timeout) as response:
            response.raise_for_status()
            total = int(response.headers.get("content-length", 0)) or None
            with open(partial, "wb") as f, tqdm(
                total=total, unit="B", unit_scale=True, desc=path.name, disable=not progress
            ) as bar:
                for chunk in response.iter_content(chunk_size=CHUNK_SIZE):
                    if chunk:
                        f.write(chunk)
                        bar.update(len(chunk))
        partial.replace(path)
    finally:
        if session is None:
            http.close()
        if partial.exists():
            partial.unlink()

    logger.info("dump_download_complete", path=str(path), size_bytes=path.stat().st_size)
    return path
