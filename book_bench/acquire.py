"""
Fetch-if-absent cache for the source books.

A non-empty file at the destination counts as already downloaded, it is never
re-validated against the remote copy.
"""

import logging
import os
import stat
from pathlib import Path

import httpx
from tqdm import tqdm

from .config import BenchConfig
from .errors import AcquisitionError

logger = logging.getLogger(__name__)

DOWNLOAD_TIMEOUT_S = 60.0
CHUNK_SIZE = 1 << 16


def is_cached(dest: Path) -> bool:
    try:
        st = dest.stat()
    except FileNotFoundError:
        return False
    return stat.S_ISREG(st.st_mode) and st.st_size > 0


def _download(client: httpx.Client, url: str, tmp: Path, progress: bool) -> int:
    n_bytes = 0
    with client.stream("GET", url, follow_redirects=True) as resp:
        resp.raise_for_status()
        total = int(resp.headers.get("Content-Length", 0)) or None
        with open(tmp, "wb") as f, tqdm(
            total=total, unit="B", unit_scale=True, desc=tmp.name, disable=not progress
        ) as bar:
            for chunk in resp.iter_bytes(CHUNK_SIZE):
                f.write(chunk)
                bar.update(len(chunk))
                n_bytes += len(chunk)
    return n_bytes


def ensure(url: str, dest, client: httpx.Client | None = None, progress: bool = True) -> Path:
    dest = Path(dest)
    try:
        cached = is_cached(dest)
    except OSError as e:
        raise AcquisitionError(url, dest, str(e)) from e
    if cached:
        logger.debug("Cache hit, skip download: %s", dest)
        return dest

    logger.info("Downloading: %s", url)
    own_client = client is None
    if own_client:
        client = httpx.Client(timeout=DOWNLOAD_TIMEOUT_S)
    tmp = dest.with_name(dest.name + ".part")
    try:
        n_bytes = _download(client, url, tmp, progress)
        if n_bytes == 0:
            raise AcquisitionError(url, dest, "empty response body")
        os.replace(tmp, dest)
    except httpx.HTTPError as e:
        raise AcquisitionError(url, dest, str(e)) from e
    except OSError as e:
        raise AcquisitionError(url, dest, str(e)) from e
    finally:
        tmp.unlink(missing_ok=True)
        if own_client:
            client.close()

    logger.info("Saved: %s (%d bytes)", dest.resolve(), n_bytes)
    return dest


def ensure_all(config: BenchConfig, client: httpx.Client | None = None, progress: bool = True) -> list[Path]:
    return [ensure(book.url, book.cache_path, client=client, progress=progress) for book in config.books]
