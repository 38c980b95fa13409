"""Single-flight cache of parsed markdown files."""

import asyncio
import logging
from pathlib import Path

from ..config.normalize_path import normalize_path
from .MarkdownParser import MarkdownParser
from .ParsedDocument import ParsedDocument

logger = logging.getLogger(__name__)


class ParsedFileCache:
    """Memoize parsed documents by normalized absolute path.

    Concurrent misses on the same path share one parse. A failed parse is
    delivered to every waiter and the entry is dropped, so the next call retries.
    """

    def __init__(self, parser: MarkdownParser | None = None):
        self.parser = parser or MarkdownParser()
        self._entries: dict[str, ParsedDocument | asyncio.Future] = {}

    def __contains__(self, file_path: object) -> bool:
        if not isinstance(file_path, (str, Path)):
            return False
        return isinstance(self._entries.get(normalize_path(file_path)), ParsedDocument)

    def __len__(self) -> int:
        return sum(1 for entry in self._entries.values() if isinstance(entry, ParsedDocument))

    async def resolve(self, file_path: str | Path) -> ParsedDocument:
        """Return the parsed document for a file, parsing it at most once."""
        key = normalize_path(file_path)
        entry = self._entries.get(key)

        if isinstance(entry, ParsedDocument):
            logger.debug("Parse cache hit: %s", key)
            return entry
        if entry is not None:
            logger.debug("Parse in flight, waiting: %s", key)
            return await asyncio.shield(entry)

        logger.debug("Parse cache miss: %s", key)
        pending: asyncio.Future = asyncio.get_running_loop().create_future()
        self._entries[key] = pending
        try:
            output = await asyncio.to_thread(self.parser.parse, key)
        except BaseException as exc:
            self._entries.pop(key, None)
            if isinstance(exc, asyncio.CancelledError):
                pending.cancel()
            else:
                logger.debug("Parse failed for %s: %s", key, exc)
                pending.set_exception(exc)
                # mark retrieved; waiters (if any) still receive it
                pending.exception()
            raise

        document = ParsedDocument(output)
        self._entries[key] = document
        pending.set_result(document)
        return document

    def clear(self) -> None:
        """Drop settled entries. In-flight parses are left to finish."""
        self._entries = {k: v for k, v in self._entries.items() if not isinstance(v, ParsedDocument)}
