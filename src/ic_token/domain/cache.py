"""Token metadata cache — write-once per token, request-coalescing.

  - Hit: return stored TokenMetadata, fetch is not called
  - Miss: one shared in-flight task per token id; concurrent callers join it
  - Fetch success: stored forever (name/symbol/decimals are immutable on-chain)
  - Fetch failure: NOT stored; every caller of that attempt gets the fallback,
    the next call after it retries
  - A cancelled caller does not cancel the shared fetch; its result is
    still committed for later callers

Single event loop only: the check-then-insert below has no await between
the lookup and the insert, so no lock is needed.
"""

import asyncio
import logging
from collections.abc import Awaitable, Callable

from src.ic_common.errors import RemoteMetadataError
from src.ic_token.domain.models import UNKNOWN_TOKEN, TokenMetadata

logger = logging.getLogger(__name__)

MetadataFetch = Callable[[], Awaitable[TokenMetadata]]


class TokenMetadataCache:
    def __init__(self, fallback: TokenMetadata = UNKNOWN_TOKEN) -> None:
        self._fallback = fallback
        self._entries: dict[str, TokenMetadata] = {}
        self._inflight: dict[str, asyncio.Task[TokenMetadata]] = {}

    def __contains__(self, token_id: object) -> bool:
        return token_id in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def peek(self, token_id: str) -> TokenMetadata | None:
        """Cached value without triggering a fetch."""
        return self._entries.get(token_id)

    def is_pending(self, token_id: str) -> bool:
        return token_id in self._inflight

    async def get(self, token_id: str, fetch: MetadataFetch) -> TokenMetadata:
        cached = self._entries.get(token_id)
        if cached is not None:
            return cached

        task = self._inflight.get(token_id)
        if task is None:
            task = asyncio.ensure_future(self._load(token_id, fetch))
            self._inflight[token_id] = task
        return await asyncio.shield(task)

    async def _load(self, token_id: str, fetch: MetadataFetch) -> TokenMetadata:
        try:
            metadata = await fetch()
        except Exception as exc:
            err = RemoteMetadataError(token_id, str(exc) or type(exc).__name__)
            logger.warning("%s, using default %r", err.message, self._fallback)
            return self._fallback
        else:
            self._entries[token_id] = metadata
            logger.debug("Cached token info: %s → %s", token_id, metadata)
            return metadata
        finally:
            self._inflight.pop(token_id, None)
