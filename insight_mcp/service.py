"""
QueryService - the async entry point the chat UI and table browser call.

Wraps classify() + synthesize() behind an artificial delay that stands in for
network and model latency. Both operations always resolve: unmatched prompts get
the fallback answer and unknown table names get an empty list.
"""

import asyncio
import logging
import time
from typing import Awaitable, Callable, List, Optional

import numpy as np

from .classifier import classify
from .config import Settings, load_settings
from .dataset import get_table
from .i18n import normalize_language
from .models import QueryResult, Record
from .synthesizer import synthesize

logger = logging.getLogger(__name__)


class QueryService:
    """
    Simulated natural-language-to-SQL assistant over the fixture dataset.

    Stateless apart from its settings and random source: language is passed on
    every call, and concurrent queries share nothing mutable.

    Usage:
        service = QueryService()
        result = await service.execute_natural_language_query("top 5 employees by salary", "en")
        rows = await service.get_table_data("products")
    """

    def __init__(
        self,
        settings: Optional[Settings] = None,
        rng: Optional[np.random.Generator] = None,
        sleep: Callable[[float], Awaitable] = asyncio.sleep,
    ):
        """
        Args:
            settings: Delays, default language and seed; read from the environment when None
            rng: Random source for the payment-status answer; seeded from settings.seed when None
            sleep: Awaitable used for the artificial delay (tests pass a no-op)
        """
        self.settings = settings or load_settings()
        self.rng = rng if rng is not None else np.random.default_rng(self.settings.seed)
        self._sleep = sleep

    async def execute_natural_language_query(self, prompt: str, language: Optional[str] = None) -> QueryResult:
        """
        Interpret a prompt and build its QueryResult.

        Args:
            prompt: Free-text question in English or Spanish
            language: 'en' | 'es'; the configured default when None

        Returns:
            QueryResult (never raises for any prompt)
        """
        await self._sleep(self.settings.query_delay)

        started = time.perf_counter()
        lang = normalize_language(language or self.settings.language)
        classification = classify(prompt, lang)
        logger.info("Classified prompt as %s (%s, lang=%s)",
                    classification.topic.value, classification.ordering.value, lang)

        result = synthesize(classification, prompt, lang, rng=self.rng)
        logger.debug("Synthesized %d rows in %.1fms", len(result.rows),
                     (time.perf_counter() - started) * 1000)
        return result

    async def get_table_data(self, table_name: str) -> List[Record]:
        """Return every record of a table, or [] for an unknown name."""
        await self._sleep(self.settings.table_delay)
        records = get_table(table_name)
        if not records:
            logger.info("Unknown table requested: %r", table_name)
        return records


_default_service: Optional[QueryService] = None


def get_default_service() -> QueryService:
    global _default_service
    if _default_service is None:
        _default_service = QueryService()
    return _default_service


async def execute_natural_language_query(prompt: str, language: Optional[str] = None) -> QueryResult:
    return await get_default_service().execute_natural_language_query(prompt, language)


async def get_table_data(table_name: str) -> List[Record]:
    return await get_default_service().get_table_data(table_name)
