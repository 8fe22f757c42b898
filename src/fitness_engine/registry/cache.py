"""
Time-bounded cache in front of the exercise store.

The store is an external collaborator; this module only decides when to
ask it again. A ``RegistryCache`` is built once at process start and passed
to whoever needs a registry. Exercise records and aliases are refreshed on
separate lifetimes (aliases change far less often). A failing or empty
store never reaches callers: they keep the last good registry, or the
built-in fallback registry when nothing has loaded yet.
"""

import logging
import time
from typing import Callable, List, Optional, Sequence

from ..exceptions import RegistryConflictError
from ..models.exercises import AliasRecord, ExerciseRecord
from .registry import (
    ExerciseRegistry,
    build_fallback_aliases,
    build_fallback_registry,
)

logger = logging.getLogger(__name__)

ExerciseLoader = Callable[[], Sequence[ExerciseRecord]]
AliasLoader = Callable[[], Sequence[AliasRecord]]
Clock = Callable[[], float]


class RegistryCache:
    """Caches store records and hands out an up-to-date ``ExerciseRegistry``."""

    def __init__(
        self,
        exercise_loader: ExerciseLoader,
        alias_loader: Optional[AliasLoader] = None,
        exercise_ttl_seconds: float = 3600,
        alias_ttl_seconds: float = 86400,
        clock: Clock = time.monotonic,
        strict: bool = False,
    ) -> None:
        """Initialize the cache.

        Args:
            exercise_loader: Returns all active exercise records from the store
            alias_loader: Returns all alias records; None uses the built-in aliases
            exercise_ttl_seconds: Lifetime of loaded exercise records
            alias_ttl_seconds: Lifetime of loaded aliases
            clock: Monotonic time source in seconds (injectable for tests)
            strict: Fail a reload on name conflicts instead of skipping records
        """
        self._exercise_loader = exercise_loader
        self._alias_loader = alias_loader
        self.exercise_ttl_seconds = exercise_ttl_seconds
        self.alias_ttl_seconds = alias_ttl_seconds
        self._clock = clock
        self._strict = strict

        self._exercises: Optional[List[ExerciseRecord]] = None
        self._exercises_loaded_at: Optional[float] = None
        self._aliases: Optional[List[AliasRecord]] = None
        self._aliases_loaded_at: Optional[float] = None
        self._registry: Optional[ExerciseRegistry] = None
        self._using_fallback = False

    @classmethod
    def from_settings(
        cls,
        exercise_loader: ExerciseLoader,
        alias_loader: Optional[AliasLoader] = None,
        clock: Clock = time.monotonic,
    ) -> "RegistryCache":
        """Build a cache using the TTLs and strictness from ``Settings``."""
        from ..config import get_settings

        settings = get_settings()
        return cls(
            exercise_loader,
            alias_loader,
            exercise_ttl_seconds=settings.exercise_cache_ttl_seconds,
            alias_ttl_seconds=settings.alias_cache_ttl_seconds,
            clock=clock,
            strict=settings.strict_registry,
        )

    @property
    def using_fallback(self) -> bool:
        """True when the current registry is the built-in fallback."""
        return self._using_fallback

    def get_registry(self) -> ExerciseRegistry:
        """Return the current registry, refreshing expired data first."""
        now = self._clock()
        changed = False

        if self._is_stale(self._exercises_loaded_at, self.exercise_ttl_seconds, now):
            changed |= self._refresh_exercises(now)
        if self._is_stale(self._aliases_loaded_at, self.alias_ttl_seconds, now):
            changed |= self._refresh_aliases(now)

        if changed or self._registry is None:
            self._registry = self._build()
        return self._registry

    def invalidate(self) -> None:
        """Force the next ``get_registry`` call to reload everything."""
        self._exercises_loaded_at = None
        self._aliases_loaded_at = None

    def age_seconds(self) -> Optional[float]:
        """Seconds since exercise records were last loaded, or None if never."""
        if self._exercises_loaded_at is None:
            return None
        return self._clock() - self._exercises_loaded_at

    @staticmethod
    def _is_stale(loaded_at: Optional[float], ttl: float, now: float) -> bool:
        return loaded_at is None or now - loaded_at >= ttl

    def _refresh_exercises(self, now: float) -> bool:
        try:
            records = list(self._exercise_loader())
        except Exception as exc:
            # Keep serving stale data; retry on the next call
            logger.warning("Failed to load exercises from store: %s", exc)
            return False

        self._exercises_loaded_at = now
        if not records:
            logger.warning("Exercise store returned no active exercises")
            records_changed = self._exercises is not None
            self._exercises = None
            return records_changed

        logger.info("Loaded %d exercises from store", len(records))
        self._exercises = records
        return True

    def _refresh_aliases(self, now: float) -> bool:
        if self._alias_loader is None:
            self._aliases_loaded_at = now
            return False
        try:
            aliases = list(self._alias_loader())
        except Exception as exc:
            logger.warning("Failed to load exercise aliases from store: %s", exc)
            return False

        self._aliases_loaded_at = now
        logger.debug("Loaded %d exercise aliases from store", len(aliases))
        self._aliases = aliases or None
        return True

    def _build(self) -> ExerciseRegistry:
        if self._exercises is None:
            if self._registry is not None and not self._using_fallback:
                # Store went empty after a good load; keep the last good data
                return self._registry
            logger.warning("Using built-in fallback exercise registry")
            self._using_fallback = True
            return build_fallback_registry()

        aliases = self._aliases if self._aliases is not None else build_fallback_aliases()
        try:
            registry = ExerciseRegistry.from_records(
                self._exercises, aliases, strict=self._strict
            )
        except RegistryConflictError as exc:
            logger.error("Rejected exercise store data: %s", exc.message)
            if self._registry is not None:
                return self._registry
            self._using_fallback = True
            return build_fallback_registry()

        self._using_fallback = False
        return registry
