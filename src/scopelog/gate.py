"""
Category gate.

Per-category on/off flags plus the TIME flag. Decision for a category:
1. ERROR / FATAL_ERROR → always pass
2. otherwise → the category's flag

A closed gate means no work at all: the caller checks allows() before
rendering anything.
"""

from scopelog.records import DEFAULT_OPTIONS, Category, Option


class CategoryGate:
    """Mutable flag map over Option."""

    def __init__(self, options: dict[Option, bool] | None = None):
        self._flags: dict[Option, bool] = dict(DEFAULT_OPTIONS)
        for option, value in (options or {}).items():
            self.set_option(option, value)

    def enable(self, option: Option | Category | str) -> None:
        self._flags[_resolve_option(option)] = True

    def disable(self, option: Option | Category | str) -> None:
        self._flags[_resolve_option(option)] = False

    def set_option(self, option: Option | Category | str, value: bool) -> None:
        self._flags[_resolve_option(option)] = bool(value)

    def is_enabled(self, option: Option | Category | str) -> bool:
        return self._flags[_resolve_option(option)]

    def allows(self, category: Category) -> bool:
        """True if an entry of this category should be produced."""
        option = category.option
        if option is None:
            return True
        return self._flags[option]

    @property
    def log_time(self) -> bool:
        return self._flags[Option.TIME]

    @property
    def options(self) -> dict[Option, bool]:
        """Current flags (read-only copy)."""
        return dict(self._flags)

    def describe(self) -> dict:
        """Flag state keyed by option name, for Logger.status()."""
        return {option.value: value for option, value in self._flags.items()}


def _resolve_option(value: Option | Category | str) -> Option:
    """Convert option name, Category or Option to Option."""
    if isinstance(value, Option):
        return value
    if isinstance(value, Category):
        option = value.option
        if option is None:
            raise ValueError(f"Category '{value.value}' is never gated")
        return option
    if isinstance(value, str):
        return Option.from_name(value)
    raise TypeError(f"Expected Option, Category or str, got {type(value).__name__}")
