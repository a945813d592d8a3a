# src/auditor/dom/registry.py
import importlib
import logging
import pkgutil
import threading
from typing import Dict, List, Set

from .core import FINDING_KEYS, CheckDefinition, CheckFunc

logger = logging.getLogger(__name__)


def _canonical_position(check: CheckFunc) -> tuple:
    key = check.finding_key
    if key in FINDING_KEYS:
        return (FINDING_KEYS.index(key), key)
    # Unknown keys go after the canonical ones, alphabetically
    return (len(FINDING_KEYS), key)


class CheckRegistry:
    """
    Central registry for diagnostic checks.

    Dynamically discovers and loads CheckDefinition modules from the
    'auditor.dom.checks' package. Checks are kept in canonical key order
    so every engine run produces its findings in the same sequence.
    """

    _checks: Dict[str, CheckFunc] = {}
    _loaded: bool = False
    _lock = threading.Lock()

    @classmethod
    def discover(cls) -> None:
        """
        Registers all check definitions found in the 'auditor.dom.checks' package.

        Every module exposing a `DEFINITION` attribute (instance of
        `CheckDefinition`) contributes its checks. A key can only be claimed
        by one check.
        """
        if cls._loaded:
            return

        with cls._lock:
            if cls._loaded:
                return

            import auditor.dom.checks as checks_pkg

            for _, name, _ in pkgutil.iter_modules(checks_pkg.__path__):
                full_name = f"auditor.dom.checks.{name}"
                module = importlib.import_module(full_name)
                defn = getattr(module, "DEFINITION", None)
                if not isinstance(defn, CheckDefinition):
                    logger.debug("Skipping %s: no CheckDefinition", full_name)
                    continue

                for check in defn.checks:
                    cls._register_check(check)
                logger.debug("Check group loaded: %s (%s)", defn.group, ", ".join(defn.keys))

            cls._loaded = True

    @classmethod
    def _register_check(cls, check: CheckFunc) -> None:
        key = check.finding_key
        if key in cls._checks:
            raise ValueError(
                f"Finding key '{key}' is claimed by both {cls._checks[key].__name__} and {check.__name__}"
            )
        cls._checks[key] = check

    @classmethod
    def get_all_checks(cls) -> List[CheckFunc]:
        """Returns every registered check in canonical key order."""
        return sorted(cls._checks.values(), key=_canonical_position)

    @classmethod
    def get_all_possible_keys(cls) -> List[str]:
        """Returns every key the registered checks may emit, in canonical order."""
        return [check.finding_key for check in cls.get_all_checks()]

    @classmethod
    def get_missing_keys(cls) -> Set[str]:
        """Canonical keys that no registered check produces."""
        return set(FINDING_KEYS) - set(cls._checks)
