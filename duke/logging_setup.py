from __future__ import annotations

import logging
import sys


### COMMENTS
# ==========================================================
# Konfiguracja logowania (logging_setup.py).
# ==========================================================
# - Jeden handler na stderr, podpięty do root loggera.
# - Domyślnie WARNING, z `--verbose` DEBUG.
# - Moduły logują przez `logging.getLogger(__name__)`.


class _AppOnlyFilter(logging.Filter):
    """
    Filtr konsoli:
    - logi duke.* przechodzą na skonfigurowanym poziomie
    - biblioteki zewnętrzne (sqlalchemy, py.warnings) tylko od ERROR
    """

    def filter(self, record: logging.LogRecord) -> bool:
        if record.name.startswith("duke."):
            return True
        return record.levelno >= logging.ERROR


def setup_logging(*, verbose: bool = False) -> None:
    """
    Konfiguruje root logger: jeden handler na stderr.

    Wywołać raz, przed pierwszą komendą (robi to callback CLI).
    """
    level = logging.DEBUG if verbose else logging.WARNING

    root = logging.getLogger()
    root.setLevel(level)

    # usuń istniejące handlery, żeby nie dublować wpisów
    for h in list(root.handlers):
        root.removeHandler(h)

    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(level)
    handler.setFormatter(
        logging.Formatter(
            fmt="%(asctime)s %(levelname)s %(name)s: %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
    )
    handler.addFilter(_AppOnlyFilter())
    root.addHandler(handler)

    logging.captureWarnings(True)
