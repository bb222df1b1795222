from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path


### COMMENTS
# ==========================================================
# Ustawienia jednego procesu CLI (config.py).
# ==========================================================
# - Wartości przychodzą z opcji Typer (`--file`, `--verbose`).
# - Opcje mają `envvar=`, więc fallback na zmienne DUKE_* robi Typer;
#   tutaj nie parsujemy środowiska ręcznie.
# - Rodzaj storage wynika z rozszerzenia pliku.

ENV_PREFIX = "DUKE"

SQL_SUFFIXES = {".db", ".sqlite", ".sqlite3"}


def env_name(suffix: str) -> str:
    """Buduje nazwę zmiennej środowiskowej z prefiksem projektu, np. DUKE_FILE."""
    return f"{ENV_PREFIX}_{suffix}"


@dataclass(frozen=True)
class Settings:
    """Ustawienia sesji; niemutowalne, tworzone raz w callbacku CLI."""
    file: Path | None = None
    verbose: bool = False

    @property
    def storage_kind(self) -> str:
        """'memory', 'sql' albo 'jsonl': na podstawie ścieżki pliku."""
        if self.file is None:
            return "memory"
        if self.file.suffix.lower() in SQL_SUFFIXES:
            return "sql"
        return "jsonl"
