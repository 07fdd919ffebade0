"""User-facing message tables.

Every message shown to a client is looked up here by key, so the wording (and
the language) can change without touching control flow.
"""

from __future__ import annotations

from typing import Final, Mapping

MESSAGES_PL: Final[Mapping[str, str]] = {
    "invalid_date": "Niepoprawna data!",
    "invalid_parameter": "Niepoprawny parametr!",
    "no_substitutions_weekend.saturday": "Jest jutro sobota, więc nie ma zastępstw!",
    "no_substitutions_weekend.sunday": "Jest jutro niedziela, więc nie ma zastępstw!",
    "no_lessons_weekend.saturday": "Jest dziś sobota, nie ma dziś żadnych lekcji!",
    "no_lessons_weekend.sunday": "Jest dziś niedziela, nie ma dziś żadnych lekcji!",
    "no_substitutions_for_date": "Nie ma obecnie zastępstw na dzień {date}",
    "unknown_upstream_status": "Serwer zwrócił nieznany status {status_code}! Spróbuj ponownie później",
    "upstream_unreachable": "Szkoła jest offline! Spróbuj ponownie później.",
    "cache_io": "Error #{code}, zgłoś ten problem do twórcy!",
    "file_not_found": "Nie ma takiego pliku!",
    "status": "Strona jest online!",
    "not_found": "Nie ma takiej strony! Jeśli uważasz że to błąd, napisz do twórcy.",
}

MESSAGES_EN: Final[Mapping[str, str]] = {
    "invalid_date": "Invalid date!",
    "invalid_parameter": "Invalid parameter!",
    "no_substitutions_weekend.saturday": "Tomorrow is Saturday, so there are no substitutions!",
    "no_substitutions_weekend.sunday": "Tomorrow is Sunday, so there are no substitutions!",
    "no_lessons_weekend.saturday": "Today is Saturday, there are no lessons today!",
    "no_lessons_weekend.sunday": "Today is Sunday, there are no lessons today!",
    "no_substitutions_for_date": "There are currently no substitutions for {date}",
    "unknown_upstream_status": "The server returned an unknown status {status_code}! Try again later",
    "upstream_unreachable": "The school server is offline! Try again later.",
    "cache_io": "Error #{code}, please report this problem to the author!",
    "file_not_found": "No such file!",
    "status": "The service is online!",
    "not_found": "No such page! If you think this is a mistake, contact the author.",
}

MESSAGE_TABLES: Final[Mapping[str, Mapping[str, str]]] = {
    "pl": MESSAGES_PL,
    "en": MESSAGES_EN,
}


def get_messages(language: str) -> Mapping[str, str]:
    """Return the message table for ``language``, falling back to Polish."""
    return MESSAGE_TABLES.get(language.lower(), MESSAGES_PL)


def render_message(messages: Mapping[str, str], key: str, **params: object) -> str:
    """Format the message stored under ``key`` with ``params``."""
    return messages[key].format(**params)
