import logging
import math
from datetime import date, datetime, timezone
from typing import Any, Optional

from dateutil import parser as date_parser

logger = logging.getLogger(__name__)

MONTHS = ("Jan", "Feb", "Mar", "Apr", "May", "Jun", "Jul", "Aug", "Sep", "Oct", "Nov", "Dec")
MS_PER_DAY = 1000 * 60 * 60 * 24
PAST_DUE = "Past due"

# Formatos probados después de ISO-8601; el resto lo intenta dateutil.
TEXT_FORMATS = ("%b %d, %Y", "%B %d, %Y", "%m/%d/%Y", "%Y/%m/%d")


def _as_utc(value: datetime) -> Optional[datetime]:
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    try:
        return value.astimezone(timezone.utc)
    except OverflowError:
        # p. ej. 0001-01-01T00:00:00+01:00 cae fuera del rango de datetime
        logger.debug("Date out of range in UTC: %r", value)
        return None


def _parse_text(text: str) -> Optional[datetime]:
    text = text.strip()
    if not text:
        return None
    try:
        return datetime.fromisoformat(text.replace("Z", "+00:00"))
    except ValueError:
        pass
    for fmt in TEXT_FORMATS:
        try:
            return datetime.strptime(text, fmt)
        except ValueError:
            continue
    try:
        # RFC-2822, salida de Date.toString() y similares
        return date_parser.parse(text)
    except (ValueError, OverflowError):
        return None


def parse_date(value: Any) -> Optional[datetime]:
    """Devuelve un datetime UTC o None si el valor falta o no es una fecha válida.

    Acepta datetime, date, texto ISO-8601 (o cualquier formato que entienda dateutil) y
    milisegundos epoch. Nunca lanza excepciones.
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, datetime):
        return _as_utc(value)
    if isinstance(value, date):
        return datetime(value.year, value.month, value.day, tzinfo=timezone.utc)
    if isinstance(value, (int, float)):
        if not math.isfinite(value):
            return None
        try:
            return datetime.fromtimestamp(value / 1000, tz=timezone.utc)
        except (OverflowError, OSError, ValueError):
            logger.debug("Timestamp out of range: %r", value)
            return None
    if isinstance(value, str):
        parsed = _parse_text(value)
        if parsed is None:
            logger.debug("Unparseable date: %r", value)
            return None
        return _as_utc(parsed)
    logger.debug("Unsupported date value of type %s", type(value).__name__)
    return None


def format_date(value: Any) -> str:
    """Formatea como 'Jun 25, 2025'; cadena vacía si falta o no es una fecha."""
    parsed = parse_date(value)
    if parsed is None:
        return ""
    return f"{MONTHS[parsed.month - 1]} {parsed.day}, {parsed.year}"


# Los hitos solo tienen createdAt; se muestra como fecha de completado.
format_short_date = format_date


def day_difference(deadline: datetime, now: datetime) -> int:
    millis = (deadline - now).total_seconds() * 1000
    return math.ceil(millis / MS_PER_DAY)


def days_left(deadline: Any, now: Optional[datetime] = None) -> str:
    parsed = parse_date(deadline)
    if parsed is None:
        return ""
    current = _as_utc(now) if now is not None else datetime.now(timezone.utc)
    if current is None:
        return ""
    diff = day_difference(parsed, current)
    return f"{diff} days" if diff >= 0 else PAST_DUE
