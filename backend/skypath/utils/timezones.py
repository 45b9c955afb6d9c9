"""
Utility per orari locali e fusi orari.

Gli orari del dataset sono "naive" (ora locale dell'aeroporto): prima di
qualsiasi differenza vanno agganciati al fuso IANA dell'aeroporto.
"""
from datetime import datetime, timezone
from zoneinfo import ZoneInfo


def to_zoned(local: datetime, tz_name: str) -> datetime:
    """Interpreta un orario naive come ora locale nel fuso tz_name."""
    return local.replace(tzinfo=ZoneInfo(tz_name))


def minutes_between(start: datetime, end: datetime) -> int:
    """
    Minuti tra due istanti aware (troncati verso zero, negativi se end < start).

    Il confronto avviene in UTC: sottrarre due datetime con lo stesso tzinfo
    usa l'ora da parete e ignorerebbe i cambi di ora legale.
    """
    delta = end.astimezone(timezone.utc) - start.astimezone(timezone.utc)
    return int(delta.total_seconds() / 60)
