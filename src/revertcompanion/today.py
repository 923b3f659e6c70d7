"""CLI entry point for today's prayer times and Qibla direction.

Run:
    uv run revert-today --address "Central Park, New York"
"""

import argparse
import logging
from datetime import date, datetime, timedelta, timezone

from dotenv import load_dotenv

from revertcompanion.config import LANGUAGES, load_preferences
from revertcompanion.conventions import CalculationConvention, Madhab
from revertcompanion.i18n import t
from revertcompanion.locate import resolve_location, zone_offset_hours
from revertcompanion.prayer import calculate_prayer_times, next_prayer, reminder_times
from revertcompanion.qibla import distance_to_kaaba, qibla_bearing


def _parse_args(argv: list[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="revert-today", description="Print prayer times and Qibla direction."
    )
    parser.add_argument("--address", help="Address to geocode (default: stored location)")
    parser.add_argument(
        "--date",
        type=date.fromisoformat,
        default=None,
        help="Calendar date, YYYY-MM-DD (default: today)",
    )
    parser.add_argument(
        "--method", choices=[c.value for c in CalculationConvention], default=None
    )
    parser.add_argument("--madhab", choices=[m.value for m in Madhab], default=None)
    parser.add_argument("--lang", choices=LANGUAGES, default=None)
    parser.add_argument(
        "--zone-time",
        action="store_true",
        help="Use the location's civil time zone instead of local mean time",
    )
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    load_dotenv()
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")

    args = _parse_args(argv)
    prefs = load_preferences()
    lang = args.lang or prefs.language

    location = resolve_location(args.address, fallback=prefs.fallback_location)
    # Wall clock at the observer, in the same basis the times are computed in
    now_utc = datetime.now(timezone.utc)
    mean_now = now_utc + timedelta(hours=location.longitude / 15)
    day = args.date or mean_now.date()
    offset = zone_offset_hours(location, day) if args.zone_time else None
    if offset is not None and args.date is None:
        day = (now_utc + timedelta(hours=offset)).date()
        offset = zone_offset_hours(location, day)
    local_now = mean_now if offset is None else now_utc + timedelta(hours=offset)

    times = calculate_prayer_times(
        day,
        location,
        args.method or prefs.convention,
        args.madhab or prefs.madhab,
        utc_offset_hours=offset,
    )

    place = location.label or t("unknown_place", lang)
    print(t("heading_times", lang).format(date=day.isoformat(), place=place))
    for name, value in times.items():
        print(f"  {t(name, lang):<10} {value}")
    if offset is None:
        print(t("mean_time_note", lang))

    if day == local_now.date():
        upcoming = next_prayer(times, local_now.time())
        key = "next_prayer_tomorrow" if upcoming.tomorrow else "next_prayer"
        print(t(key, lang).format(name=t(upcoming.name, lang), time=upcoming.time))

    minutes = prefs.notify_before_minutes
    print(t("reminders", lang).format(minutes=minutes))
    for name, value in reminder_times(times, minutes).items():
        print(f"  {t(name, lang):<10} {value}")

    print(t("qibla", lang).format(bearing=round(qibla_bearing(location))))
    print(t("distance", lang).format(km=f"{distance_to_kaaba(location):,.0f}"))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
