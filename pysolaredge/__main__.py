# pySolarEdge Module - Command Line
# -*- coding: utf-8 -*-
"""
 Python module to access the SolarEdge monitoring and consumer portal APIs

 Command Line:
    python -m pysolaredge <command>

 Credentials are read from the environment (or a .env file):
    SOLAREDGE_API_KEY, SOLAREDGE_SITE_ID    - monitoring API
    SOLAREDGE_USERNAME, SOLAREDGE_PASSWORD  - portal API (weather)
    SOLAREDGE_CSRF_TOKEN                    - portal csrf token [Default=""]
    SOLAREDGE_TIMEOUT                       - HTTPS timeout in seconds
"""

import argparse
import json
import os
import sys
from datetime import date, datetime, time

import dotenv

# Modules
from pysolaredge import version, set_debug
from pysolaredge.enums import MeterType, TimeUnit
from pysolaredge.exceptions import PySolarEdgeException
from pysolaredge.params import EnergyRequestParameter

FORMATS = ["text", "json"]


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="PySolarEdge", description=f"PySolarEdge Module v{version}")
    subparsers = p.add_subparsers(dest="command", title='commands (run <command> -h to see usage information)',
                                  required=True)

    subparsers.add_parser("version", help='Print version information')

    for name, text in (("sites", 'List the sites of the account'),
                       ("overview", 'Show the energy overview of the site'),
                       ("powerflow", 'Show the current power flow of the site'),
                       ("weather", 'Show the weather at the site (portal login)')):
        args = subparsers.add_parser(name, help=text)
        args.add_argument("-format", type=str, default="text", choices=FORMATS, help="Output format: text, json")

    energy_args = subparsers.add_parser("energy", help='Show the energy produced between two days')
    energy_args.add_argument("-start", type=str, required=True, help="First day (YYYY-MM-DD)")
    energy_args.add_argument("-end", type=str, required=True, help="Last day (YYYY-MM-DD)")
    energy_args.add_argument("-unit", type=str, default=TimeUnit.DAY.value,
                             help="Time unit: QUARTER_OF_AN_HOUR, HOUR, DAY, WEEK, MONTH, YEAR [Default=DAY]")
    energy_args.add_argument("-format", type=str, default="text", choices=FORMATS, help="Output format: text, json")

    details_args = subparsers.add_parser("details", help='Show energy per meter and the derived percentages')
    details_args.add_argument("-start", type=str, required=True, help="First day (YYYY-MM-DD)")
    details_args.add_argument("-end", type=str, required=True, help="Last day (YYYY-MM-DD)")
    details_args.add_argument("-unit", type=str, default=TimeUnit.DAY.value,
                              help="Time unit: QUARTER_OF_AN_HOUR, HOUR, DAY, WEEK, MONTH, YEAR [Default=DAY]")
    details_args.add_argument("-meters", type=str, default=None,
                              help="Comma separated meters, e.g. Production,Consumption [Default=all]")
    details_args.add_argument("-format", type=str, default="text", choices=FORMATS, help="Output format: text, json")

    # Add a global debug flag
    p.add_argument("-debug", action="store_true", default=False, help="Enable debug output")
    return p


def _env(name, default=None):
    value = os.getenv(name, default)
    if value is None:
        raise PySolarEdgeException(f"Environment variable {name} is not set")
    return value


def _timeout():
    return float(os.getenv("SOLAREDGE_TIMEOUT", "10"))


def _day(value: str) -> date:
    try:
        return datetime.strptime(value, "%Y-%m-%d").date()
    except ValueError:
        raise PySolarEdgeException(f"Invalid date [{value}] - must be YYYY-MM-DD")


def _time_unit(value: str) -> TimeUnit:
    try:
        return TimeUnit(value.upper())
    except ValueError:
        raise PySolarEdgeException(f"Invalid time unit [{value}]")


def _meters(value):
    if not value:
        return None
    try:
        return {MeterType(name.strip()) for name in value.split(",")}
    except ValueError as exc:
        raise PySolarEdgeException(f"Invalid meter list [{value}]: {exc}")


def _print(model, fmt, text):
    if fmt == "json":
        if isinstance(model, list):
            print(json.dumps([m.model_dump(mode="json", by_alias=True) for m in model], indent=4))
        else:
            print(json.dumps(model.model_dump(mode="json", by_alias=True), indent=4))
    else:
        print(text)


def run(args) -> None:
    from pysolaredge import PySolarEdgeMonitoring, PySolarEdgePortal

    command = args.command
    if command == 'version':
        print("pySolarEdge [%s]" % version)
        return

    if command == 'weather':
        portal = PySolarEdgePortal(timeout=_timeout())
        login = portal.login(_env("SOLAREDGE_USERNAME"), _env("SOLAREDGE_PASSWORD"))
        csrf_token = _env("SOLAREDGE_CSRF_TOKEN", "")
        weather = portal.weather(int(_env("SOLAREDGE_SITE_ID")), csrf_token, login.cookie)
        live = weather.live_weather
        _print(weather, args.format,
               f"{live.current_condition}: {live.current_temperature} (feels like {live.feels_like_temperature})\n"
               f"Sunrise {weather.sun_time.sunrise:%H:%M}, sunset {weather.sun_time.sunset:%H:%M}")
        return

    monitoring = PySolarEdgeMonitoring(timeout=_timeout())
    api_key = _env("SOLAREDGE_API_KEY")

    if command == 'sites':
        sites = monitoring.sites(api_key)
        _print(sites, args.format, "\n".join(f"{s.id}\t{s.name}\t{s.status or ''}" for s in sites))
        return

    site_id = int(_env("SOLAREDGE_SITE_ID"))

    if command == 'overview':
        o = monitoring.overview(site_id, api_key)
        _print(o, args.format,
               f"Last update: {o.last_update_time}\n"
               f"Lifetime: {o.life_time_data.energy} Wh\n"
               f"This year: {o.last_year_data.energy} Wh\n"
               f"This month: {o.last_month_data.energy} Wh\n"
               f"Today: {o.last_day_data.energy} Wh\n"
               f"Current power: {o.current_power.get('power', 0)} W")

    elif command == 'powerflow':
        flow = monitoring.power_flow(site_id, api_key)
        _print(flow, args.format, str(flow))

    elif command == 'energy':
        parameter = EnergyRequestParameter(_day(args.start), _day(args.end), _time_unit(args.unit))
        energy = monitoring.energy(site_id, parameter, api_key)
        _print(energy, args.format,
               "\n".join(f"{point.date:%Y-%m-%d %H:%M}\t{point.value if point.value is not None else '-'} "
                         f"{energy.unit}" for point in energy.values))

    elif command == 'details':
        start = datetime.combine(_day(args.start), time.min)
        end = datetime.combine(_day(args.end), time(23, 59, 59))
        detail = monitoring.detailed_energy(site_id, start, end, api_key, time_unit=_time_unit(args.unit),
                                            meter_types=_meters(args.meters))
        lines = []
        for label, total, share in (
                ("Production", detail.production_total_value_description, None),
                ("Consumption", detail.consumption_total_value_description, None),
                ("Self consumption", detail.self_consumption_total_value_description,
                 detail.self_consumption_percentage),
                ("Feed in", detail.feed_in_total_value_description, detail.feed_in_percentage),
                ("Purchased", detail.purchased_total_value_description, detail.purchased_percentage)):
            line = f"{label}: {total if total is not None else '-'} {detail.unit}"
            if share is not None:
                line += f" ({share}%)"
            lines.append(line)
        _print(detail, args.format, "\n".join(lines))


def main(argv=None) -> int:
    dotenv.load_dotenv()
    p = build_parser()
    if argv is None and len(sys.argv) == 1:
        p.print_help(sys.stderr)
        return 1

    # parse args
    args = p.parse_args(argv)

    # Set Debug Mode
    if args.debug:
        set_debug(True)

    try:
        run(args)
    except PySolarEdgeException as exc:
        print(f"ERROR: {exc}")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
