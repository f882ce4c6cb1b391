"""
query.py
--------
Runs one named query against the local dataset and prints the JSON response.

usage: python -m spacex_missions.query <operation> [key=value ...]
   e.g. python -m spacex_missions.query missionByName "name=Falcon 9 Test Flight"
        python -m spacex_missions.query missionByFlight flight_num=6
        python -m spacex_missions.query missionsBySite siteId=CAPE_CANAVERAL
"""

from __future__ import annotations

import json
import sys
from typing import Any, Dict, List

from rich.console import Console

from spacex_missions.dataset import load_repository
from spacex_missions.dispatcher import MissionQueryDispatcher, to_jsonable, to_wire
from spacex_missions.errors import InvalidArguments, MissionQueryError
from spacex_missions.utils import setup_logging

console = Console()


def parse_arguments(pairs: List[str]) -> Dict[str, Any]:
    args: Dict[str, Any] = {}
    for pair in pairs:
        key, sep, raw = pair.partition("=")
        if not sep or not key:
            raise InvalidArguments(f"expected key=value, got '{pair}'")
        # numbers/booleans as JSON, anything else as plain text
        try:
            args[key] = json.loads(raw)
        except ValueError:
            args[key] = raw
    return args


def run_query(operation: str, pairs: List[str]) -> Any:
    dispatcher = MissionQueryDispatcher(load_repository())
    outcome = dispatcher.dispatch(operation, parse_arguments(pairs))
    return to_jsonable(to_wire(outcome))


def main(argv: List[str]) -> None:
    if not argv:
        sys.exit("usage: python -m spacex_missions.query <operation> [key=value ...]")
    setup_logging()
    payload = run_query(argv[0], argv[1:])
    console.print_json(data=payload)


if __name__ == "__main__":
    try:
        main(sys.argv[1:])
    except MissionQueryError as e:
        console.print(f"[red]Query failed:[/red] {e}")
        raise SystemExit(1)
