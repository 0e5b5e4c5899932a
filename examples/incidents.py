"""Print one incident, or every open incident when no id is given."""

from __future__ import annotations

import sys

from victorops import VictorOps


def main(argv: list[str]) -> int:
    with VictorOps.from_env() as client:
        if len(argv) > 1:
            try:
                incident_id = int(argv[1])
            except ValueError:
                print(f"Invalid incident ID: {argv[1]}", file=sys.stderr)
                return 1
            incident, _details = client.incidents.get(incident_id)
            print(f"Incident {incident_id}:")
            print(incident.model_dump_json(indent=2, exclude_none=True))
            return 0

        incidents, _details = client.incidents.list()
        print("All Incidents:")
        print(incidents.model_dump_json(indent=2, exclude_none=True))
    return 0


if __name__ == "__main__":
    raise SystemExit(main(sys.argv))
