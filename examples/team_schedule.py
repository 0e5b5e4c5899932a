"""Print the on-call schedule of a team for the next seven days."""

from __future__ import annotations

import asyncio
import sys

from victorops import AsyncVictorOps


async def main(team_slug: str) -> None:
    async with AsyncVictorOps.from_env() as client:
        schedule, _details = await client.oncall.team_schedule(team_slug, days_forward=7)

    if schedule.schedules:
        print(f"Team Schedule for '{team_slug}':")
        for entry in schedule.schedules:
            print(entry.model_dump_json(indent=2, exclude_none=True))
    else:
        print(f"No schedules found for team '{team_slug}'")


if __name__ == "__main__":
    if len(sys.argv) < 2:
        raise SystemExit("Usage: python examples/team_schedule.py <team_slug>")
    asyncio.run(main(sys.argv[1]))
