#!/usr/bin/env python3
from __future__ import annotations

import argparse
import asyncio
from datetime import date

from stockview import ViewCoordinator, load_settings

ROW_FORMAT = "{:<12}{:>12}{:>12}{:>12}{:>12}{:>16}"


def parse_args() -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Load a symbol and print its price history")
    p.add_argument("symbol", nargs="?", default=None, help="Ticker to load (default: IBM)")
    p.add_argument("--search", default=None, help="Free-text ticker search to run first")
    p.add_argument("--start", type=date.fromisoformat, default=None, help="YYYY-MM-DD")
    p.add_argument("--end", type=date.fromisoformat, default=None, help="YYYY-MM-DD")
    p.add_argument("--base-url", default=None, help="Service base URL override")
    p.add_argument("--rows", type=int, default=20, help="Number of table rows to print")
    return p.parse_args()


async def main() -> None:
    args = parse_args()
    settings = load_settings(base_url=args.base_url)

    async with ViewCoordinator.from_settings(settings) as view:
        if args.search:
            view.search_text_changed(args.search)
            await view.wait_idle()
            for s in view.view.suggestions:
                print(f"SUGGESTION {s.symbol:<10} {s.name} ({s.instrument_type}, {s.region})")

        view.start(args.symbol)
        await view.wait_idle()
        view.set_date_range(args.start, args.end)

        state = view.view
        if state.error:
            print(f"ERROR {state.error}")
            return

        print(f"{state.symbol}: {len(state.table_rows)} rows")
        print(ROW_FORMAT.format("Date", "Open", "High", "Low", "Close", "Volume"))
        for row in state.table_rows[-args.rows :]:
            print(ROW_FORMAT.format(row.date, row.open, row.high, row.low, row.close, row.volume))


if __name__ == "__main__":
    asyncio.run(main())
