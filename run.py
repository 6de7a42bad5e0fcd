# run.py

import argparse
import json
import sys
from typing import List, Optional

from rich import print, print_json
from rich.table import Table

from ai.gemini import GeminiSource
from core.config import configure_logging, load_settings
from core.errors import ConfigError, ValidationError
from core.models import Itinerary
from core.normalizer import normalize_trip_request
from core.pipeline import synthesize_itinerary
from services.unsplash import UnsplashClient


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(description="Generate a travel plan in the terminal.")
    p.add_argument("--city", required=True)
    p.add_argument("--interests", action="append", help="repeat for several interests")
    p.add_argument("--days", default="3")
    p.add_argument("--offline", action="store_true", help="skip Gemini and Unsplash")
    p.add_argument("--json", action="store_true", help="print the itinerary as JSON")
    return p


def render_itinerary(city: str, itin: Itinerary) -> Table:
    table = Table(title=f"{len(itin.days)} days in {city}")
    table.add_column("Day", style="yellow", justify="right")
    table.add_column("Activities")
    for d in itin.days:
        table.add_row(str(d.day), "\n".join(d.activities))
    return table


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    raw = {"city": args.city, "interests": args.interests, "days": args.days}

    if args.offline:
        settings = None
        source = None
    else:
        try:
            settings = load_settings()
        except ConfigError as e:
            print(f"[red]{e}[/] (use --offline to plan without API keys)")
            return 1
        configure_logging(settings.log_level)
        source = GeminiSource(settings)

    try:
        req = normalize_trip_request(raw, max_days=settings.max_days if settings else 30)
    except ValidationError as e:
        print(f"[red]{e.user_message}[/]")
        return 2

    if not args.json:
        print("[cyan]→ Itinerary…[/]")
    itin, used_fallback = synthesize_itinerary(req, source)

    if args.json:
        print_json(json.dumps(itin.to_dict(), ensure_ascii=False))
        return 0

    if used_fallback:
        print("[dim]Gemini unavailable, using mock data.[/]")
    print(render_itinerary(req.city, itin))

    print("\n[bold green]Tips[/]")
    for tip in itin.tips:
        print(f"  • {tip}")
    print("\n[bold green]Packing list[/]")
    for item in itin.packing:
        print(f"  • {item}")

    if settings is not None:
        print("\n[bold green]Photos[/]")
        for url in UnsplashClient(settings).city_images(req.city):
            print(f"  {url}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
