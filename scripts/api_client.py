"""Lightweight REST client for the playerstats API."""

from __future__ import annotations

import argparse
import json
import urllib.parse

import httpx


RANKING_PATHS = {
    "scorers": "/api/top-goleadores",
    "goalkeepers": "/api/top-goleros",
    "defenders": "/api/top-defensas",
    "touches": "/api/top-touches",
    "assists": "/api/top-asistidores",
}


def main() -> None:
    parser = argparse.ArgumentParser(description="Interact with the playerstats REST API")
    parser.add_argument("base_url", help="Base URL of the API, e.g. http://localhost:3000")
    parser.add_argument("--ranking", choices=sorted(RANKING_PATHS), help="Print one ranking and exit")
    parser.add_argument("--search", metavar="QUERY", help="Autocomplete player names")
    parser.add_argument("--limit", type=int, default=None, help="Maximum autocomplete results")
    parser.add_argument("--player", metavar="NAME", help="Fetch the full record for a player")
    args = parser.parse_args()

    with httpx.Client(base_url=args.base_url) as client:
        if args.ranking:
            resp = client.get(RANKING_PATHS[args.ranking])
            resp.raise_for_status()
            print(json.dumps(resp.json(), indent=2))
            return
        if args.search is not None:
            params = {"q": args.search}
            if args.limit is not None:
                params["limit"] = str(args.limit)
            resp = client.get("/api/search/players", params=params)
            resp.raise_for_status()
            for hit in resp.json():
                print(hit.get("strPlayer"))
            return
        if args.player:
            resp = client.get(f"/api/player/{urllib.parse.quote(args.player, safe='')}")
            if resp.status_code == 404:
                raise SystemExit(f"player {args.player} not found")
            resp.raise_for_status()
            print(json.dumps(resp.json(), indent=2))
            return

        resp = client.get("/api")
        if resp.status_code == 503:
            raise SystemExit("service is up but the database connection is not ready")
        resp.raise_for_status()
        print(resp.json()["message"])


if __name__ == "__main__":
    main()
