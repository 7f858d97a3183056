# smoke.py - end-to-end run against a live Golf League Stats API
import json
import os
import time

import requests

BASE = os.getenv("SMOKE_BASE_URL", "http://127.0.0.1:8000")


def post(path, data):
    r = requests.post(BASE + path, json=data)
    r.raise_for_status()
    return r.json()


def delete(path):
    r = requests.delete(BASE + path)
    r.raise_for_status()
    return r.json()


def get(path, params=None):
    r = requests.get(BASE + path, params=params)
    r.raise_for_status()
    return r.json()


# unique names so the script can be re-run against the same database
tag = str(time.time_ns())[-6:]
golfers = {
    f"Ann-{tag}": [41, 43, 40],
    f"Bob-{tag}": [47, 45, 46],
    f"Cy-{tag}": [44, 42, 45],
    f"Dee-{tag}": [50, 49, 48],
}
year = 2099

print("=== 1) add golfers ===")
for name in golfers:
    print(post("/golfers/", {"name": name}))

print("=== 2) open weeks & post scores ===")
for week in (1, 2, 3):
    opened = post("/weeks/", {"year": year, "week": week})
    for name, scores in golfers.items():
        post("/scores/", {"name": name, "date": opened["key"], "score": scores[week - 1]})

print("=== 3) outputs ===")
meta = get("/golfers/metadata")
stats = get(f"/golfers/Ann-{tag}/stats", {"start_year": year})
report = get(f"/reports/{year}/3")

print("\n-- metadata --\n", json.dumps(meta, indent=2))
print("\n-- stats --\n", json.dumps(stats, indent=2))
print("\n-- report --\n", json.dumps(report, indent=2))

print("=== 4) remove smoke weeks ===")
for week in (1, 2, 3):
    print(delete(f"/weeks/{year}/{week}"))
