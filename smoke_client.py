"""
Файл для локального тестирования работоспособности API.
"""

import sys
from typing import Any, Dict, Optional

import requests

from settings import load_api_url


def fetch_groups(base_url: str, term: Optional[str] = None) -> Dict[str, Any]:
    params = {"term": term} if term is not None else None

    r = requests.get(f"{base_url}/api/groups", params=params, timeout=10)
    r.raise_for_status()

    return r.json()


def print_groups(payload: Dict[str, Any]) -> None:
    print(f"[GROUPS]: Found {payload['total']} groups.")
    for group in payload['items']:
        print(f"- {group.get('name')} [{', '.join(group.get('tags', []))}]")
        print(f"  url: {group.get('url')}")


def main() -> int:
    url = load_api_url()
    term = " ".join(sys.argv[1:]) or None

    print(f"Sending query to {url}/api/groups (term={term!r})")

    try:
        print_groups(fetch_groups(url, term))
    except requests.RequestException as e:
        print(f"\nCritical error: {e}")
        return 1

    print("\n--- END ---")
    return 0


if __name__ == "__main__":
    sys.exit(main())
