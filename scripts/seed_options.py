"""Set the hidden cart selectors through the running server's admin API.

Usage:
    python scripts/seed_options.py ".my-cart-icon, .header-cart"

Assumptions:
 - server: http://localhost:8000 (override with HIDE_CART_URL)
 - JWT_SECRET matches the server's, so a locally minted admin token is accepted
"""
import os
import sys

import httpx

from hidecart.auth import create_access_token

BASE_URL = os.getenv("HIDE_CART_URL", "http://localhost:8000")


def main():
    selectors = sys.argv[1] if len(sys.argv) > 1 else ""
    token = create_access_token({"sub": "seed-script", "role": "admin"})
    try:
        r = httpx.put(
            f"{BASE_URL}/api/admin/settings",
            json={"selectors": selectors},
            headers={"Authorization": f"Bearer {token}"},
            timeout=5.0,
        )
    except httpx.HTTPError as e:
        print(f"Server unavailable: {e}")
        sys.exit(1)
    if r.status_code != 200:
        print(f"Settings update returned {r.status_code}: {r.text}")
        sys.exit(1)
    data = r.json()
    print(f"Stored selectors: {data['selectors']!r}")
    print("Effective selectors:")
    for selector in data["effective"]:
        print(f"  {selector}")


if __name__ == "__main__":
    main()
