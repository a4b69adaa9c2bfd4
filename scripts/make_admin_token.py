"""Print a bearer token for the admin settings endpoints.

Usage:
    python scripts/make_admin_token.py [subject]

Uses JWT_SECRET / JWT_ALGORITHM from the environment, same as the server.
"""
import sys

from hidecart.auth import create_access_token


def main():
    subject = sys.argv[1] if len(sys.argv) > 1 else "admin"
    print(create_access_token({"sub": subject, "role": "admin"}))


if __name__ == "__main__":
    main()
