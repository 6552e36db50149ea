"""Issue a long-lived access token for scripts and integrations.

Usage:
    python create_token.py --user admin --days 365
"""
import argparse

from docstore_api.app.core.config import get_settings
from docstore_api.app.core.security import create_access_token


def main() -> None:
    parser = argparse.ArgumentParser(description="Create a DocStore API access token")
    parser.add_argument("--user", help="token subject (defaults to ADMIN_USERNAME)")
    parser.add_argument("--days", type=int, default=365, help="token lifetime in days")
    args = parser.parse_args()

    settings = get_settings()
    token = create_access_token(
        {"sub": args.user or settings.admin_username},
        settings.secret_key,
        args.days * 24 * 60 * 60,
    )
    print(token)


if __name__ == "__main__":
    main()
