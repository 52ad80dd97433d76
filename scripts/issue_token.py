# scripts/issue_token.py

import sys
from pathlib import Path

# Ensure project root is on the path when running this script directly
sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from book_archive.config.settings import get_settings
from book_archive.security.identity import FernetIdentityProvider


def issue(identity: str) -> str:
    settings = get_settings()
    provider = FernetIdentityProvider(
        settings.auth_secret,
        max_age_seconds=settings.auth_token_max_age_seconds,
    )
    return provider.issue_token(identity)


if __name__ == "__main__":
    if len(sys.argv) != 2:
        print("usage: python scripts/issue_token.py <identity>", file=sys.stderr)
        sys.exit(2)
    print(issue(sys.argv[1]))
