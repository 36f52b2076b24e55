# backend/scripts/issue_token.py
from __future__ import annotations

import argparse
import sys
from datetime import datetime, timedelta, timezone
from pathlib import Path

import jwt

BACKEND_DIR = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(BACKEND_DIR))

from blackslope.core.settings import settings

"""
Génère un JWT HS256 signé avec JWT_SECRET (dev / tests manuels via Swagger ou curl).

Usage :
    python scripts/issue_token.py --subject alice --minutes 60
"""


def issue_token(subject: str, minutes: int) -> str:
    if not settings.JWT_SECRET:
        raise SystemExit("JWT_SECRET is empty: configure it in .env before issuing tokens")

    now = datetime.now(timezone.utc)
    claims = {"sub": subject, "iat": now, "exp": now + timedelta(minutes=minutes)}
    if settings.JWT_AUDIENCE:
        claims["aud"] = settings.JWT_AUDIENCE
    if settings.JWT_ISSUER:
        claims["iss"] = settings.JWT_ISSUER

    return jwt.encode(claims, settings.JWT_SECRET, algorithm="HS256")


def main():
    parser = argparse.ArgumentParser()
    parser.add_argument("--subject", default="dev-user", help="Claim sub du jeton")
    parser.add_argument("--minutes", type=int, default=60, help="Durée de validité")
    args = parser.parse_args()

    print(issue_token(args.subject, args.minutes))


if __name__ == "__main__":
    main()
