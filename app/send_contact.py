from __future__ import annotations

import argparse
import sys

from app.clients.contact_api import ContactApiClient, ContactSent


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Send a contact form submission")
    parser.add_argument("--name", required=True)
    parser.add_argument("--email", required=True)
    parser.add_argument("--message", required=True)
    parser.add_argument("--api-url", default=None, help="Endpoint URL (defaults to CONTACT_API_URL)")
    return parser.parse_args(argv)


def run(argv: list[str] | None = None, client: ContactApiClient | None = None) -> int:
    args = parse_args(argv)
    client = client or ContactApiClient(api_url=args.api_url)
    with client:
        result = client.send(name=args.name, email=args.email, message=args.message)

    if isinstance(result, ContactSent):
        sys.stdout.write("Message sent successfully! Thank you for contacting us.\n")
        if result.submission_id:
            sys.stdout.write(f"Submission id: {result.submission_id}\n")
        return 0

    sys.stderr.write(f"ERROR: {result.message}\n")
    return 1


if __name__ == "__main__":
    raise SystemExit(run())
