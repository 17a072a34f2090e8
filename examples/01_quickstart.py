#!/usr/bin/env python3
"""
httpext Quickstart Example

Fetches a few pages one at a time, pausing after every other request.

Usage:
    python examples/01_quickstart.py
"""

import asyncio

import httpx

from httpext import (
    body_handlers,
    configure_logging,
    create_client,
    execute_with_delay,
    get_settings,
    load,
    to_uri,
    to_x_www_form_url,
)


async def main() -> None:
    """Polite sequential fetching."""
    settings = get_settings(log_level="DEBUG")
    configure_logging(settings)

    terms = ["python asyncio", "httpx", "form encoding"]
    urls = [to_uri(f"https://duckduckgo.com/html/?q={to_x_www_form_url(t)}") for t in terms]

    async with create_client(settings) as client:

        async def fetch(url: httpx.URL) -> None:
            status, size = await load(client, url, lambda r: (r.status_code, len(r.content)))
            print(f"✓ {url} -> {status} ({size} bytes)")

        # Wait one second after even-indexed requests
        await execute_with_delay(urls, fetch, lambda i, url: 1.0 if i % 2 == 0 else None)

        lines = await load(client, "https://example.com", body_handlers.of_lines())
        title = next((line.strip() for line in lines if "<title>" in line), "")
        print(f"✓ example.com title: {title}")


if __name__ == "__main__":
    asyncio.run(main())
