"""
HTTP Burst Load Driver
=======================

Launches a burst of concurrent HTTP GET requests against the local target,
times every request, and prints a summary once all of them have finished.

Features:
- One unit of work per request, all launched at once (no throttling)
- Per-request start/finish lines with elapsed seconds and status code
- Transport failures reported inline, never abort the run
- Barrier before the summary: waits for every request, however slow

Usage:
    loadburst              # 100 requests
    loadburst 500          # 500 requests

    # Or as a module, with verbose diagnostics on stderr
    python -m loadburst.driver 20 --log-level DEBUG
"""

import argparse
import asyncio
import logging
import re
import sys
import time
from typing import List, Optional

import httpx

from loadburst.models import RequestResult, RunSummary

logger = logging.getLogger(__name__)

# Target endpoint
TARGET_URL = "http://localhost:4444"

# Run parameters
DEFAULT_REQUESTS = 100
SEPARATOR = "-" * 20

COUNT_PATTERN = re.compile(r"[0-9]+")
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


def resolve_request_count(arg: Optional[str]) -> int:
    """Return the request count for a raw CLI argument, falling back to the default"""
    if arg is not None and COUNT_PATTERN.fullmatch(arg):
        return int(arg)
    return DEFAULT_REQUESTS


def _now() -> int:
    """Current time in whole epoch seconds"""
    return int(time.time())


class LoadDriver:
    """Fans out one GET per unit of work and joins on all of them"""

    def __init__(self, requests: int, url: str = TARGET_URL,
                 transport: Optional[httpx.AsyncBaseTransport] = None):
        """
        Initialize the driver

        Args:
            requests: Number of concurrent requests to launch
            url: Endpoint every unit hits
            transport: Optional httpx transport (in-process targets, mocks)
        """
        self.requests = requests
        self.url = url
        self.transport = transport
        self.http_client: Optional[httpx.AsyncClient] = None
        self.results: List[RequestResult] = []

    async def setup(self):
        """Open the shared HTTP client"""
        # No pool cap and no timeout: every unit gets its own connection
        # and waits as long as the server takes.
        self.http_client = httpx.AsyncClient(
            timeout=None,
            limits=httpx.Limits(max_connections=None, max_keepalive_connections=None),
            follow_redirects=False,
            transport=self.transport
        )
        logger.info(f"Target {self.url}")

    async def teardown(self):
        """Close the shared HTTP client"""
        if self.http_client:
            await self.http_client.aclose()
            self.http_client = None

    def _emit(self, line: str):
        print(line, flush=True)

    async def _fetch_status(self, index: int) -> str:
        try:
            response = await self.http_client.get(self.url)
        except httpx.HTTPError as e:
            logger.debug(f"Request {index} failed: {e!r}")
            return ""
        return str(response.status_code)

    async def do_request(self, index: int) -> RequestResult:
        """Perform one GET and report its timing"""
        self._emit(f"Request {index}...")
        start = _now()
        status = await self._fetch_status(index)
        end = _now()

        result = RequestResult(index=index, start=start, end=end, status=status)
        self._emit(f"Finished {index}; Time {result.elapsed}s; Result {result.status}")
        return result

    async def run(self) -> RunSummary:
        """Launch every request, wait for all of them, print the summary"""
        self._emit(f"Launching {self.requests} requests")
        await self.setup()

        try:
            total_start = _now()
            tasks = [asyncio.create_task(self.do_request(i)) for i in range(self.requests)]
            self.results = list(await asyncio.gather(*tasks))
            total_end = _now()
        finally:
            await self.teardown()

        summary = RunSummary(
            requests=self.requests,
            start=total_start,
            end=total_end,
            results=self.results
        )

        self._emit(SEPARATOR)
        self._emit(f"Requests {summary.requests}")
        self._emit(f"Total run time {summary.elapsed}s")
        return summary


def build_parser() -> argparse.ArgumentParser:
    """Option parser for the arguments after the count"""
    parser = argparse.ArgumentParser(description="Burst HTTP GET load driver", add_help=False)
    parser.add_argument(
        "--log-level", nargs="?", default="INFO", const="INFO", type=str.upper,
        help="Diagnostic log level on stderr (default: INFO)"
    )
    return parser


def resolve_log_level(options: List[str]) -> str:
    """Return the requested log level, falling back to INFO"""
    args, _ = build_parser().parse_known_args(options)
    return args.log_level if args.log_level in LOG_LEVELS else "INFO"


async def main(argv: Optional[List[str]] = None) -> RunSummary:
    """Main entry point"""
    if argv is None:
        argv = sys.argv[1:]

    # Only the first argument can be the count; options follow it
    count = resolve_request_count(argv[0] if argv else None)

    logging.basicConfig(
        level=resolve_log_level(argv[1:]),
        format='%(asctime)s [%(levelname)s] %(message)s',
        datefmt='%H:%M:%S'
    )

    driver = LoadDriver(count)
    return await driver.run()


def cli():
    """Console script entry point"""
    try:
        asyncio.run(main())
    except KeyboardInterrupt:
        logger.info("Load driver stopped by user")


if __name__ == "__main__":
    cli()
