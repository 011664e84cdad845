"""
Dummy HTTP Target Service
==========================

Minimal server for the load driver to hit locally.
Answers every GET on / with 200 and a short plain-text body.

Run: uvicorn loadburst.target:app --host 127.0.0.1 --port 4444
  or loadburst-target --port 4444
"""

import argparse
import logging

import uvicorn
from fastapi import FastAPI, Request
from fastapi.responses import PlainTextResponse

# Configure logging
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

DEFAULT_HOST = "127.0.0.1"
DEFAULT_PORT = 4444

RESPONSE_BODY = "Everything is okay :)"


app = FastAPI(
    title="Dummy Target",
    version="1.0.0",
    description="Always-OK endpoint for burst load runs"
)


@app.get("/", response_class=PlainTextResponse)
async def root(request: Request):
    """Everything is okay"""
    client = request.client
    peer = f"{client.host}:{client.port}" if client else "unknown"
    logger.info(f"Connection from: {peer} {request.method} {request.url.path}")
    return RESPONSE_BODY


def main():
    """Main entry point"""
    parser = argparse.ArgumentParser(description="Dummy HTTP target for loadburst")
    parser.add_argument("--host", default=DEFAULT_HOST, help=f"Bind address (default: {DEFAULT_HOST})")
    parser.add_argument("--port", type=int, default=DEFAULT_PORT, help=f"Bind port (default: {DEFAULT_PORT})")

    args = parser.parse_args()

    logger.info(f"bind -> {args.host}:{args.port}")
    uvicorn.run(app, host=args.host, port=args.port)


if __name__ == "__main__":
    main()
