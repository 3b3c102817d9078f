"""
Thin HTTP-style adapter around PosterGenerator.

Accepts an API Gateway proxy event whose body is
{"name": "...", "avatarUrl": "..."} and answers with {"image": "<base64 png>"}
or {"error": "..."}. Assets are loaded when this module is imported, so a
broken asset bundle stops the process before it can serve anything.
"""

from __future__ import annotations

import base64
import json
import sys
from pathlib import Path
from typing import Any, Dict, Optional

from errors import PosterError
from poster_generator import get_generator

generator = get_generator()


def _response(status: int, payload: Dict[str, str]) -> Dict[str, Any]:
    return {
        "statusCode": status,
        "headers": {"Content-Type": "application/json"},
        "body": json.dumps(payload),
    }


def _error(status: int, message: str) -> Dict[str, Any]:
    return _response(status, {"error": message})


def handle_request(event: Dict[str, Any], context: Optional[Any] = None) -> Dict[str, Any]:
    try:
        req = json.loads(event.get("body") or "")
    except (TypeError, ValueError):
        return _error(400, "invalid request body")

    if not isinstance(req, dict):
        return _error(400, "invalid request body")

    # null counts as missing; any other non-string is a malformed body.
    for field in ("name", "avatarUrl"):
        if req.get(field) is not None and not isinstance(req[field], str):
            return _error(400, "invalid request body")

    name = req.get("name") or ""
    avatar_url = req.get("avatarUrl") or ""

    if not name:
        return _error(400, "name is required")
    if not avatar_url:
        return _error(400, "avatarUrl is required")

    try:
        image_b64 = generator.generate(name, avatar_url)
    except PosterError as e:
        print(f"[handler] generation error: {e}")
        return _error(500, "failed to generate poster")

    return _response(200, {"image": image_b64})


def main(argv: list[str]) -> int:
    if len(argv) not in (3, 4):
        print("Usage: poster_handler.py NAME AVATAR_URL [OUTPUT.png]")
        return 1

    name, avatar_url = argv[1], argv[2]
    try:
        image_b64 = generator.generate(name, avatar_url)
    except PosterError as e:
        print(f"[handler] {e}")
        return 2

    if len(argv) == 4:
        out_path = Path(argv[3])
        out_path.write_bytes(base64.b64decode(image_b64))
        print(f"[handler] Poster written to {out_path}")
    else:
        print(image_b64)
    return 0


if __name__ == "__main__":
    sys.exit(main(sys.argv))
