#!/usr/bin/env python3
"""
Terminal front-end for the studio relay.

Type a game idea, read the architect's narration, open the preview file in a
browser. Each turn rewrites the preview with the latest game.

Usage:
  python play.py
  python play.py --url http://127.0.0.1:5000 --out preview.html
"""
from __future__ import annotations

import argparse
import os
from pathlib import Path
from typing import List, Optional

from dotenv import load_dotenv

from conversation import ConversationSession, RelayClient


def log(msg: str) -> None:
    print(f"[play] {msg}", flush=True)


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    load_dotenv()
    parser = argparse.ArgumentParser(description="Chat with the game architect from a terminal")
    parser.add_argument(
        "--url",
        default=os.getenv("GAME_STUDIO_URL", "http://127.0.0.1:5000"),
        help="Base URL of the running studio server",
    )
    parser.add_argument("--out", default="preview.html", help="Where to write the preview document")
    return parser.parse_args(argv)


def write_preview(session: ConversationSession, out_path: Path) -> None:
    out_path.write_text(session.preview_source, encoding="utf-8")


def main(argv: Optional[List[str]] = None) -> None:
    args = parse_args(argv)
    out_path = Path(args.out)
    session = ConversationSession(RelayClient(args.url))

    write_preview(session, out_path)
    log(f"Preview: {out_path.resolve()}")

    while True:
        try:
            prompt = input("\nDescribe your game (empty line to quit): ").strip()
        except EOFError:
            break
        if not prompt:
            break

        log("Synthesizing interactive experience...")
        reply = session.submit(prompt)
        if reply is None:
            log(f"ERROR: {session.error}")
            continue

        print("\n=== Game Architect ===\n")
        print(reply.content)
        write_preview(session, out_path)
        log(f"Preview updated: {out_path.resolve()}")

    log("Bye.")


if __name__ == "__main__":
    main()
