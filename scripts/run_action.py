#!/usr/bin/env python3
from __future__ import annotations

import argparse
import asyncio
import json
import sys
from pathlib import Path
from typing import Any

import httpx


def _repo_root() -> Path:
    return Path(__file__).resolve().parents[1]


def _bootstrap_pythonpath() -> None:
    src = _repo_root() / "src"
    if str(src) not in sys.path:
        sys.path.insert(0, str(src))


_bootstrap_pythonpath()

from mindvault.api.schemas import AssistantRequest  # noqa: E402
from mindvault.errors import AssistantError  # noqa: E402
from mindvault.service.assistant import AssistantService  # noqa: E402
from mindvault.workflow.prompts import Action, Tone  # noqa: E402


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Run one MindVault AI action against Gemini.")
    parser.add_argument("--action", required=True, choices=[action.value for action in Action])
    parser.add_argument(
        "--content-file",
        default="-",
        help="Note content for summarize/improve/tags. '-' reads stdin. Default: -",
    )
    parser.add_argument("--tone", choices=[tone.value for tone in Tone], default=None)
    parser.add_argument("--prompt", default="", help="Topic for the generate action.")
    parser.add_argument("--question", default="", help="Question for the ask action.")
    parser.add_argument(
        "--notes-json",
        default="",
        help="JSON file with a list of notes (title, content, tags, updated_at) used as ask context.",
    )
    return parser.parse_args(argv)


def read_content(path: str, action: str) -> str:
    if action in {Action.GENERATE.value, Action.ASK.value}:
        return ""
    if path == "-":
        return sys.stdin.read()
    return Path(path).read_text(encoding="utf-8")


def load_notes(path: str) -> list[dict[str, Any]]:
    if not path:
        return []
    rows = json.loads(Path(path).read_text(encoding="utf-8"))
    if not isinstance(rows, list):
        raise ValueError(f"{path}: expected a JSON list of notes")
    return rows


def build_request(args: argparse.Namespace) -> AssistantRequest:
    return AssistantRequest.model_validate(
        {
            "action": args.action,
            "content": read_content(args.content_file, args.action),
            "tone": args.tone,
            "prompt": args.prompt.strip(),
            "question": args.question.strip(),
            "notes": load_notes(args.notes_json),
        }
    )


async def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    request = build_request(args)
    service = AssistantService()
    try:
        result = await service.run(request)
    except AssistantError as exc:
        print(json.dumps({"error": exc.message}, ensure_ascii=False), file=sys.stderr)
        print(f"[mindvault] failed status={exc.status_code}", file=sys.stderr)
        return 1
    except httpx.HTTPError as exc:
        print(json.dumps({"error": str(exc) or "Gemini request failed."}, ensure_ascii=False), file=sys.stderr)
        print(f"[mindvault] failed type={exc.__class__.__name__}", file=sys.stderr)
        return 1
    print(json.dumps(result, ensure_ascii=False, indent=2))
    return 0


if __name__ == "__main__":
    raise SystemExit(asyncio.run(main()))
