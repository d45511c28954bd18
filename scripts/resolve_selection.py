"""Resolve one selection from the command line.

Runs the full pipeline with the Janome tokenizer and the Jisho API and
prints the resulting snapshot as JSON. Not collected by pytest.

Usage:
    PYTHONPATH=src python scripts/resolve_selection.py "食べるりんご"
    PYTHONPATH=src python scripts/resolve_selection.py --raw "走った"
"""

import argparse
import asyncio
import json
import sys
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()

sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from adapter.external.jisho import JishoAdapter
from adapter.nlp.janome import JanomeAdapter
from api.models import ResolutionResponse
from services.resolution_service import ResolutionService
from utils.logging import setup_structured_logging


async def resolve(text: str, include_raw: bool) -> dict:
    service = ResolutionService(tokenizer=JanomeAdapter(), dictionary=JishoAdapter())
    state = await service.handle_selection(text)
    exclude = None if include_raw else {
        "primary_results": {"__all__": {"raw"}},
        "secondary_results": {"__all__": {"raw"}},
    }
    return ResolutionResponse.from_state(state).model_dump(exclude=exclude)


def main():
    parser = argparse.ArgumentParser(description="Resolve selected Japanese text into dictionary entries")
    parser.add_argument("text", help="Selected text")
    parser.add_argument("--raw", action="store_true", help="Include raw dictionary records")
    parser.add_argument("--log-level", default="WARNING", help="Log level (default: WARNING)")
    args = parser.parse_args()

    setup_structured_logging(args.log_level.upper())
    result = asyncio.run(resolve(args.text, args.raw))
    print(json.dumps(result, ensure_ascii=False, indent=2))
    return 1 if result["error_msg"] and not (result["primary_results"] or result["secondary_results"]) else 0


if __name__ == "__main__":
    sys.exit(main())
