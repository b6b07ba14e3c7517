# optimize_route.py

import argparse
import asyncio
import json
import sys
from pathlib import Path

from busroute.api.dependencies import get_settings
from busroute.core.models import OptimizationRequest
from busroute.monitoring.logging_config import setup_logging
from busroute.services.optimization_service import build_optimization_service
from busroute.services.request_validator import validate_request_payload


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Optimize one bus route from a JSON request file."
    )
    parser.add_argument("request", type=Path, help="Path to an optimization request JSON file.")
    parser.add_argument(
        "--heuristic-only",
        action="store_true",
        help="Skip the generative model even when GEMINI_API_KEY is set.",
    )
    return parser.parse_args()


async def main() -> int:
    args = parse_args()
    settings = get_settings()
    if args.heuristic_only:
        settings = settings.model_copy(update={"GEMINI_API_KEY": None})
    setup_logging(level=settings.LOG_LEVEL, json_logs=False)

    payload = json.loads(args.request.read_text())
    validate_request_payload(payload)

    service = build_optimization_service(settings)
    try:
        result = await service.optimize(OptimizationRequest.model_validate(payload))
    finally:
        await service.aclose()
    print(json.dumps(result.to_dict(), indent=2))
    return 0


if __name__ == "__main__":
    sys.exit(asyncio.run(main()))
