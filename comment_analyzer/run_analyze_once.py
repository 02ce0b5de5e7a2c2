from __future__ import annotations

import json
import logging
import sys
from typing import Sequence

from comment_analyzer.client import AttributeAnalysisClient
from comment_analyzer.errors import AnalysisError
from comment_analyzer.settings import load_settings

logger = logging.getLogger(__name__)


def main(argv: Sequence[str] | None = None) -> int:
    """
    Analyze one text and print {TOKEN: score} as JSON.

    Text comes from the command-line arguments, or stdin when none are given.
    """
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s - %(message)s",
    )

    args = list(sys.argv[1:] if argv is None else argv)
    text = " ".join(args) if args else sys.stdin.read().strip()

    s = load_settings()
    if not s.api_key:
        logger.error("Missing PERSPECTIVE_API_KEY")
        return 2

    try:
        types = s.requested_attribute_types()
    except ValueError as e:
        logger.error("Invalid PERSPECTIVE_REQUESTED_ATTRIBUTES: %s", e)
        return 2

    with AttributeAnalysisClient.from_settings(s) as client:
        try:
            result = client.analyze(text, types)
        except AnalysisError as e:
            logger.error("Analysis failed: kind=%s err=%s", type(e).__name__, e)
            return 1

    logger.info("Scored attributes: %s", len(result))
    print(json.dumps(result.to_dict(), ensure_ascii=False, indent=2, sort_keys=True))
    return 0


if __name__ == "__main__":
    sys.exit(main())
