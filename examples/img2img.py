"""Example: run an image-to-image job on a local file."""

import argparse
import json
import logging
from pathlib import Path

from prodia_client import ProdiaClient


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Submit an image-to-image job to Prodia.")
    parser.add_argument(
        "input",
        type=Path,
        help="Input image file.",
    )
    parser.add_argument(
        "prompt",
        help="Prompt describing the desired output.",
    )
    parser.add_argument(
        "--type",
        default="inference.flux.dev.img2img.v1",
        help="Job type (default: %(default)s).",
    )
    parser.add_argument(
        "--base-url",
        default=None,
        help="Override the API base URL (defaults to env PRODIA_BASE_URL).",
    )
    parser.add_argument(
        "--max-retries",
        type=int,
        default=None,
        help="Give up after this many 429 responses (default: never).",
    )
    parser.add_argument(
        "--output",
        type=Path,
        default=Path("output.jpg"),
        help="Where to write the result (default: %(default)s).",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Log every attempt.",
    )
    return parser.parse_args()


def main() -> None:
    args = parse_args()
    logging.basicConfig(level=logging.DEBUG if args.debug else logging.INFO)

    with ProdiaClient(base_url=args.base_url, max_retries=args.max_retries) as client:
        result = client.job(
            {"type": args.type, "config": {"prompt": args.prompt}},
            {"accept": "image/jpeg", "inputs": [args.input]},
        )

    print(json.dumps(result.job, indent=2))
    args.output.write_bytes(result.read())
    print(f"Saved {args.output}")


if __name__ == "__main__":
    main()
