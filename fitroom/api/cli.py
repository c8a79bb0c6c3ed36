"""
Command-line adapter for the fitroom image tasks.

Interface responsibilities:
- `model IMAGE -o OUT`: studio model photo from a user photo.
- `try-on MODEL_IMAGE (--garment PATH | --item ID) -o OUT`: dress the model.
- `pose IMAGE --instruction TEXT -o OUT`: new viewpoint of a try-on result.
- `wardrobe`: list the default wardrobe.

Request lifecycle (per invocation):
1. Parse arguments.
2. Build the Gemini client from environment/key-file configuration.
3. Encode inputs and run exactly one task.
4. Decode the resulting data URL and write it to `OUT`.

Error handling strategy:
- Library, read and transport failures print one line to stderr and exit 1.
- Argument errors use `argparse` validation (exit 2).

Side effects:
- Loads environment variables at import time via `load_dotenv()`.
- Writes the output image file.
"""

from dotenv import load_dotenv

load_dotenv()

import argparse
import logging
import sys

import requests

from fitroom.catalog.wardrobe import DEFAULT_WARDROBE, fetch_wardrobe_image, get_wardrobe_item
from fitroom.image.encoding import decode_data_url, read_file_as_data_url
from fitroom.image.errors import FitroomError
from fitroom.image.service import (
    generate_model_image,
    generate_pose_variation,
    generate_virtual_try_on_image,
)
from fitroom.llm.client import create_client
from fitroom.prompting.prompt_builder import POSE_INSTRUCTIONS

logger = logging.getLogger(__name__)


def build_parser():
    parser = argparse.ArgumentParser(prog="fitroom", description="Virtual try-on images via Gemini")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable INFO logging")
    sub = parser.add_subparsers(dest="command", required=True)

    model = sub.add_parser("model", help="Create a studio model photo from a user photo")
    model.add_argument("image", help="User photo")
    model.add_argument("-o", "--output", required=True)

    try_on = sub.add_parser("try-on", help="Dress a model photo in a garment")
    try_on.add_argument("model_image", help="Model photo (usually the output of `model`)")
    garment = try_on.add_mutually_exclusive_group(required=True)
    garment.add_argument("--garment", help="Garment image file")
    garment.add_argument("--item", help="Default wardrobe item id")
    try_on.add_argument("-o", "--output", required=True)

    pose = sub.add_parser("pose", help="Regenerate a try-on photo from another viewpoint")
    pose.add_argument("image", help="Try-on photo")
    pose.add_argument(
        "--instruction",
        required=True,
        help="Free text, e.g. " + "; ".join(f'"{p}"' for p in POSE_INSTRUCTIONS[:3]),
    )
    pose.add_argument("-o", "--output", required=True)

    sub.add_parser("wardrobe", help="List the default wardrobe")

    return parser


def _write_result(data_url: str, output: str):
    with open(output, "wb") as f:
        f.write(decode_data_url(data_url))
    print(f"Saved {output}")


def _print_wardrobe():
    for item in sorted(DEFAULT_WARDROBE, key=lambda item: item.date_added):
        print(f"{item.id}\t{item.name}\t{item.url}")


def run(args, client=None):
    """Execute one parsed command; `client` overrides the configured one."""
    if args.command == "wardrobe":
        _print_wardrobe()
        return

    client = client or create_client()

    if args.command == "model":
        result = generate_model_image(client, args.image)

    elif args.command == "try-on":
        model_url = read_file_as_data_url(args.model_image)
        if args.item:
            try:
                item = get_wardrobe_item(args.item)
            except KeyError:
                raise FitroomError(f"Unknown wardrobe item: {args.item}")
            garment = fetch_wardrobe_image(item)
        else:
            garment = args.garment
        result = generate_virtual_try_on_image(client, model_url, garment)

    else:
        result = generate_pose_variation(client, read_file_as_data_url(args.image), args.instruction)

    _write_result(result, args.output)


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.INFO if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        run(args)
    except (FitroomError, OSError, RuntimeError, requests.RequestException) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except KeyboardInterrupt:
        return 130
    return 0


if __name__ == "__main__":
    sys.exit(main())
