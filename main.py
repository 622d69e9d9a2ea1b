"""
BlurHash Studio
Compact BlurHash placeholders from image files
"""

import argparse
import sys
import warnings

warnings.filterwarnings('ignore', category=RuntimeWarning)


def build_parser() -> argparse.ArgumentParser:
    from utils.constants import DEFAULT_COMPONENTS_X, DEFAULT_COMPONENTS_Y
    from utils.test_images import DEMO_IMAGE_KEYS

    parser = argparse.ArgumentParser(description="Compute BlurHash strings for images")
    parser.add_argument("inputs", nargs="*", help="Image files to encode")
    parser.add_argument(
        "-x", "--components-x",
        type=int,
        default=DEFAULT_COMPONENTS_X,
        help=f"Horizontal components, 1-9 (default: {DEFAULT_COMPONENTS_X})",
    )
    parser.add_argument(
        "-y", "--components-y",
        type=int,
        default=DEFAULT_COMPONENTS_Y,
        help=f"Vertical components, 1-9 (default: {DEFAULT_COMPONENTS_Y})",
    )
    parser.add_argument(
        "--max-workers",
        type=int,
        default=None,
        help="Maximum parallel encodes (default: CPU count)",
    )
    parser.add_argument(
        "--synthetic",
        choices=DEMO_IMAGE_KEYS,
        default=None,
        help="Encode a generated test image instead of files",
    )
    parser.add_argument(
        "--save",
        default=None,
        metavar="PATH",
        help="With --synthetic, also write the generated image to PATH",
    )
    parser.add_argument("--timing", action="store_true", help="Print encode time per image")
    return parser


def run_synthetic(key: str, params, save_path=None) -> int:
    from engines.pipeline import encode_image
    from utils.image_io import save_image
    from utils.test_images import generate_demo_image
    from utils.timing import Timer

    image = generate_demo_image(key)
    timer = Timer()
    blurhash = timer.measure_encode(encode_image, image, params)

    print(f"Image: {image.shape[1]}x{image.shape[0]} ({key})")
    print(f"Components: {params.components_x}x{params.components_y}")
    print(f"BlurHash:   {blurhash}")
    print(f"Time:       {timer.encode_time_ms:.2f} ms")

    if save_path:
        save_image(image, save_path)
        print(f"\nSaved: {save_path}")
    return 0


def run_files(paths, params, max_workers, timing: bool) -> int:
    from engines.batch import encode_files

    results = encode_files(paths, params, max_workers=max_workers)

    failed = 0
    for result in results:
        if not result.ok:
            failed += 1
            print(f"Error processing {result.path}: {result.error}", file=sys.stderr)
            continue
        line = f"{result.blurhash}  {result.path}"
        if timing:
            line += f"  ({result.width}x{result.height}, {result.encode_time_ms:.2f} ms)"
        print(line)

    return 1 if failed else 0


def main(argv=None) -> int:
    from models.encoding_params import EncodingParams
    from models.errors import ComponentsNumberInvalid

    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        params = EncodingParams(args.components_x, args.components_y)
    except ComponentsNumberInvalid as e:
        parser.error(str(e))

    if args.max_workers is not None and args.max_workers < 1:
        parser.error("--max-workers must be at least 1")

    if args.save and not args.synthetic:
        parser.error("--save requires --synthetic")

    if args.synthetic:
        return run_synthetic(args.synthetic, params, args.save)

    if not args.inputs:
        parser.error("no input images given (or use --synthetic)")

    return run_files(args.inputs, params, args.max_workers, args.timing)


if __name__ == '__main__':
    sys.exit(main())
