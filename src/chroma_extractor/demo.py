# src/chroma_extractor/demo.py
import argparse
import asyncio
import json
import logging
import sys


async def _extract_all(image: str, encoding: str, debug: bool) -> dict:
    from .extraction.orchestrator import ChromaExtractor

    extractor = ChromaExtractor(debug=debug)
    extractor.request_prominent(image, encoding)
    extractor.request_average(image, encoding)
    extractor.request_palette(image, encoding)
    await extractor.drain()

    failed = {
        kind.value: repr(status.error)
        for kind, status in extractor.status.items()
        if status.error is not None
    }
    return {**extractor.state.as_dict(), "errors": failed}


def main(argv: list[str] | None = None) -> int:
    """CLI demo: extract prominent, average and palette colors from one image."""
    parser = argparse.ArgumentParser(
        prog="chroma-demo",
        description="Extract prominent, average and palette colors from an image.",
    )
    parser.add_argument("image", help="Path to the image file")
    parser.add_argument(
        "--encoding",
        default="hex",
        help="Output encoding: 'hex' (default) or 'rgb'",
    )
    parser.add_argument("--debug", action="store_true", help="Verbose debug logs")

    args = parser.parse_args(argv)

    # Load env only at runtime (no import side effects)
    from dotenv import load_dotenv

    load_dotenv()
    logging.basicConfig(
        level=logging.DEBUG if args.debug else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    result = asyncio.run(_extract_all(args.image, args.encoding, args.debug))
    print("\n🎨 Chroma Extraction Result:\n")
    print(json.dumps(result, indent=2, ensure_ascii=False))
    if result["errors"]:
        print(f"❌ Error: {len(result['errors'])} extraction(s) failed", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
