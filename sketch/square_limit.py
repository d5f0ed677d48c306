"""
どこで: `sketch/square_limit.py`。
何を: George の square_limit を SVG/PNG に書き出すスケッチ。
なぜ: Picture 代数の動作確認用の最小エントリポイントとして利用するため。
"""

import argparse
import logging

from escher import Export, beside, below, corner_split, flip_horiz, square_limit
from escher.api import default_output_path
from escher.core.runtime_config import check_depth_budget
from escher.core.shapes import box, george

_logger = logging.getLogger(__name__)

PICTURES = {
    "square_limit": lambda n: square_limit(george, n),
    "corner_split": lambda n: corner_split(george, n),
    "mirrored": lambda n: beside(below(george, george), flip_horiz(below(george, box))),
}


def main() -> None:
    parser = argparse.ArgumentParser(description="escher sketch")
    parser.add_argument("name", nargs="?", default="square_limit", choices=sorted(PICTURES))
    parser.add_argument("-n", "--depth", type=int, default=4)
    parser.add_argument("--fmt", default="svg", choices=["svg", "png"])
    args = parser.parse_args()

    logging.basicConfig(level=logging.INFO, format="%(asctime)s [%(levelname)s] %(name)s: %(message)s")
    depth = check_depth_budget(args.depth)
    picture = PICTURES[args.name](depth)
    out = default_output_path(args.name, args.fmt)
    Export(picture, args.fmt, out)
    _logger.info("wrote %s", out)


if __name__ == "__main__":
    main()
