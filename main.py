from __future__ import annotations

import argparse

from api import run


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="midpoint ellipse / circle rasterizer demo")
    parser.add_argument("--split", action="store_true", help="左に楕円、右に円を並べて描画")
    parser.add_argument("--fps", type=int, default=None)
    parser.add_argument("--rx", type=float, default=None)
    parser.add_argument("--ry", type=float, default=None)
    args = parser.parse_args(argv)

    radii = None
    if args.rx is not None or args.ry is not None:
        radii = (
            args.rx if args.rx is not None else 200.0,
            args.ry if args.ry is not None else 100.0,
        )
    run(layout="split" if args.split else None, fps=args.fps, radii=radii)


if __name__ == "__main__":
    main()
