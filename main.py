"""
AreaSolver — Entry point.

Solve f(x) = g(x) on the command line and report the enclosed area.
"""

import argparse
import logging

from areasolver import config
from areasolver.result import format_number
from areasolver.session import Session


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Intersections and enclosed area of two functions of x.",
    )
    parser.add_argument("f", nargs="?", help=f"f(x), default '{config.DEFAULT_F}'")
    parser.add_argument("g", nargs="?", help=f"g(x), default '{config.DEFAULT_G}'")
    parser.add_argument("--x", dest="xs", type=float, action="append",
                        help="sample x for the value table (repeatable)")
    parser.add_argument("--from", dest="limit_from", type=float,
                        help="lower integration limit (needs --to)")
    parser.add_argument("--to", dest="limit_to", type=float,
                        help="upper integration limit (needs --from)")
    parser.add_argument("--plot", metavar="PATH", help="save the graph as an image")
    parser.add_argument("--settings", metavar="PATH", help="JSON settings file")
    parser.add_argument("-v", "--verbose", action="store_true")
    return parser


def report(session: Session) -> str:
    lines = [
        f"f(x) = {session.f_expr}",
        f"g(x) = {session.g_expr}",
        "",
        f"{'x':>10}  {'f(x)':>14}  {'g(x)':>14}",
    ]
    for xv, y1, y2 in zip(session.xs, session.ys_f, session.ys_g):
        lines.append(f"{format_number(xv):>10}  {format_number(y1):>14}  {format_number(y2):>14}")
    lines.append("")
    for step in session.steps:
        lines.append(f"  {step['title']}")
        lines.append(f"    {step['content']}")

    area = session.area_result()
    lines.append("")
    lines.append(f"  => Area = {format_number(area['area'])}")
    lines.append(f"     {area['detail']}")
    return "\n".join(lines)


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    settings = config.load_settings(args.settings)
    session = Session(args.f, args.g, args.xs, settings=settings)
    if args.limit_from is not None and args.limit_to is not None:
        session.set_limits(args.limit_from, args.limit_to)

    print(report(session))

    if args.plot:
        from areasolver.graph import build_figure

        fig = build_figure(session.plot_data(), session.f_expr, session.g_expr,
                           session.intersections)
        fig.savefig(args.plot, facecolor=fig.get_facecolor())
        print(f"\nGraph saved to {args.plot}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
