"""主程序入口 - 表达式求值、函数采样和单位换算"""
import argparse
import logging
import sys

from config.config import ENGINE_CONFIG, GRAPH_CONFIG, validate_config
from core import Calculator, EngineConfig, is_error
from plotting import CurveSampler, Viewport
from converter import convert

# 设置日志
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)


def parse_scope(assignments):
    """['x=1', 'y=2.5'] -> {'x': 1.0, 'y': 2.5}"""
    scope = {}
    for item in assignments or []:
        name, sep, value = item.partition('=')
        if not sep or not name.strip():
            raise ValueError(f"Invalid variable binding '{item}', expected NAME=VALUE")
        scope[name.strip()] = float(value)
    return scope


def format_result(value):
    if is_error(value):
        return "Error"
    if float(value).is_integer():
        return str(int(value))
    return repr(value)


def run_expressions(calc, expressions, scope):
    results = []
    for expression in expressions:
        value = calc.evaluate(expression, scope)
        print(f"{expression} = {format_result(value)}")
        results.append(value)
    return results


def run_plot(calc, args):
    viewport = Viewport(width=args.width, height=args.height, scale=args.scale)
    sampler = CurveSampler(calculator=calc, viewport=viewport)
    frame = sampler.sample_frame(args.plot)
    valid = frame[frame['segment'] >= 0]
    n_segments = int(valid['segment'].nunique())
    logger.info(f"Plotted '{args.plot}' on {viewport}")
    print(f"{args.plot}: {len(valid)} of {len(frame)} columns drawn in {n_segments} segment(s)")
    if args.output_path:
        frame.to_csv(args.output_path, index=False)
        logger.info(f"Samples saved to {args.output_path}")
    return frame


def main(args):
    validate_config()

    cfg = dict(ENGINE_CONFIG)
    if args.angle_mode:
        cfg['angle_mode'] = args.angle_mode
    calc = Calculator(config=EngineConfig.from_dict(cfg), history_limit=cfg.get('history_limit'))

    scope = parse_scope(args.var)
    run_expressions(calc, args.expressions, scope)

    if args.plot:
        run_plot(calc, args)

    if args.convert:
        value, category, from_unit, to_unit = args.convert
        result = convert(float(value), category, from_unit, to_unit)
        print(f"{value} {from_unit} = {result} {to_unit}")

    if args.show_history:
        history = calc.history_frame()
        if history.empty:
            print("(no history)")
        else:
            print(history.to_string(index=False))

    return calc


def build_parser():
    parser = argparse.ArgumentParser(description="Scientific calculator expression engine")
    parser.add_argument(
        "expressions",
        nargs="*",
        help="Expressions to evaluate, in order"
    )
    parser.add_argument(
        "--angle_mode",
        choices=["deg", "rad"],
        default=None,
        help="Angle mode for trigonometric functions (default from config)"
    )
    parser.add_argument(
        "--var",
        action="append",
        metavar="NAME=VALUE",
        help="Bind a variable for evaluation (repeatable); bound evaluations are not recorded in history"
    )
    parser.add_argument(
        "--plot",
        type=str,
        default=None,
        help="Sample a function of x, e.g. 'y = x^2'"
    )
    parser.add_argument(
        "--width",
        type=int,
        default=GRAPH_CONFIG["width"],
        help="Viewport width in pixels"
    )
    parser.add_argument(
        "--height",
        type=int,
        default=GRAPH_CONFIG["height"],
        help="Viewport height in pixels"
    )
    parser.add_argument(
        "--scale",
        type=float,
        default=GRAPH_CONFIG["scale"],
        help="Pixels per unit"
    )
    parser.add_argument(
        "--output_path",
        type=str,
        default=None,
        help="Path to save plot samples as CSV"
    )
    parser.add_argument(
        "--convert",
        nargs=4,
        metavar=("VALUE", "CATEGORY", "FROM", "TO"),
        help="Convert a value between units, e.g. --convert 1 length km mi"
    )
    parser.add_argument(
        "--show_history",
        action="store_true",
        help="Print the evaluation history at the end"
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable debug logging"
    )
    return parser


if __name__ == "__main__":
    args = build_parser().parse_args()
    if args.verbose:
        logging.getLogger().setLevel(logging.DEBUG)
    try:
        main(args)
    except ValueError as e:
        logger.error(str(e))
        sys.exit(1)
