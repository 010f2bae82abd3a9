"""Main entry point for the pack allocator"""
import argparse
import sys
from typing import Dict, Any, List, Optional
from pack_allocator.config import DEFAULT_PACK_SIZES, HOST, OUTPUT_FILE, PORT, Settings
from pack_allocator.io import InputError, ResultSaver, extract_order_qty, extract_pack_sizes
from pack_allocator.allocation import ShipmentEngine
from pack_allocator.models import ShipmentPlan
from pack_allocator.utils import format_packs


class OutputFormatter:
    """Formats and displays shipment results"""

    @staticmethod
    def print_results(plan: ShipmentPlan, complete_output: Dict[str, Any]):
        """Pretty print shipment results"""
        print("\n" + "="*60)
        print("📦 SHIPMENT PLAN")
        print("="*60)

        OutputFormatter._print_order(complete_output['order'])
        OutputFormatter._print_packs(plan)
        OutputFormatter._print_metrics(complete_output['metrics'])
        OutputFormatter._print_validation_issues(complete_output['validation_issues'])

        print("\n" + "="*60)

    @staticmethod
    def _print_order(order: Dict[str, Any]):
        print(f"\n🧾 ORDER:")
        print(f"   Items Ordered: {order['order_qty']}")
        print(f"   Pack Sizes: {', '.join(str(s) for s in order['pack_sizes'])}")

    @staticmethod
    def _print_packs(plan: ShipmentPlan):
        print(f"\n📦 PACKS ({format_packs(plan.packs)}):")
        print("-"*60)
        for size, count in sorted(plan.items(), reverse=True):
            print(f"   {count:>6} x {size:<8} = {count * size}")

    @staticmethod
    def _print_metrics(metrics: Dict[str, Any]):
        print(f"\n📊 METRICS:")
        print(f"   Total Shipped: {metrics['total_shipped']}")
        print(f"   Surplus: {metrics['surplus']}")
        print(f"   Total Packs: {metrics['total_packs']}")
        print(f"   Fill Rate: {metrics['fill_rate']:.1%}")

    @staticmethod
    def _print_validation_issues(issues: List[str]):
        if issues:
            print(f"\n❌ VALIDATION ISSUES ({len(issues)}):")
            print("-"*60)
            for issue in issues:
                print(f"   • {issue}")
        else:
            print(f"\n✅ No validation issues found!")


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='pack-allocator',
        description="Work out which whole packs to ship for an order"
    )
    commands = parser.add_subparsers(dest='command', required=True)

    calculate = commands.add_parser('calculate', help="Print the shipment plan for one order")
    calculate.add_argument('--order-qty', required=True, help="Number of items ordered")
    calculate.add_argument('--pack-sizes', default=DEFAULT_PACK_SIZES,
                           help="Comma-separated pack sizes (default: %(default)s)")
    calculate.add_argument('--output', nargs='?', const=OUTPUT_FILE, default=None,
                           help="Also save the complete result as JSON (default file: %(const)s)")

    serve = commands.add_parser('serve', help="Run the HTTP API")
    serve.add_argument('--host', default=HOST)
    serve.add_argument('--port', type=int, default=PORT)

    return parser


def calculate(order_qty_str: str, pack_sizes_str: str, output_file: Optional[str] = None) -> int:
    """Allocate one order and print the result"""
    try:
        order_qty = extract_order_qty(order_qty_str)
        pack_sizes = extract_pack_sizes(pack_sizes_str)
    except InputError as e:
        print(f"❌ {e.message}", file=sys.stderr)
        return 2

    engine = ShipmentEngine(pack_sizes)
    plan = engine.allocate(order_qty)
    complete_output = engine.build_complete_output(plan)

    OutputFormatter.print_results(plan, complete_output)

    if output_file:
        ResultSaver().save_final_results(complete_output, output_file)

    return 0


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point"""
    args = build_arg_parser().parse_args(argv)

    if args.command == 'calculate':
        return calculate(args.order_qty, args.pack_sizes, args.output)

    from pack_allocator.server import configure_logging, serve
    settings = Settings(host=args.host, port=args.port)
    configure_logging(settings.log_level)
    serve(settings)
    return 0


if __name__ == "__main__":
    sys.exit(main())
