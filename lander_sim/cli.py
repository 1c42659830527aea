"""
Mars Lander Simulation - CLI

The single entry point for running a scenario, printing the summary and
generating telemetry plots.
"""

import argparse
import logging
import os
import sys

from .config import SimulationConfig
from .main import run_simulation
from .plotting import generate_all_plots
from .scenarios import SCENARIOS, get_scenario

logger = logging.getLogger(__name__)


def _scenario_arg(value: str):
    return int(value) if value.isdigit() else value


def parse_args(argv=None):
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        description="Mars Lander Descent Simulation",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter
    )
    parser.add_argument(
        "--scenario", "-s",
        type=_scenario_arg,
        default=1,
        help="Scenario index or name (see --list)"
    )
    parser.add_argument(
        "--list",
        action="store_true",
        help="List the available scenarios and exit"
    )
    parser.add_argument(
        "--dt",
        type=float,
        default=None,
        help="Time step in seconds (default: scenario's own)"
    )
    parser.add_argument(
        "--max-time",
        type=float,
        default=2000.0,
        help="Maximum simulated time in seconds"
    )
    parser.add_argument(
        "--method",
        choices=["verlet", "euler"],
        default="verlet",
        help="Integration method"
    )
    parser.add_argument(
        "--output-dir", "-o",
        type=str,
        default="plots",
        help="Directory to save output plots"
    )
    parser.add_argument(
        "--quiet", "-q",
        action="store_true",
        help="Suppress verbose output"
    )
    parser.add_argument(
        "--no-plots",
        action="store_true",
        help="Skip plot generation"
    )
    return parser.parse_args(argv)


def main(argv=None):
    """Main execution flow."""
    args = parse_args(argv)

    logging.basicConfig(
        level=logging.WARNING if args.quiet else logging.INFO,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )

    if args.list:
        for index, scenario in enumerate(SCENARIOS):
            print(f"{index}: {scenario.name:<20} {scenario.description}")
        return 0

    try:
        scenario = get_scenario(args.scenario)
        config = SimulationConfig(
            dt=args.dt,
            max_time=args.max_time,
            integration_method=args.method,
            verbose=not args.quiet,
        )

        logger.info(f"Starting scenario '{scenario.name}'")
        final_state, log, reason = run_simulation(scenario, config=config)

        print("\n" + "=" * 60)
        print("SIMULATION SUMMARY")
        print("=" * 60)
        print(f"Scenario: {scenario.description}")
        print(f"Termination reason: {reason}")
        print(f"Final time: {final_state.t:.2f} s")
        print(f"Final altitude: {final_state.altitude:.2f} m")
        print(f"Final radial velocity: {final_state.radial_velocity:.2f} m/s")
        print("=" * 60 + "\n")

        if not args.no_plots and len(log.time) > 0:
            if os.path.isabs(args.output_dir):
                plot_dir = args.output_dir
            else:
                plot_dir = os.path.join(os.getcwd(), args.output_dir)

            logger.info(f"Generating plots in {plot_dir}")
            paths = generate_all_plots(log, plot_dir)
            print(f">> Wrote {len(paths)} plots to: {plot_dir}")

    except Exception as e:
        logger.error(f"Simulation failed: {e}", exc_info=True)
        print(f"\n[ERROR] Simulation failed: {e}")
        sys.exit(1)

    return 0


if __name__ == "__main__":
    main()
