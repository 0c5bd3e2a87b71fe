"""Command-line runner for scenario files.

Usage::

    python -m fuelcalc.run_scenario --config path/to/scenario.cfg [--log-folder logs] [--plot]

Runs the scenario, prints a summary and, when a log folder is configured,
writes the results to Parquet.
"""
import argparse
from typing import Union

from fuelcalc.exceptions import FuelCalcError
from fuelcalc.fuel_simulator.diurnal import run_24_hour_simulation
from fuelcalc.fuel_simulator.multi_day import run_multi_day_simulation
from fuelcalc.utilities.data_classes import DiurnalResults, MultiDayResults, ScenarioParams
from fuelcalc.utilities.logger import SimulationLogger
from fuelcalc.utilities.sim_input import load_scenario_params
from fuelcalc.visualization_tool import plot_24_hour, plot_multi_day


def run_scenario(params: ScenarioParams,
                 logger: SimulationLogger = None) -> Union[MultiDayResults, DiurnalResults]:
    """Run a parsed scenario, logging its results if 'logger' is given."""
    if logger is not None:
        logger.log_metadata(params)
        logger.start_new_run()

    try:
        if params.scenario_type == "multi_day":
            md = params.multi_day
            results = run_multi_day_simulation(md.initial_1hr, md.initial_10hr, md.steps)
            if logger is not None:
                logger.log_multi_day(results)
        else:
            d = params.diurnal
            results = run_24_hour_simulation(d.day_temp_f, d.day_min_rh, d.night_temp_f,
                                             d.night_max_rh, d.rain_in, d.wind_mph, d.fuel)
            if logger is not None:
                logger.log_24_hour(results, d.fuel)

        if logger is not None:
            logger.log_message(f"Completed {params.scenario_type} scenario '{params.label}'")

    except FuelCalcError as e:
        if logger is not None:
            logger.log_message(f"Scenario failed: {e}")
        raise

    finally:
        if logger is not None:
            logger.finish()

    return results


def format_summary(results: Union[MultiDayResults, DiurnalResults]) -> str:
    lines = []

    if isinstance(results, MultiDayResults):
        lines.append(f"{'Day':<12}{'Temp F':>8}{'RH %':>8}{'EMC %':>8}{'1-hr %':>8}{'10-hr %':>9}")
        for d in results.daily_results:
            lines.append(f"{d.day:<12}{d.temp_f:>8.0f}{d.rel_humidity:>8.0f}{d.emc:>8.1f}"
                         f"{d.moisture_1hr:>8.1f}{d.moisture_10hr:>9.1f}")

        s = results.summary
        if s.first_critical_day is not None:
            lines.append(f"Critical drying detected first on {s.first_critical_day}")
        else:
            lines.append("No critical drying in forecast")
        lines.append(f"Final 1-hr: {s.final_1hr:.1f}%  Final 10-hr: {s.final_10hr:.1f}%")

    else:
        s = results.summary
        lines.append(f"Fuel: {s.fuel_name}")
        lines.append(f"Driest hour: {s.min_m1_hour} ({s.min_m1_value:.1f}% 1-hr)")
        lines.append(f"Peak ROS: {s.max_ros_ch_h:.2f} ch/h ({s.max_ros_ft_min:.2f} ft/min)")
        lines.append(f"End of day 1-hr: {s.end_of_day_m1:.1f}%  End of 24 h 1-hr: {s.end_of_24h_m1:.1f}%")

    return "\n".join(lines)


def main(argv=None):
    parser = argparse.ArgumentParser(description="Run a fuel moisture scenario")
    parser.add_argument("--config", type=str, help="Path to .cfg file")
    parser.add_argument("--log-folder", type=str, default=None,
                        help="Write Parquet logs here (overrides [Output] log_folder)")
    parser.add_argument("--plot", action="store_true", help="Show drying curve plot")

    args = parser.parse_args(argv)

    if not args.config:
        parser.error("No configuration file provided. Use --config to specify a .cfg file.")

    print(f"Loading scenario params from {args.config}...")
    params = load_scenario_params(args.config)

    log_folder = args.log_folder or params.log_folder
    logger = SimulationLogger(log_folder) if log_folder else None

    results = run_scenario(params, logger)

    print(format_summary(results))

    if logger is not None:
        print(f"Logs written to {logger.session_folder}")

    if args.plot or params.plot:
        if isinstance(results, MultiDayResults):
            plot_multi_day(results, title=params.label or "Dead Fuel Moisture Forecast")
        else:
            plot_24_hour(results, title=params.label or "24-Hour Drying Cycle")

    return results


if __name__ == "__main__":
    main()
