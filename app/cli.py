"""
Command-line interface for PulseBoard batch operations.

Run circuits for a fixed number of ticks and validate circuit files
without the GUI.

Usage::

    python -m cli run circuit.json --ticks 50
    python -m cli run circuit.json --ticks 10 --interval 1000 --trace
    python -m cli run circuit.json --seed 42 --output values.json
    python -m cli validate circuit.json
    python -m cli batch circuits/ --ticks 20
"""

import argparse
import glob
import json
import logging
import sys
from pathlib import Path

from controllers.circuit_controller import CircuitController
from controllers.simulation_controller import SimulationController
from models.circuit import CircuitModel, validate_circuit_data
from models.signal import is_present
from simulation.settings_store import SettingsStore, SimulationSettings

logger = logging.getLogger(__name__)


def try_load_circuit(filepath: str) -> tuple[CircuitModel | None, str]:
    """Load and validate a circuit JSON file without exiting.

    Args:
        filepath: Path to the circuit JSON file.

    Returns:
        (model, "") on success, or (None, error_message) on failure.
    """
    path = Path(filepath)
    if not path.exists():
        return None, f"file not found: {filepath}"

    try:
        with open(path, "r") as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        return None, f"invalid JSON in {filepath}: {e}"

    try:
        validate_circuit_data(data)
    except ValueError as e:
        return None, f"invalid circuit file: {e}"

    return CircuitModel.from_dict(data), ""


def load_circuit(filepath: str) -> CircuitModel:
    """Load and validate a circuit JSON file.

    Raises:
        SystemExit: On file read or validation errors.
    """
    model, error = try_load_circuit(filepath)
    if model is None:
        print(f"Error: {error}", file=sys.stderr)
        sys.exit(1)
    return model


def _json_signal(value):
    """NO_SIGNAL becomes null in JSON output."""
    return value if is_present(value) else None


def snapshot(sim: SimulationController) -> dict:
    """Current value of every component, keyed by ID."""
    return {component_id: _json_signal(sim.get_value(component_id)) for component_id in sim.model.components}


def _settings_for(args: argparse.Namespace) -> SimulationSettings:
    settings_file = getattr(args, "settings", None)
    settings = SettingsStore(Path(settings_file)).settings if settings_file else SimulationSettings()
    if getattr(args, "interval", None) is not None:
        settings.tick_interval_ms = args.interval
    if getattr(args, "seed", None) is not None:
        settings.random_seed = args.seed
    return settings


def simulate(model: CircuitModel, args: argparse.Namespace) -> dict:
    """Run ``args.ticks`` ticks headless and collect the results."""
    settings = _settings_for(args)
    if settings.tick_interval_ms <= 0:
        raise ValueError(f"Tick interval must be positive, got {settings.tick_interval_ms}.")

    sim = SimulationController(model, CircuitController(model), settings)
    trace = []
    for _ in range(args.ticks):
        sim.step()
        if args.trace:
            trace.append({"tick": sim.tick_count, "values": snapshot(sim)})
    logger.info("Ran %d ticks over %d components", sim.tick_count, len(model.components))

    output = {
        "ticks": sim.tick_count,
        "elapsed_ms": sim.elapsed_ms,
        "values": snapshot(sim),
    }
    if args.trace:
        output["trace"] = trace
    return output


def cmd_run(args: argparse.Namespace) -> int:
    """Run a circuit for a number of ticks and print the final values."""
    model = load_circuit(args.circuit)
    try:
        output = simulate(model, args)
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    output_text = json.dumps(output, indent=2, default=str)
    if args.output:
        Path(args.output).write_text(output_text)
        print(f"Results written to {args.output}", file=sys.stderr)
    else:
        print(output_text)
    return 0


def cmd_validate(args: argparse.Namespace) -> int:
    """Validate a circuit file without running it."""
    model, error = try_load_circuit(args.circuit)
    if model is None:
        print(f"Circuit has errors: {args.circuit}", file=sys.stderr)
        print(f"  - {error}", file=sys.stderr)
        return 1

    print(f"Circuit is valid: {args.circuit}")
    print(f"  {len(model.components)} components, {len(model.wires)} wires")
    return 0


def cmd_batch(args: argparse.Namespace) -> int:
    """Run every circuit file in a directory or glob pattern."""
    pattern = args.path
    path = Path(pattern)
    if path.is_dir():
        files = sorted(path.glob("*.json"))
    elif "*" in pattern or "?" in pattern:
        files = sorted(Path(p) for p in glob.glob(pattern))
    else:
        print(f"Error: {pattern} is not a directory or glob pattern", file=sys.stderr)
        return 1

    if not files:
        print(f"No .json circuit files found matching: {pattern}", file=sys.stderr)
        return 1

    output_dir = None
    if args.output_dir:
        output_dir = Path(args.output_dir)
        output_dir.mkdir(parents=True, exist_ok=True)

    results_summary = []
    any_failed = False

    for filepath in files:
        model, error = try_load_circuit(str(filepath))
        if model is None:
            results_summary.append({"file": filepath.name, "status": "LOAD_ERROR", "error": error})
            any_failed = True
            if args.fail_fast:
                break
            continue

        try:
            output = simulate(model, args)
        except ValueError as e:
            results_summary.append({"file": filepath.name, "status": "FAIL", "error": str(e)})
            any_failed = True
            if args.fail_fast:
                break
            continue

        results_summary.append({"file": filepath.name, "status": "OK", "details": f"{output['ticks']} ticks"})
        if output_dir:
            out_path = output_dir / f"{filepath.stem}.json"
            out_path.write_text(json.dumps(output, indent=2, default=str))

    print(f"\n{'File':<40} {'Status':<12} {'Details'}")
    print("-" * 70)
    for entry in results_summary:
        details = entry.get("details", entry.get("error", ""))
        print(f"{entry['file']:<40} {entry['status']:<12} {details}")

    total = len(results_summary)
    passed = sum(1 for e in results_summary if e["status"] == "OK")
    print(f"\n{passed}/{total} succeeded, {total - passed} failed")

    return 1 if any_failed else 0


def _non_negative_int(text: str) -> int:
    value = int(text)
    if value < 0:
        raise argparse.ArgumentTypeError(f"must not be negative: {value}")
    return value


def _add_run_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--ticks", "-n", type=int, default=10, help="Number of ticks to run (default: 10)")
    parser.add_argument("--interval", type=float, help="Tick interval in milliseconds of simulated time")
    parser.add_argument("--seed", type=_non_negative_int, help="Seed for Random components")
    parser.add_argument("--settings", help="Path to a simulation settings JSON file")
    parser.add_argument("--trace", action="store_true", help="Include the values after every tick")


def build_parser() -> argparse.ArgumentParser:
    """Build the CLI argument parser."""
    parser = argparse.ArgumentParser(
        prog="pulseboard-cli",
        description="PulseBoard batch operations: run and validate circuits from the command line.",
    )
    parser.add_argument("--verbose", "-v", action="store_true", help="Log simulation events to stderr")
    subparsers = parser.add_subparsers(dest="command", required=True)

    # run
    run_parser = subparsers.add_parser("run", help="Run a circuit and output component values")
    run_parser.add_argument("circuit", help="Path to circuit JSON file")
    run_parser.add_argument("--output", "-o", help="Write results to file instead of stdout")
    _add_run_arguments(run_parser)

    # validate
    val_parser = subparsers.add_parser("validate", help="Check a circuit file for errors without running it")
    val_parser.add_argument("circuit", help="Path to circuit JSON file")

    # batch
    batch_parser = subparsers.add_parser("batch", help="Run multiple circuit files")
    batch_parser.add_argument("path", help="Directory or glob pattern matching circuit JSON files")
    batch_parser.add_argument("--output-dir", help="Write per-file results to this directory")
    batch_parser.add_argument("--fail-fast", action="store_true", help="Stop on first error")
    _add_run_arguments(batch_parser)

    return parser


def main(argv=None) -> int:
    """CLI entry point. Returns exit code."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")

    handlers = {
        "run": cmd_run,
        "validate": cmd_validate,
        "batch": cmd_batch,
    }

    handler = handlers.get(args.command)
    if handler is None:
        parser.print_help()
        return 1

    if getattr(args, "ticks", 0) < 0:
        print("Error: --ticks must not be negative", file=sys.stderr)
        return 1

    return handler(args)


if __name__ == "__main__":
    sys.exit(main())
