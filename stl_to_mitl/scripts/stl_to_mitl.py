import argparse
import sys

from stl_to_mitl.scripts.stl.stl_parser import STLParser
from stl_to_mitl.scripts.stl.stl_to_boolean import STLAtomicPropositionsToBoolean
from stl_to_mitl.scripts.signal.signal_synthesizer import synthesize_signal
from stl_to_mitl.scripts.signal.stable_partitions import construct_stable_partitions
from stl_to_mitl.scripts.mitl.temporal_partitioner import partition_temporal_operators
from stl_to_mitl.scripts.visualization.signal_plotter import SignalPlotter
from stl_to_mitl.scripts.utils.utils import write_mitl_to_file, read_line, read_token, format_time


def run_stl_to_mitl(stl_formula, horizon=30., sample_time=0.1, verbose=True):
    """
    Convert an STL formula into a partitioned MITL formula, printing every step.

    Args:
        stl_formula (str): STL formula. Example: "G [0, 20] ((y < 2) U (z > 1))"
        horizon (float): Time horizon of the synthesized signal.
        sample_time (float): Sampling period of the synthesized signal.
        verbose (bool): Print every sample of the synthesized signal.

    Returns:
        tuple: Partitioned MITL formula, synthesized signal and partition points.
    """
    # Step 1: Extract atomic propositions
    atomic_propositions = STLParser(formula=stl_formula).get_atomic_propositions()
    print("\nStep 1: Extracted atomic propositions:")
    for proposition in atomic_propositions:
        print(f"- {proposition}")

    # Step 2: Map atomic propositions to Boolean variables
    converter = STLAtomicPropositionsToBoolean(atomic_propositions)
    print("\nStep 2: Mapped atomic propositions to Boolean variables:")
    for proposition, name in converter.get_map().items():
        print(f"- {proposition} -> {name}")

    # Step 3: Synthesize a signal
    signal = synthesize_signal(horizon=horizon, sample_time=sample_time)
    print("\nStep 3: Synthesized signal behavior:")
    if verbose:
        labels = ", ".join(signal.labels)
        for t, value in signal:
            bits = ", ".join(str(int(v)) for v in value)
            print(f"t = {format_time(t)}, ({labels}) = ({bits})")
    else:
        print(f"{len(signal)} samples over [0, {format_time(horizon)}]")

    # Step 4: Construct stable partitions
    partition_points = construct_stable_partitions(signal)
    print("\nStep 4: Constructed stable partitions:")
    for t in partition_points:
        print(f"Partition point: {t}")

    # Step 5: Replace atomic propositions in the STL formula
    mitl_formula = converter.to_mitl(stl_formula)
    print("\nStep 5: Replaced atomic propositions in the STL formula:")
    print(f"STL Formula: {stl_formula}")
    print(f"MITL Formula (before partitioning): {mitl_formula}")

    # Step 6: Partition temporal operators
    mitl_formula = partition_temporal_operators(mitl_formula, partition_points)
    print("\nStep 6: Partitioned temporal operators in the MITL formula:")
    print(f"MITL Formula (after partitioning): {mitl_formula}")

    return mitl_formula, signal, partition_points


def print_relevant_info(args):
    """
    Print all relevant information for the conversion.

    Args:
        args (object): Arguments object for the conversion.
    """
    print("\n=====================================")
    print("STL to MITL with Stable Partitions")
    print("=====================================")
    print(f"Horizon: {format_time(args.horizon)}")
    print(f"Sample time: {format_time(args.sample_time)}")
    print(f"Plot: {args.plot}")
    if args.save_plots:
        print(f"Plots folder: {args.plots_folder}")
    print("=====================================\n")


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Convert an STL formula into a partitioned MITL formula")
    parser.add_argument('--stl_formula', '-stl', type=str, help="STL formula. Example: G [0, 20] ((y < 2) U (z > 1)). Read from stdin if not given", default=None, required=False)
    parser.add_argument('--filename', '-f', type=str, help="Output filename, .mitl is appended if missing. Read from stdin if not given", default=None, required=False)
    parser.add_argument('--horizon', '-T', type=float, help="Time horizon of the synthesized signal", default=30.0, required=False)
    parser.add_argument('--sample_time', '-dt', type=float, help="Sampling period of the synthesized signal", default=0.1, required=False)
    parser.add_argument('--plot', '-p', action='store_true', help="Plot the synthesized signal and its partition points", required=False)
    parser.add_argument('--save_plots', '-s', action='store_true', help="Save the plot instead of showing it", required=False)
    parser.add_argument('--plots_folder', type=str, help="Folder for saved plots", default="./plots", required=False)
    parser.add_argument('--quiet', '-q', action='store_true', help="Do not print every signal sample", required=False)
    return parser.parse_args(argv)


def main(argv=None):
    args = parse_args(argv)

    # Print all relevant information for the conversion
    print_relevant_info(args)

    if args.stl_formula is not None:
        stl_formula = args.stl_formula
        print(f"Enter the STL formula: {stl_formula}")
    else:
        stl_formula = read_line("Enter the STL formula: ")

    mitl_formula, signal, partition_points = run_stl_to_mitl(stl_formula, horizon=args.horizon,
                                                             sample_time=args.sample_time,
                                                             verbose=not args.quiet)

    if args.plot:
        plotter = SignalPlotter(show_plots=not args.save_plots, save_plots=args.save_plots,
                                plots_folder=args.plots_folder)
        plotter.forward(signal, partition_points)
        plotter.close()

    # Step 7: Write the MITL formula to a .mitl file
    prompt = "\nStep 7: Enter the filename to save the MITL formula (e.g., output): "
    if args.filename is not None:
        tokens = args.filename.split()
        filename = tokens[0] if tokens else None
        print(f"{prompt}{args.filename}")
    else:
        filename = read_token(prompt)
        print()

    if filename is None:
        print("Error: No filename provided", file=sys.stderr)
    else:
        write_mitl_to_file(mitl_formula, filename)

    return 0


if __name__ == "__main__":
    main()
