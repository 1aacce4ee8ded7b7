# cube_core/cli.py
import argparse
import logging
from datetime import datetime
from pathlib import Path

from tqdm import tqdm

from .config import Config
from .io import load_sequences, save_results
from .notation import sequence_to_string, string_to_sequence
from .orchestrator import CubeSession
from .scramble import PRACTICE_PROFILES, ScrambleGenerator
from .sim.cube_state import CubeState
from .solver import HeuristicSolver

logger = logging.getLogger(__name__)


def setup_logging(level: str = "INFO", log_file: Path | None = None):
    handlers = [logging.StreamHandler()]
    if log_file:
        handlers.append(logging.FileHandler(log_file, encoding="utf-8"))
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s - %(levelname)s - %(name)s - %(message)s",
        handlers=handlers,
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="3x3 cube engine: scrambles and heuristic solves")

    # logging
    parser.add_argument("--log", default="WARNING", choices=["DEBUG","INFO","WARNING","ERROR","CRITICAL"])
    parser.add_argument("--log-file", type=Path)
    parser.add_argument("--quiet", action="store_true")
    parser.add_argument("--seed", type=int, default=None)

    sub = parser.add_subparsers(dest="command", required=True)

    p_scr = sub.add_parser("scramble", help="Generate scrambles")
    p_scr.add_argument("--difficulty", default="medium", choices=["easy","medium","hard"])
    p_scr.add_argument("--length", "-l", type=int, default=None)
    p_scr.add_argument("--kind", choices=sorted(PRACTICE_PROFILES), default=None,
                       help="Practice scramble instead of a random-state one.")
    p_scr.add_argument("--count", "-n", type=int, default=1)

    p_val = sub.add_parser("validate", help="Check a scramble against the notation and adjacency rules")
    p_val.add_argument("moves", nargs="*", help="Moves, e.g. R U R' U'")
    p_val.add_argument("--file", type=Path, help="JSON or text file of sequences")

    p_sol = sub.add_parser("solve", help="Scramble (or apply given moves) and propose a solution")
    p_sol.add_argument("--scramble", type=str, default=None, help="Space separated moves to apply first")
    p_sol.add_argument("--difficulty", default="medium", choices=["easy","medium","hard"])
    p_sol.add_argument("--show-net", action="store_true")

    p_bench = sub.add_parser("bench", help="Scramble, solve and replay many cubes")
    p_bench.add_argument("--samples", "-n", type=int, default=100)
    p_bench.add_argument("--difficulty", default="medium", choices=["easy","medium","hard"])
    p_bench.add_argument("--scrambles", type=Path, default=None, help="Use sequences from this file")
    p_bench.add_argument("--results", type=Path, default=Path("results"))

    return parser


def cmd_scramble(args, config: Config) -> int:
    gen = ScrambleGenerator(config=config)
    for _ in range(args.count):
        if args.kind:
            moves = gen.generate_special_scramble(args.kind)
        else:
            moves = gen.generate_scramble(args.length, args.difficulty)
        print(sequence_to_string(moves))
    return 0


def cmd_validate(args, config: Config) -> int:
    gen = ScrambleGenerator(config=config)
    sequences = load_sequences(args.file) if args.file else [string_to_sequence(" ".join(args.moves))]
    status = 0
    for seq in sequences:
        result = gen.validate_scramble(seq)
        if result.is_valid:
            print(f"OK    {sequence_to_string(seq)}")
        else:
            status = 1
            print(f"FAIL  {sequence_to_string(seq)}")
            for err in result.errors:
                print(f"      {err}")
    return status


def cmd_solve(args, config: Config) -> int:
    session = CubeSession(config=config)
    if args.scramble:
        moves = string_to_sequence(args.scramble)
        check = session.scrambler.validate_scramble(moves)
        if not check.is_valid:
            logger.warning("Applying scramble with rule violations: %s", check.errors)
        session.apply_scramble(moves)
    else:
        session.scramble(difficulty=args.difficulty)

    print(f"Scramble: {sequence_to_string(session.current_scramble)}")
    if args.show_net:
        print(session.cube)

    event = session.request_solution()
    if event is None:
        print("Cube is already complete; nothing to solve.")
        return 0

    outcome = session.playback.outcome
    print(f"Solution ({outcome.kind}, {len(outcome.moves)} moves): {sequence_to_string(outcome.moves)}")
    session.play_solution()
    print(f"Solved after playback: {session.cube.is_completed}")
    if args.show_net:
        print(session.cube)
    return 0


def cmd_bench(args, config: Config) -> int:
    gen = ScrambleGenerator(config=config)
    solver = HeuristicSolver(gen.rng, config)

    if args.scrambles:
        scrambles = load_sequences(args.scrambles)
    else:
        scrambles = [gen.generate_scramble(None, args.difficulty) for _ in range(args.samples)]

    kinds = {"solved": 0, "partial": 0, "fallback": 0}
    solved_bits = []
    lengths = []

    for seq in tqdm(scrambles, desc="Heuristic solve bench"):
        cube = CubeState()
        cube.apply_sequence(seq)
        outcome = solver.solve_detailed(cube)
        kinds[outcome.kind] = kinds.get(outcome.kind, 0) + 1

        cube.apply_sequence(outcome.moves)
        solved_bits.append(int(cube.check_completed()))
        lengths.append(len(outcome.moves))

    n = len(scrambles)
    solve_rate = (sum(solved_bits) / n) if n else 0.0
    mean_len = (sum(lengths) / n) if n else 0.0
    logger.info("Bench: n=%d solve_rate=%.3f mean_len=%.1f kinds=%s", n, solve_rate, mean_len, kinds)

    save_results(
        config.results_dir / "solver_bench.json",
        {
            "timestamp": datetime.now().isoformat(),
            "difficulty": args.difficulty,
            "num_samples": n,
            "seed": config.seed,
            "solve_rate": solve_rate,
            "mean_solution_length": mean_len,
            "outcomes": kinds,
        },
    )

    if not args.quiet:
        print(f"✅ Finished: n={n} solve_rate={solve_rate:.3f} mean_len={mean_len:.1f} → results in {config.results_dir}")
    return 0


COMMANDS = {
    "scramble": cmd_scramble,
    "validate": cmd_validate,
    "solve": cmd_solve,
    "bench": cmd_bench,
}


def main(argv=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    setup_logging(args.log, args.log_file)

    config = Config(seed=args.seed)
    if getattr(args, "results", None):
        config.results_dir = args.results

    try:
        return COMMANDS[args.command](args, config)
    except Exception:
        logging.exception("An error occurred while running %s", args.command)
        raise


if __name__ == "__main__":
    raise SystemExit(main())
