from __future__ import annotations

import json

from cube_core.cli import build_parser, main


def test_parser_requires_a_command():
    args = build_parser().parse_args(["--seed", "3", "scramble", "--difficulty", "hard"])
    assert args.command == "scramble"
    assert args.seed == 3
    assert args.count == 1


def test_scramble_command_prints_one_line_per_scramble(capsys):
    assert main(["--seed", "1", "scramble", "-n", "2", "--difficulty", "easy"]) == 0
    lines = capsys.readouterr().out.strip().splitlines()
    assert len(lines) == 2
    assert all(len(line.split()) == 12 for line in lines)


def test_scramble_command_is_reproducible_with_a_seed(capsys):
    main(["--seed", "5", "scramble"])
    first = capsys.readouterr().out
    main(["--seed", "5", "scramble"])
    assert capsys.readouterr().out == first


def test_validate_command_exit_codes(capsys):
    assert main(["validate", "R", "U", "R'"]) == 0
    assert "OK" in capsys.readouterr().out

    assert main(["validate", "R", "R'"]) == 1
    out = capsys.readouterr().out
    assert "FAIL" in out
    assert "position 2" in out


def test_validate_command_reads_files(tmp_path, capsys):
    path = tmp_path / "seqs.txt"
    path.write_text("R U F\nU D U\n", encoding="utf-8")
    assert main(["validate", "--file", str(path)]) == 1
    out = capsys.readouterr().out
    assert out.count("OK") == 1
    assert out.count("FAIL") == 1


def test_solve_command_runs(capsys):
    assert main(["--seed", "2", "solve", "--scramble", "R U F'", "--show-net"]) == 0
    out = capsys.readouterr().out
    assert "Scramble: R U F'" in out
    assert "Solution (" in out
    assert "Solved after playback:" in out


def test_solve_command_on_an_empty_scramble(capsys):
    assert main(["solve", "--scramble", "R R'"]) == 0
    assert "nothing to solve" in capsys.readouterr().out


def test_bench_command_writes_results(tmp_path, capsys):
    results = tmp_path / "results"
    assert main(["--seed", "0", "bench", "--samples", "3", "--difficulty", "easy", "--results", str(results)]) == 0

    data = json.loads((results / "solver_bench.json").read_text(encoding="utf-8"))
    assert len(data) == 1
    entry = data[0]
    assert entry["num_samples"] == 3
    assert entry["seed"] == 0
    assert sum(entry["outcomes"].values()) == 3
    assert 0.0 <= entry["solve_rate"] <= 1.0
    assert "Finished" in capsys.readouterr().out


def test_solve_command_generates_its_own_scramble(capsys):
    assert main(["--seed", "2", "solve", "--difficulty", "easy"]) == 0
    out = capsys.readouterr().out
    scramble_line = next(line for line in out.splitlines() if line.startswith("Scramble:"))
    assert len(scramble_line.split()) == 1 + 12
    assert "Solution (" in out
