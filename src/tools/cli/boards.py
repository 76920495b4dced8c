"""Command line helpers for board generation and the board store."""

from __future__ import annotations

import argparse
import json
import logging
import os
import sys
from pathlib import Path
from typing import Dict, List, Mapping, Optional

from artifacts.board_store import BoardStore
from contracts import validator
from engine import Difficulty, GenerationFailure, generate
from engine.grid import format_grid
from orchestrator import log as event_log
from orchestrator.executor import PoolExecutor, SequentialExecutor
from orchestrator.scheduler import Scheduler, boards_from, configured_max_attempts, standard_tasks
from project_config import get_section

WORKERS_ENV_VAR = "BOARDS_WORKERS"


def _configure_logging(verbose: bool) -> None:
    level_name = str(get_section("logging.level", default="INFO"))
    level = logging.DEBUG if verbose else getattr(logging, level_name.upper(), logging.INFO)
    logging.basicConfig(format="%(asctime)s - %(name)s - %(levelname)s - %(message)s", level=level)


def _resolve_workers(cli_value: Optional[int], env: Mapping[str, str]) -> int:
    """``--workers`` over ``BOARDS_WORKERS`` over ``[batch] workers``."""

    if cli_value is not None:
        return cli_value
    env_value = env.get(WORKERS_ENV_VAR)
    if env_value:
        return int(env_value)
    return int(get_section("batch.workers", default=1))


def _store(args: argparse.Namespace) -> BoardStore:
    return BoardStore(args.store) if getattr(args, "store", None) else BoardStore()


def _print_board(board, as_json: bool) -> None:
    if as_json:
        print(json.dumps(board.to_dict(), sort_keys=True))
        return
    print(f"Board {board.id} ({board.difficulty.value}, seed={board.seed!r}, empty={board.empty_cells})")
    print(format_grid(board.puzzle))


def cmd_generate(args: argparse.Namespace) -> int:
    try:
        board = generate(args.difficulty, args.seed)
    except GenerationFailure as exc:
        print(f"generation failed: {exc}", file=sys.stderr)
        return 1
    _print_board(board, args.json)
    if args.solution and not args.json:
        print("\nSolution:")
        print(format_grid(board.solution))
    return 0


def cmd_batch(args: argparse.Namespace) -> int:
    workers = _resolve_workers(args.workers, os.environ)
    attempts = configured_max_attempts()
    if workers > 1:
        executor = PoolExecutor(max_workers=workers, max_attempts=attempts)
    else:
        executor = SequentialExecutor(max_attempts=attempts)

    if args.log_events:
        event_log.configure()

    levels = [Difficulty.parse(d) for d in args.difficulty] if args.difficulty else None
    store = _store(args)
    tasks = standard_tasks(store.per_difficulty if args.per_difficulty is None else args.per_difficulty, levels)
    scheduler = Scheduler(executor, log_events=args.log_events)

    def _progress(fraction: float) -> None:
        print(f"\r{fraction * 100:5.1f}%", end="", file=sys.stderr, flush=True)

    try:
        results = scheduler.run(tasks, progress=None if args.quiet else _progress)
    finally:
        scheduler.shutdown()
    if not args.quiet:
        print(file=sys.stderr)

    boards = boards_from(results)
    path = store.save(boards) if levels is None else store.replace_tiers(boards, levels)
    summary: Dict[str, int] = {}
    for result in results:
        summary[result.status] = summary.get(result.status, 0) + 1
    print(json.dumps({"store": str(path), "boards": len(boards), "status": summary}, indent=2, sort_keys=True))
    return 0 if len(boards) == len(tasks) else 1


def cmd_find(args: argparse.Namespace) -> int:
    board = _store(args).find_board(args.board_id)
    if board is None:
        print(f"no board with id {args.board_id}", file=sys.stderr)
        return 1
    _print_board(board, args.json)
    return 0


def cmd_list(args: argparse.Namespace) -> int:
    store = _store(args)
    boards = store.boards_for(args.difficulty) if args.difficulty else store.load()
    for board in boards:
        print(f"{board.id}  {board.difficulty.value:<6}  empty={board.empty_cells:<2}  seed={board.seed}")
    return 0


def cmd_validate(args: argparse.Namespace) -> int:
    payload = json.loads(Path(args.file).read_text("utf-8"))
    records: List[dict] = payload if isinstance(payload, list) else [payload]
    failures = 0
    for index, record in enumerate(records):
        report = validator.validate(record, profile=args.profile)
        for issue in report.issues:
            print(f"[{index}] {issue.describe()}")
        if not report.ok:
            failures += 1
    print(f"{len(records) - failures}/{len(records)} records valid")
    return 0 if failures == 0 else 1


def cmd_export_pdf(args: argparse.Namespace) -> int:
    from printer.pdf import export_pdf

    store = _store(args)
    boards = store.boards_for(args.difficulty) if args.difficulty else store.load()
    if args.count is not None:
        boards = boards[: args.count]
    if not boards:
        print("no boards to export", file=sys.stderr)
        return 1
    out = export_pdf(boards, args.out, solutions=args.solutions)
    print(f"PDF with {len(boards)} boards saved to: {out.resolve()}")
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Seeded Sudoku board generator")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    sub = parser.add_subparsers(dest="command", required=True)

    difficulties = [d.value for d in Difficulty]

    gen = sub.add_parser("generate", help="Generate one board")
    gen.add_argument("--difficulty", default=Difficulty.MEDIUM.value, type=Difficulty.parse, help=f"One of {difficulties}")
    gen.add_argument("--seed", default=None, help="Seed string; a random one is drawn when omitted")
    gen.add_argument("--json", action="store_true", help="Print the board record as JSON")
    gen.add_argument("--solution", action="store_true", help="Also print the solution grid")
    gen.set_defaults(func=cmd_generate)

    batch = sub.add_parser("batch", help="Generate the standard board set into the store")
    batch.add_argument("--per-difficulty", type=int, default=None, help="Boards per difficulty (default from config)")
    batch.add_argument("--difficulty", action="append", help="Restrict to this difficulty (repeatable)")
    batch.add_argument("--workers", type=int, default=None, help="Worker processes (default from env/config)")
    batch.add_argument("--store", default=None, help="Store file path")
    batch.add_argument("--log-events", action="store_true", help="Append JSONL generation events")
    batch.add_argument("--quiet", action="store_true", help="Suppress progress output")
    batch.set_defaults(func=cmd_batch)

    find = sub.add_parser("find", help="Look up a stored board by id")
    find.add_argument("board_id")
    find.add_argument("--store", default=None)
    find.add_argument("--json", action="store_true")
    find.set_defaults(func=cmd_find)

    lst = sub.add_parser("list", help="List stored boards")
    lst.add_argument("--difficulty", type=Difficulty.parse, default=None)
    lst.add_argument("--store", default=None)
    lst.set_defaults(func=cmd_list)

    val = sub.add_parser("validate", help="Validate a board record or a list of records")
    val.add_argument("file")
    val.add_argument("--profile", default="dev", choices=["dev", "ci", "fast"])
    val.set_defaults(func=cmd_validate)

    pdf = sub.add_parser("export-pdf", help="Print stored boards to a PDF")
    pdf.add_argument("--out", required=True)
    pdf.add_argument("--store", default=None)
    pdf.add_argument("--difficulty", type=Difficulty.parse, default=None)
    pdf.add_argument("--count", type=int, default=None)
    pdf.add_argument("--solutions", action="store_true", help="Print solutions instead of puzzles")
    pdf.set_defaults(func=cmd_export_pdf)

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    _configure_logging(args.verbose)
    return args.func(args)


if __name__ == "__main__":  # pragma: no cover - CLI entry point
    raise SystemExit(main())
