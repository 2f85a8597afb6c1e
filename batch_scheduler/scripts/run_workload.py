from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import List, Optional

from ..backend.errors import SchedulerError
from ..backend.schedulers import available_policies
from ..backend.session import SchedulingSession, SessionConfig, create_session
from ..backend.utils import ProcessSpec, format_listing, generate_workload, load_processes_from_csv


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Reorder a batch of processes with one or more scheduling policies")
    p.add_argument("--csv", type=str, default=None, help="Workload CSV with name,size_kb,burst_time,priority columns")
    p.add_argument("--limit", type=int, default=None, help="Max number of CSV rows to load")
    p.add_argument("--n", type=int, default=5, help="Number of synthetic processes when no CSV is given")
    p.add_argument("--seed", type=int, default=42)
    p.add_argument("--policy", action="append", choices=available_policies(), default=None,
                   help="Policy to apply; repeat to apply several in order (default: priority)")
    p.add_argument("--early-exit", action="store_true", help="Stop sorting after a pass with no swaps")
    p.add_argument("--log-out", type=str, default=None, help="Base path for the JSON and CSV event logs")
    p.add_argument("--plot", type=str, default=None, help="Save a chart of the final order to this path")
    return p.parse_args(argv)


def build_session(specs: List[ProcessSpec], config: SessionConfig) -> SchedulingSession:
    session = create_session(len(specs), config=config)
    for name, size_kb, burst_time, priority in specs:
        session.add(name, size_kb, burst_time, priority)
    return session


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)

    try:
        specs = load_processes_from_csv(args.csv, limit=args.limit) if args.csv else generate_workload(args.n, args.seed)
        session = build_session(specs, SessionConfig(early_exit=args.early_exit))
    except (SchedulerError, ValueError, OSError) as e:
        print(f"Cannot build workload: {e}", file=sys.stderr)
        return 1

    print(format_listing(session.snapshot()))
    for policy_name in args.policy or ["priority"]:
        report = session.apply_policy(policy_name)
        print(f"\nAfter {session.policies.get(policy_name).label} Scheduling ({report.swaps} swaps, {report.comparisons} comparisons):")
        print(format_listing(session.snapshot()))

    if args.log_out:
        base = Path(args.log_out)
        base.parent.mkdir(parents=True, exist_ok=True)
        session.logger.export_json(str(base.with_suffix('.json')))
        session.logger.export_csv(str(base))
        print(f"Logs written to {base.parent} (base: {base.name})")
    if args.plot:
        from ..backend.visualizer import plot_order
        plot_order(session.snapshot(), out_path=args.plot)
        print(f"Saved plot to {args.plot}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
