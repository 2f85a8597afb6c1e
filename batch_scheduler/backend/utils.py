from __future__ import annotations

from typing import List, Dict, Optional, Any, Iterable, Tuple
import json
import csv
import random

from .core import ProcessRecord


# (name, size_kb, burst_time, priority) as handed to a session by a front-end
ProcessSpec = Tuple[str, int, int, int]


class EventLogger:
    def __init__(self) -> None:
        self.insertions: List[Dict[str, Any]] = []
        self.policy_applications: List[Dict[str, Any]] = []
        self.rejections: List[Dict[str, Any]] = []

    def log_insertion(self, record: ProcessRecord) -> None:
        self.insertions.append(record.as_dict())

    def log_policy_application(self, policy: str, passes: int, comparisons: int, swaps: int, order: List[int]) -> None:
        self.policy_applications.append({
            "policy": policy,
            "passes": passes,
            "comparisons": comparisons,
            "swaps": swaps,
            "order": list(order),
        })

    def log_rejection(self, kind: str, detail: str) -> None:
        self.rejections.append({
            "kind": kind,
            "detail": detail,
        })

    def export_json(self, path: str) -> None:
        data = {
            "insertions": self.insertions,
            "policy_applications": self.policy_applications,
            "rejections": self.rejections,
        }
        with open(path, "w", encoding="utf-8") as f:
            json.dump(data, f, indent=2)

    def export_csv(self, base_path_no_ext: str) -> None:
        with open(f"{base_path_no_ext}_insertions.csv", "w", newline="", encoding="utf-8") as f:
            writer = csv.DictWriter(f, fieldnames=["pid", "name", "size_kb", "burst_time", "priority"])
            writer.writeheader()
            for row in self.insertions:
                writer.writerow(row)
        with open(f"{base_path_no_ext}_policies.csv", "w", newline="", encoding="utf-8") as f:
            writer = csv.DictWriter(f, fieldnames=["policy", "passes", "comparisons", "swaps", "order"])
            writer.writeheader()
            for row in self.policy_applications:
                writer.writerow({**row, "order": " ".join(str(pid) for pid in row["order"])})
        with open(f"{base_path_no_ext}_rejections.csv", "w", newline="", encoding="utf-8") as f:
            writer = csv.DictWriter(f, fieldnames=["kind", "detail"])
            writer.writeheader()
            for row in self.rejections:
                writer.writerow(row)


def format_listing(
    records: Iterable[ProcessRecord],
    title: str = "ORDER OF PROCESSES",
    width: int = 40,
    name_width: int = 20,
) -> str:
    rule = "=" * width
    lines = [rule, title.center(width).rstrip(), rule]
    for i, p in enumerate(records, start=1):
        lines.append(
            f"{i}. {p.name:<{name_width}} | ID: {p.pid} | Priority: {p.priority} | Burst: {p.burst_time} ms"
        )
    lines.append(rule)
    return "\n".join(lines)


def load_processes_from_csv(path: str, limit: Optional[int] = None) -> List[ProcessSpec]:
    """Read ``name,size_kb,burst_time,priority`` rows from a CSV file."""
    specs: List[ProcessSpec] = []
    with open(path, newline='', encoding='utf-8') as f:
        reader = csv.DictReader(f)
        missing = {"name", "size_kb", "burst_time", "priority"} - set(reader.fieldnames or [])
        if missing:
            raise ValueError(f"Workload missing columns: {sorted(missing)}")
        for i, row in enumerate(reader):
            if limit is not None and i >= limit:
                break
            try:
                specs.append((
                    (row["name"] or "").strip(),
                    int(row["size_kb"]),
                    int(row["burst_time"]),
                    int(row["priority"]),
                ))
            except (TypeError, ValueError) as e:
                # row 1 is the header
                raise ValueError(f"Bad value on workload row {i + 2}: {e}") from e
    return specs


def generate_workload(n: int, seed: int) -> List[ProcessSpec]:
    rng = random.Random(seed)
    specs: List[ProcessSpec] = []
    for i in range(n):
        size = rng.randint(16, 4096)
        burst = max(1, int(rng.expovariate(1 / 40)))
        priority = rng.randint(1, n)
        specs.append((f"P{i+1}", size, burst, priority))
    return specs
