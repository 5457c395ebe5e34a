from __future__ import annotations

from typing import Dict, List


def build_pool(entries_by_owner: Dict[str, int]) -> List[str]:
    pool: List[str] = []
    for owner, count in entries_by_owner.items():
        for _ in range(count):
            pool.append(owner)
    return pool


def render_pool(pool: List[str]) -> str:
    return "\n".join(pool)


def write_pool(path: str, contents: str) -> None:
    with open(path, "w", encoding="utf-8") as f:
        f.write(contents)


def tally_pool_file(path: str) -> Dict[str, int]:
    counts: Dict[str, int] = {}
    with open(path, "r", encoding="utf-8") as f:
        for line in f:
            addr = line.strip()
            if not addr:
                continue
            counts[addr] = counts.get(addr, 0) + 1
    return counts
