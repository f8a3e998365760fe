#!/usr/bin/env python3
"""
Rendering benchmark for sublimehtml.

Builds a synthetic document (a table with N rows) and compares eager
rendering, cached re-rendering and streaming.
"""

# ruff: noqa: T201
from __future__ import annotations

import argparse
import sys
import time
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent / "src"))

from sublimehtml import document  # noqa: E402
from sublimehtml.tags import a, body, h1, head, html, table, tbody, td, th, thead, title, tr  # noqa: E402


def build_page(rows: int):
    return html(
        head(title("Benchmark")),
        body(
            h1("Users & groups"),
            table(
                thead(tr(th("#"), th("Name"), th("Profile"))),
                tbody(
                    tr(
                        td(i),
                        td(f"user <{i}>"),
                        td(a("profile", href=f"/users/{i}?tab=info&sort=asc")),
                        class_=["row", "odd" if i % 2 else "even"],
                    )
                    for i in range(rows)
                ),
            ),
        ),
    )


def timed(label: str, func, iterations: int) -> float:
    start = time.perf_counter()
    for _ in range(iterations):
        func()
    elapsed = time.perf_counter() - start
    print(f"{label:<24} {elapsed / iterations * 1000:10.3f} ms/iter")
    return elapsed


def main() -> None:
    parser = argparse.ArgumentParser(description="Benchmark sublimehtml rendering")
    parser.add_argument("--rows", type=int, default=2000, help="Table rows in the generated page")
    parser.add_argument("--iterations", type=int, default=20, help="Iterations per measurement")
    args = parser.parse_args()

    print(f"Rows: {args.rows}, iterations: {args.iterations}")
    print("=" * 48)

    timed("build", lambda: build_page(args.rows), args.iterations)
    timed("build + render", lambda: document(build_page(args.rows)), args.iterations)

    page = build_page(args.rows)
    timed("build + stream", lambda: sum(len(chunk) for chunk in build_page(args.rows).stream()), args.iterations)
    page.render()
    timed("cached render", page.render, args.iterations)

    size = len(page.render())
    print("=" * 48)
    print(f"Output size: {size / 1024:.1f} KiB")


if __name__ == "__main__":
    main()
