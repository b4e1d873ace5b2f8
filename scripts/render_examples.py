#!/usr/bin/env python3
"""Render every shape example to PNG and verify each one painted something."""

from __future__ import annotations

import json
import os
import subprocess
import time
from datetime import UTC, datetime
from pathlib import Path

import numpy as np
from PIL import Image

PROJECT_ROOT = Path(__file__).resolve().parents[1]
EXAMPLES_DIR = PROJECT_ROOT / "docs" / "examples" / "shapes"
DIST_DIR = PROJECT_ROOT / "dist" / "gallery"
RESULTS_FILE = DIST_DIR / "results.json"
SUITE_NAME = "gallery"


def _isoformat(dt: datetime) -> str:
    return dt.isoformat().replace("+00:00", "Z")


def _painted_pixels(path: Path) -> int:
    with Image.open(path) as image:
        alpha = np.asarray(image.convert("RGBA"))[..., 3]
    return int(np.count_nonzero(alpha))


def run_case(script: Path, verbose: bool = False) -> dict:
    output = DIST_DIR / f"{script.stem}.png"
    output.parent.mkdir(parents=True, exist_ok=True)
    cmd = [
        "canvasshapes",
        "render",
        str(script.relative_to(PROJECT_ROOT)),
        "--output",
        str(output),
        "--overwrite",
    ]
    started_at = datetime.now(UTC)
    start_monotonic = time.perf_counter()
    if verbose:
        print(f"{script.stem} - {_isoformat(started_at)}")
    proc = subprocess.run(
        cmd,
        cwd=PROJECT_ROOT,
        env=os.environ.copy(),
        capture_output=True,
        text=True,
    )
    ended_at = datetime.now(UTC)
    duration = time.perf_counter() - start_monotonic

    painted = None
    analysis_error = None
    if proc.returncode == 0 and output.exists():
        try:
            painted = _painted_pixels(output)
        except OSError as exc:
            analysis_error = str(exc)

    success = proc.returncode == 0 and bool(painted)
    if verbose:
        status = "PASS" if success else "FAIL"
        print(f"{status} - {_isoformat(ended_at)} ({duration:.2f}s)")
        if not success:
            print(f"  {analysis_error or proc.stderr.strip() or 'nothing painted'}")
        print()

    return {
        "name": script.stem,
        "script": str(script.relative_to(PROJECT_ROOT)),
        "returncode": proc.returncode,
        "stdout": proc.stdout.strip(),
        "stderr": proc.stderr.strip(),
        "png_path": str(output.relative_to(PROJECT_ROOT)),
        "png_exists": output.exists(),
        "painted_pixels": painted,
        "analysis_error": analysis_error,
        "started_at": _isoformat(started_at),
        "ended_at": _isoformat(ended_at),
        "duration_seconds": duration,
        "success": success,
    }


def main() -> int:
    DIST_DIR.mkdir(parents=True, exist_ok=True)
    suite_start = datetime.now(UTC)
    print(f"Starting suite {SUITE_NAME}")
    print(f"time: {_isoformat(suite_start)}")
    print("--")
    results = [run_case(script, verbose=True) for script in sorted(EXAMPLES_DIR.glob("*_example.py"))]
    suite_end = datetime.now(UTC)
    payload = {
        "suite": SUITE_NAME,
        "suite_started_at": _isoformat(suite_start),
        "suite_ended_at": _isoformat(suite_end),
        "cases": results,
    }
    RESULTS_FILE.write_text(json.dumps(payload, indent=2))

    failures = [case for case in results if not case["success"]]
    status_text = "PASS" if not failures else "FAIL"
    print(f"suite end - {_isoformat(suite_end)} ({status_text})")
    print(f"Wrote results to {RESULTS_FILE}")
    return 1 if failures else 0


if __name__ == "__main__":
    raise SystemExit(main())
