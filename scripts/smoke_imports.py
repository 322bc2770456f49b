"""Smoke test: verify the `pugs/` package is importable.

Run from the repository root:

    python scripts/smoke_imports.py

This is intended to fail fast during refactors if imports drift/break.
"""

from __future__ import annotations

import importlib
import sys
from pathlib import Path


def _ensure_repo_root_on_syspath() -> Path:
    """Ensure repo root is on sys.path.

    This allows running the script from any working directory.
    """

    # This file is <repo_root>/scripts/smoke_imports.py
    repo_root = Path(__file__).resolve().parents[1]
    repo_root_str = str(repo_root)
    if repo_root_str not in sys.path:
        sys.path.insert(0, repo_root_str)
    return repo_root


def main() -> int:
    _ensure_repo_root_on_syspath()

    modules = [
        "pugs",
        "pugs.api",
        "pugs.contracts",
        "pugs.contracts.choices",
        "pugs.contracts.ensemble",
        "pugs.contracts.inference_configs",
        "pugs.contracts.results",
        "pugs.contracts.results.common",
        "pugs.contracts.results.inference",
        "pugs.contracts.results.metrics",
        "pugs.core.errors",
        "pugs.core.progress",
        "pugs.core.shapes",
        "pugs.runtime.random.rng",
        "pugs.components.interfaces",
        "pugs.components.prediction",
        "pugs.components.sampling",
        "pugs.components.ensembles",
        "pugs.components.aggregation",
        "pugs.components.evaluation",
        "pugs.factories.predict_factory",
        "pugs.factories.ensemble_factory",
        "pugs.use_cases",
    ]

    failures: list[tuple[str, BaseException]] = []
    for mod in modules:
        try:
            importlib.import_module(mod)
        except BaseException as e:  # noqa: BLE001 - this is a smoke test
            failures.append((mod, e))

    if failures:
        print("PUGS IMPORT SMOKE TEST: FAILED\n")
        for mod, e in failures:
            print(f"- {mod}: {type(e).__name__}: {e}")
        print("\nFix imports before continuing.")
        return 1

    # Core must not pull in any UI/progress-bar packages.
    ui_loaded = [m for m in ("tqdm", "progress") if m in sys.modules]
    if ui_loaded:
        print(f"PUGS IMPORT SMOKE TEST: FAILED\n\nCore imported UI packages: {ui_loaded}")
        return 1

    print("PUGS IMPORT SMOKE TEST: OK")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
