# src/sortscope/io.py
from __future__ import annotations

import json
from pathlib import Path
from typing import TYPE_CHECKING, Any

from .utils import human_bytes, human_time

if TYPE_CHECKING:
    from .analyze import ComparisonResult


def export_results_json(result: "ComparisonResult", out_path: str | Path) -> None:
    """
    Write a JSON file with every algorithm's trace, classification and
    measurements, for use by external frontends.
    """
    out_path = Path(out_path)
    data: dict[str, Any] = {
        "title": result.title,
        "html_path": result.html_path,
        "input": list(result.values),
        "algorithms": {},
    }

    for key, rep in result.reports.items():
        data["algorithms"][key] = {
            "name": rep.name,
            "stable": rep.info.stable,
            "sorted_values": rep.result.sorted_values,
            "order": rep.result.order,
            "step_count": rep.step_count,
            "steps": [rec.as_row() for rec in rep.result.steps],
            "classification": {
                "complexity": rep.classification.complexity_label,
                "case": rep.classification.case_label.value,
                "description": rep.classification.description,
            },
            "space": {"big_o": rep.space.big_o, "description": rep.space.description},
            "efficiency": rep.efficiency,
            "duration": rep.duration,
            "duration_human": human_time(rep.duration) if rep.duration is not None else None,
            "peak_bytes": rep.peak_bytes,
            "peak_human": human_bytes(rep.peak_bytes) if rep.peak_bytes is not None else None,
            "errors": rep.errors,
        }

    out_path.parent.mkdir(parents=True, exist_ok=True)
    out_path.write_text(json.dumps(data, indent=2, ensure_ascii=False, default=str), encoding="utf-8")
