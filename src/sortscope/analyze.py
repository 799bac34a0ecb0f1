# src/sortscope/analyze.py
from __future__ import annotations

import math
import os
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Sequence, Tuple, Union

import plotly.graph_objects as go

from .complexity import (
    Classification,
    SpaceComplexity,
    classify_run,
    efficiency_tier,
    growth_family,
    space_complexity,
)
from .generators import generate
from .memory import measure_tracer
from .plotting import build_reference_curves, scaling_figure, steps_figure
from .report import build_report_html
from .theme import THEMES, load_theme
from .trace import InvalidInput, Number, RunResult, validate_values
from .tracers import TRACERS
from .utils import empirical_slope, human_bytes, human_time, rank


@dataclass(frozen=True)
class AlgorithmInfo:
    key: str
    name: str
    icon: str
    stable: bool = True


ALGORITHMS: Tuple[AlgorithmInfo, ...] = (
    AlgorithmInfo("bubble", "Bubble Sort", "🫧"),
    AlgorithmInfo("insertion", "Insertion Sort", "📝"),
    AlgorithmInfo("merge", "Merge Sort", "🔀"),
)


@dataclass
class AlgorithmReport:
    info: AlgorithmInfo
    result: RunResult
    classification: Classification
    space: SpaceComplexity
    efficiency: str
    duration: Optional[float] = None  # seconds
    peak_bytes: Optional[int] = None
    errors: List[str] = field(default_factory=list)

    @property
    def key(self) -> str:
        return self.info.key

    @property
    def name(self) -> str:
        return self.info.name

    @property
    def step_count(self) -> int:
        return self.result.step_count


@dataclass
class ComparisonResult:
    title: str
    values: Tuple[Number, ...]
    reports: Dict[str, AlgorithmReport]
    comparison_rows: List[Dict[str, Any]]
    html: str
    html_path: Optional[str] = None
    json_path: Optional[str] = None

    def __getitem__(self, key: str) -> AlgorithmReport:
        return self.reports[key]

    @property
    def fewest_steps(self) -> List[str]:
        """Keys of every algorithm tied for the lowest step count."""
        low = min(r.step_count for r in self.reports.values())
        return [k for k, r in self.reports.items() if r.step_count == low]

    def _repr_html_(self) -> str:  # Jupyter-friendly
        return self.html


@dataclass
class ScalingResult:
    ns: List[int]
    kind: str
    step_counts: Dict[str, List[int]]
    slopes: Dict[str, Optional[float]]
    families: Dict[str, str]
    figure: go.Figure


def _parse_token(token: str) -> Number:
    # Python literals allow digit separators; typed input should not
    if "_" in token:
        value = math.nan
    else:
        try:
            return int(token)
        except ValueError:
            pass
        try:
            value = float(token)
        except ValueError:
            value = math.nan
    if not math.isfinite(value):
        raise InvalidInput(
            f'"{token}" is not a valid number. Please enter only numbers separated by commas.'
        )
    return value


def parse_numbers(text: str) -> List[Number]:
    """
    Parse comma-separated text such as ``"5, 1, 4.5, -2"``.

    Integer tokens stay ``int``; everything else becomes ``float``. Only
    decimal notation is accepted: ``"1_000"`` and ``"0x10"`` are rejected. Raises
    InvalidInput for empty text, empty tokens, non-numeric or non-finite
    tokens, and fewer than two numbers.
    """
    text = (text or "").strip()
    if not text:
        raise InvalidInput("Please enter numbers to sort.", title="Input Required")

    values: List[Number] = []
    for raw in text.split(","):
        token = raw.strip()
        if token == "":
            raise InvalidInput("Empty value detected. Please check your input.")
        values.append(_parse_token(token))

    if len(values) < 2:
        raise InvalidInput(
            "Please enter at least 2 numbers to see sorting in action.", title="Input Required"
        )
    return values


def _run_one(info: AlgorithmInfo, snapshot: Tuple[Number, ...], measure: bool) -> AlgorithmReport:
    tracer = TRACERS[info.key]
    errors: List[str] = []
    duration: Optional[float] = None
    peak: Optional[int] = None
    result: Optional[RunResult] = None

    if measure:
        try:
            m = measure_tracer(tracer, snapshot)
            result, duration, peak = m.result, m.duration, m.peak_bytes
        except RuntimeError as e:
            errors.append(f"measurement failed: {e!r}")
    if result is None:
        result = tracer(snapshot)

    return AlgorithmReport(
        info=info,
        result=result,
        classification=classify_run(info.key, snapshot, result.step_count),
        space=space_complexity(info.key),
        efficiency=efficiency_tier(result.step_count),
        duration=duration,
        peak_bytes=peak,
        errors=errors,
    )


def _comparison_rows(reports: Dict[str, AlgorithmReport]) -> List[Dict[str, Any]]:
    labels = list(reports.keys())
    ranks = rank([float(reports[k].step_count) for k in labels])
    rows: List[Dict[str, Any]] = []
    for label, r in zip(labels, ranks):
        rep = reports[label]
        rows.append({
            "algorithm": rep.name,
            "icon": rep.info.icon,
            "steps": rep.step_count,
            "rank": r,
            "efficiency": rep.efficiency,
            "time_complexity": rep.classification.complexity_label,
            "case": rep.classification.case_label.value,
            "description": rep.classification.description,
            "space_complexity": rep.space.big_o,
            "space_description": rep.space.description,
            "stable": rep.info.stable,
            "duration": human_time(rep.duration) if rep.duration is not None else "—",
            "peak_memory": human_bytes(rep.peak_bytes) if rep.peak_bytes is not None else "—",
        })
    return rows


def compare_sorts(
    values: Union[str, Sequence[Number]],
    title: str = "Sorting Trace Comparison",
    notes: Optional[str] = None,
    html_out: Optional[str] = None,
    json_out: Optional[str] = None,
    theme: Optional[str] = None,
    measure: bool = True,
    verbose: bool = True,
) -> ComparisonResult:
    """
    Trace bubble, insertion and merge sort on the same input, classify each
    run and render the comparison.

    ``values`` may be a sequence of numbers or comma-separated text. The three
    tracers run one after another on the same read-only snapshot. The HTML
    report is always built; it is written only when ``html_out`` is given.
    ``theme`` defaults to the saved preference.
    """
    if theme is not None and theme not in THEMES:
        raise ValueError(f"theme must be one of {THEMES}, got {theme!r}")

    if isinstance(values, str):
        values = parse_numbers(values)
    snapshot = validate_values(values)

    if verbose:
        print(f"🔍 Tracing {len(snapshot)} elements with {len(ALGORITHMS)} algorithms...")

    reports: Dict[str, AlgorithmReport] = {}
    for info in ALGORITHMS:
        rep = _run_one(info, snapshot, measure)
        reports[info.key] = rep
        if verbose:
            print(f"   {info.icon} {info.name}: {rep.step_count} steps ({rep.efficiency})")

    rows = _comparison_rows(reports)
    fig = steps_figure(
        [r.name for r in reports.values()],
        [r.step_count for r in reports.values()],
        [r.efficiency for r in reports.values()],
        title,
    )

    html_path = os.path.abspath(html_out) if html_out else None
    html = build_report_html(
        title=title,
        notes=notes,
        values=list(snapshot),
        reports=list(reports.values()),
        comparison_rows=rows,
        steps_fig=fig,
        theme=theme or load_theme(),
        html_path=html_path,
    )

    if html_out:
        with open(html_out, "w", encoding="utf-8") as f:
            f.write(html)

    result = ComparisonResult(
        title=title,
        values=snapshot,
        reports=reports,
        comparison_rows=rows,
        html=html,
        html_path=html_path,
    )

    if json_out:
        from .io import export_results_json

        export_results_json(result, json_out)
        result.json_path = os.path.abspath(json_out)

    if verbose:
        if html_path:
            print(f"✅ Comparison complete. Report saved to: {html_path}")
        else:
            print("✅ Comparison complete. (No report file saved)")

    return result


def analyze_scaling(
    ns: List[int],
    kind: str = "random",
    seed: Optional[int] = 42,
    reference_curves: Tuple[str, ...] = ("1", "n", "nlogn", "n**2"),
    normalize_ref_at: str = "max",
    title: str = "Step Count Scaling",
    verbose: bool = False,
) -> ScalingResult:
    """
    Trace every algorithm on one generated input per size in ``ns`` and fit
    the growth of the step counts on a log-log scale. Bubble sort stays close to
    slope 2 for every kind; insertion sort only for unsorted kinds.
    """
    if not isinstance(ns, list) or len(ns) < 2:
        raise ValueError("ns must be a list of at least two sizes.")
    for n in ns:
        if not isinstance(n, int) or n < 2:
            raise ValueError("All values in ns must be integers >= 2.")

    step_counts: Dict[str, List[int]] = {info.key: [] for info in ALGORITHMS}
    for i, n in enumerate(ns):
        arr = generate(kind, n, seed=None if seed is None else seed + i)
        for info in ALGORITHMS:
            step_counts[info.key].append(TRACERS[info.key](arr).step_count)
        if verbose:
            print(f"   n={n}: " + ", ".join(f"{k}={v[-1]}" for k, v in step_counts.items()))

    slopes: Dict[str, Optional[float]] = {}
    families: Dict[str, str] = {}
    for key, counts in step_counts.items():
        slope = empirical_slope(ns, counts)
        slopes[key] = slope
        families[key] = growth_family(slope) if slope is not None else "Not enough data"

    anchor_idx = 0 if normalize_ref_at == "min" else -1
    anchors = [counts[anchor_idx] for counts in step_counts.values() if counts[anchor_idx] > 0]
    y_anchor = float(sum(anchors) / len(anchors)) if anchors else 1.0
    refs = build_reference_curves(ns, reference_curves, y_anchor, normalize_at=normalize_ref_at)

    names = {info.key: info.name for info in ALGORITHMS}
    fig = scaling_figure(
        ns,
        {names[k]: v for k, v in step_counts.items()},
        refs,
        f"{title} ({kind} input)",
    )
    return ScalingResult(
        ns=list(ns),
        kind=kind,
        step_counts=step_counts,
        slopes=slopes,
        families=families,
        figure=fig,
    )
