"""Diagram plans: a JSON list of construction steps replayed against a Schema."""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Callable, Dict, List, Literal, Tuple, Union

from pydantic import BaseModel, ValidationError

from dfm.errors import PlanError
from dfm.input_parser import split_labels
from dfm.schema import Schema

logger = logging.getLogger(__name__)

StepOp = Literal[
    "fact",
    "dimension",
    "sequence_dimension",
    "convergence",
    "hierarchy",
    "optional",
    "descriptive",
    "sequence_descriptive",
]

Arg = Union[str, List[str]]


class DiagramStep(BaseModel):
    op: StepOp
    args: List[Arg] = []


class DiagramPlan(BaseModel):
    steps: List[DiagramStep] = []


def _text(value: Arg) -> str:
    if not isinstance(value, str):
        raise PlanError(f"Expected a single label, got list {value!r}")
    return value


def _fact(schema: Schema, title: Arg, attributes: Arg = "") -> None:
    schema.create_fact(_text(title), split_labels(attributes))


def _pair(method: Callable[[str, str], None]) -> Callable[..., None]:
    def run(schema: Schema, label: Arg, attach: Arg) -> None:
        method(schema, _text(label), _text(attach))

    return run


def _listed(method: Callable[..., None]) -> Callable[..., None]:
    def run(schema: Schema, labels: Arg, *targets: Arg) -> None:
        method(schema, split_labels(labels), *(_text(t) for t in targets))

    return run


# op -> (handler, min args, max args)
_HANDLERS: Dict[str, Tuple[Callable[..., None], int, int]] = {
    "fact": (_fact, 1, 2),
    "dimension": (_pair(Schema.add_dimension), 2, 2),
    "sequence_dimension": (_listed(Schema.add_sequence_dimension), 2, 2),
    "convergence": (_pair(Schema.add_convergence), 2, 2),
    "hierarchy": (_listed(Schema.add_hierarchy), 3, 3),
    "optional": (_pair(Schema.add_optional), 2, 2),
    "descriptive": (_pair(Schema.add_descriptive), 2, 2),
    "sequence_descriptive": (_listed(Schema.add_sequence_descriptive), 2, 2),
}


def parse_plan(data: Union[str, bytes, dict]) -> DiagramPlan:
    try:
        if isinstance(data, (str, bytes)):
            return DiagramPlan.model_validate_json(data)
        return DiagramPlan.model_validate(data)
    except ValidationError as exc:
        raise PlanError(f"Invalid diagram plan: {exc}") from exc


def load_plan(path: Union[str, Path]) -> DiagramPlan:
    p = Path(path)
    try:
        raw = p.read_text(encoding="utf-8")
    except OSError as exc:
        raise PlanError(f"Unable to read plan {p}: {exc}") from exc
    return parse_plan(raw)


def apply_plan(schema: Schema, plan: DiagramPlan) -> Schema:
    """Replay every step in order; the first failing step raises and stops the replay."""
    for index, step in enumerate(plan.steps):
        handler, min_args, max_args = _HANDLERS[step.op]
        if not min_args <= len(step.args) <= max_args:
            expected = str(min_args) if min_args == max_args else f"{min_args}-{max_args}"
            raise PlanError(f"Step {index} ({step.op}) takes {expected} arguments, got {len(step.args)}")
        logger.debug("Applying step %d: %s %s", index, step.op, step.args)
        handler(schema, *step.args)
    return schema
