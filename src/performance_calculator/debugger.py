"""
Calculation Debugger
====================

Records the intermediate values of a performance simulation so a result
can be checked by hand: each step keeps its inputs, formula and output.

A debugger is passed explicitly to run_full_simulation; there is no
shared instance, so concurrent simulations never interleave their steps.
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict, List, Optional, Tuple


RULE = "=" * 70


@dataclass
class CalculationStep:
    """A single calculation step with inputs, formula, and result."""
    category: str           # e.g. "Hover", "Thermal", "Losses"
    description: str
    formula: str
    variables: Dict[str, Any] = field(default_factory=dict)
    result: Any = None
    result_name: str = ""
    result_unit: str = ""
    comment: str = ""

    def format_result(self) -> str:
        """'name = value unit' with floats shown to 6 significant digits."""
        value = f"{self.result:.6g}" if isinstance(self.result, float) else f"{self.result}"
        text = f"{self.result_name} = {value}"
        return f"{text} {self.result_unit}" if self.result_unit else text


class CalculationDebugger:
    """
    Collects calculation steps grouped into named sections.

    Usage:
        debugger = CalculationDebugger()
        debugger.start(configuration="4S 5000mAh, 920Kv, 10x4.5")
        result = run_full_simulation(drone, debugger=debugger)
        debugger.finish()
        print(debugger.get_report())
    """

    def __init__(self):
        self.steps: List[CalculationStep] = []
        self.sections: List[Tuple[int, str]] = []  # (first step index, name)
        self.start_time: Optional[datetime] = None
        self.end_time: Optional[datetime] = None
        self.metadata: Dict[str, Any] = {}

    def clear(self):
        """Forget all recorded steps and metadata."""
        self.steps = []
        self.sections = []
        self.start_time = None
        self.end_time = None
        self.metadata = {}

    def start(self, **metadata):
        """Begin a new trace, discarding any previous one."""
        self.clear()
        self.start_time = datetime.now()
        self.metadata = metadata

    def finish(self):
        self.end_time = datetime.now()

    def start_section(self, name: str):
        """Steps added after this call are listed under the section name."""
        self.sections.append((len(self.steps), name))

    def add_step(
        self,
        category: str,
        description: str,
        formula: str = "",
        variables: Optional[Dict[str, Any]] = None,
        result: Any = None,
        result_name: str = "",
        result_unit: str = "",
        comment: str = ""
    ):
        self.steps.append(CalculationStep(
            category=category,
            description=description,
            formula=formula,
            variables=dict(variables or {}),
            result=result,
            result_name=result_name,
            result_unit=result_unit,
            comment=comment,
        ))

    def add_input(self, name: str, value: Any, unit: str = "", description: str = ""):
        """Record a configuration value used by the simulation."""
        self.add_step(
            category="Input",
            description=description or f"Input: {name}",
            result=value,
            result_name=name,
            result_unit=unit,
        )

    def add_constant(self, name: str, value: Any, unit: str = "", description: str = ""):
        """Record a physical constant or model assumption."""
        self.add_step(
            category="Constant",
            description=description or f"Constant: {name}",
            result=value,
            result_name=name,
            result_unit=unit,
        )

    def get_report(self, include_sections: bool = True) -> str:
        """
        Generate a formatted text report of all recorded steps.

        Parameters:
        ----------
        include_sections : bool
            Include section banners in the report

        Returns:
        -------
        str
            Formatted calculation trace
        """
        lines = [RULE, "PERFORMANCE CALCULATION TRACE", RULE]

        if self.start_time:
            lines.append(f"Generated: {self.start_time.strftime('%Y-%m-%d %H:%M:%S')}")

        if self.metadata:
            lines.append("")
            lines.append("Configuration:")
            for key, value in self.metadata.items():
                lines.append(f"  {key}: {value}")

        lines.append("")

        section_at = dict(self.sections)
        current_category = None

        for number, step in enumerate(self.steps, start=1):
            index = number - 1
            if include_sections and index in section_at:
                lines.extend(["", RULE, f">>> {section_at[index]}", RULE, ""])
                current_category = None

            if step.category != current_category and step.category not in ("Input", "Constant"):
                lines.append(f"--- {step.category} ---")
                lines.append("")
                current_category = step.category

            lines.append(f"[{number}] {step.description}")
            if step.variables:
                shown = ", ".join(
                    f"{name}={value:.6g}" if isinstance(value, float) else f"{name}={value}"
                    for name, value in step.variables.items()
                )
                lines.append(f"    Inputs: {shown}")
            if step.formula:
                lines.append(f"    Formula: {step.formula}")
            lines.append(f"    => {step.format_result()}")
            if step.comment:
                lines.append(f"    // {step.comment}")
            lines.append("")

        lines.append(RULE)
        lines.append(f"Total Steps: {len(self.steps)}")
        if self.start_time and self.end_time:
            elapsed = (self.end_time - self.start_time).total_seconds()
            lines.append(f"Elapsed Time: {elapsed:.3f} seconds")
        lines.append(RULE)

        return "\n".join(lines)

    def get_step_count(self) -> int:
        return len(self.steps)

    def find_steps_by_category(self, category: str) -> List[CalculationStep]:
        """All steps in a category, in the order they were recorded."""
        return [s for s in self.steps if s.category == category]

    def find_step_by_result(self, result_name: str) -> Optional[CalculationStep]:
        """Most recent step that produced the named result."""
        for step in reversed(self.steps):
            if step.result_name == result_name:
                return step
        return None
