"""Summary report generation for the guard patrol simulation."""

from typing import Optional, Sequence, TYPE_CHECKING
from pathlib import Path

if TYPE_CHECKING:
    from ..model.area import Area
    from ..model.direction import Position
    from ..model.state import SearchResult, TraceResult


def render_ascii(area: "Area", trace: "TraceResult",
                 loop_positions: Sequence["Position"] = ()) -> str:
    """
    Draw the area as text.

    '#' obstruction, 'X' visited cell, 'O' loop-inducing cell,
    '^' guard start, '.' untouched floor.
    """
    rows = [['.'] * area.width for _ in range(area.height)]
    for p in area.obstacle_positions():
        rows[p.y][p.x] = '#'
    for s in trace.trajectory:
        rows[s.y][s.x] = 'X'
    for p in loop_positions:
        rows[p.y][p.x] = 'O'
    if trace.trajectory:
        start = trace.trajectory[0]
        rows[start.y][start.x] = '^'
    return "\n".join("".join(row) for row in rows)


class Reporter:
    """Generates formatted text report for a patrol run."""

    def __init__(self, input_path: str, strategy: str):
        self.input_path = input_path
        self.strategy = strategy

    def generate_summary(self, area: "Area",
                         trace: "TraceResult",
                         search: Optional["SearchResult"],
                         output_dir: Path,
                         csv_enabled: bool,
                         snapshot_enabled: bool,
                         gif_enabled: bool) -> str:
        """Returns formatted text report."""
        steps = max(0, len(trace.trajectory) - 1)

        lines = [
            "",
            "=" * 80,
            "                      GUARD PATROL SIMULATION REPORT",
            "=" * 80,
            f"Input:      {self.input_path}",
            f"Strategy:   {self.strategy}",
            f"Area:       {area.width}x{area.height} ({area.obstacle_count} obstructions)",
            "",
            "PATROL (PART ONE)",
            "-" * 40,
            f"Stop Reason:           {trace.reason.value}",
            f"Steps Taken:           {steps}",
            f"Distinct States:       {len(trace.trajectory)}",
            f"Distinct Cells:        {trace.visited_count}",
            "",
            "LOOP OBSTRUCTIONS (PART TWO)",
            "-" * 40,
        ]

        if search is not None:
            lines.append(f"Candidates Checked:    {search.candidates_checked}")
            lines.append(f"Loop-Inducing Cells:   {search.count}")
        else:
            lines.append("Search:                (disabled)")

        lines += [
            "",
            "OUTPUT FILES",
            "-" * 40,
        ]

        if csv_enabled:
            lines.append(f"Trajectory: {output_dir / 'trajectory.csv'}")
            if search is not None:
                lines.append(f"Obstacles:  {output_dir / 'loop_obstacles.csv'}")
        else:
            lines.append("CSV Log:    (disabled)")

        if snapshot_enabled:
            lines.append(f"Snapshot:   {output_dir / 'final_state.png'}")
        else:
            lines.append("Snapshot:   (disabled)")

        if gif_enabled:
            lines.append(f"Animation:  {output_dir / 'patrol.gif'}")
        else:
            lines.append("Animation:  (disabled)")

        lines.append("=" * 80)

        return "\n".join(lines)
