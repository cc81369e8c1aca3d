"""Visualization and export for the guard patrol simulation."""

import numpy as np
import matplotlib
matplotlib.use('Agg')  # Use non-interactive backend
import matplotlib.pyplot as plt
from matplotlib.colors import to_rgb
from pathlib import Path
from typing import List, Optional, Sequence, TYPE_CHECKING
from PIL import Image
import io

if TYPE_CHECKING:
    from ..model.area import Area
    from ..model.direction import Position
    from ..model.state import TraceResult


class Visualizer:
    """
    Generates visual outputs using matplotlib.

    Supports:
    - Single PNG snapshots of a finished trace
    - Animated GIF of the patrol, one frame per buffered step
    """

    # Color scheme
    COLORS = {
        'obstacle': '#2C3E50',  # Dark blue-gray
        'floor': '#ECF0F1',     # Light gray
        'visited': '#AED6F1',   # Pale blue
        'path': '#3498DB',      # Blue
        'start': '#27AE60',     # Green
        'guard': '#E74C3C',     # Red
        'loop': '#F39C12',      # Orange
    }

    def __init__(self, area: "Area"):
        self.area = area
        self.width = area.width
        self.height = area.height
        self.frames: List[Image.Image] = []

    def _create_figure(self, trace: "TraceResult",
                       upto: Optional[int] = None,
                       loop_positions: Sequence["Position"] = ()) -> plt.Figure:
        """Create matplotlib figure showing the first `upto` trace states."""
        states = trace.trajectory[:upto] if upto is not None else trace.trajectory

        aspect = self.width / max(1, self.height)
        fig_height = 6
        fig_width = max(6, fig_height * aspect)
        fig, ax = plt.subplots(figsize=(fig_width, fig_height))

        # Base layer: obstacles, floor and visited cells
        base = np.ones((self.height, self.width, 3))
        base[:, :] = to_rgb(self.COLORS['floor'])
        visited_rgb = to_rgb(self.COLORS['visited'])
        for s in states:
            base[s.y, s.x] = visited_rgb
        base[self.area.obstacles] = to_rgb(self.COLORS['obstacle'])

        # Row 0 is the first line of input, so keep it at the top
        ax.imshow(base, origin='upper', aspect='equal',
                  extent=[-0.5, self.width - 0.5, self.height - 0.5, -0.5])

        if states:
            xs = [s.x for s in states]
            ys = [s.y for s in states]
            ax.plot(xs, ys, '-', color=self.COLORS['path'], linewidth=1.2)
            ax.plot(xs[0], ys[0], 's', color=self.COLORS['start'],
                    markersize=8, markeredgecolor='black', markeredgewidth=0.5)
            last = states[-1]
            ax.plot(last.x, last.y, marker=last.direction.symbol,
                    color=self.COLORS['guard'], markersize=8)

        for p in loop_positions:
            ax.plot(p.x, p.y, 'o', color=self.COLORS['loop'],
                    markersize=6, markeredgecolor='black', markeredgewidth=0.5)

        # Title and labels
        step = max(0, len(states) - 1)
        title = f'Step {step} | Visited: {len({s.position for s in states})}'
        if upto is None or upto >= len(trace.trajectory):
            title += f' | Stop: {trace.reason.value}'
        if loop_positions:
            title += f' | Loop obstacles: {len(loop_positions)}'
        ax.set_title(title)
        ax.set_xlabel('X')
        ax.set_ylabel('Y')

        ax.set_xlim(-0.5, self.width - 0.5)
        ax.set_ylim(self.height - 0.5, -0.5)

        # Legend
        legend_elements = [
            plt.Line2D([0], [0], marker='s', color='w', label='Start',
                       markerfacecolor=self.COLORS['start'], markersize=8),
            plt.Line2D([0], [0], marker='s', color='w', label='Obstacle',
                       markerfacecolor=self.COLORS['obstacle'], markersize=8),
        ]
        if loop_positions:
            legend_elements.append(
                plt.Line2D([0], [0], marker='o', color='w', label='Loop obstacle',
                           markerfacecolor=self.COLORS['loop'], markersize=8))
        ax.legend(handles=legend_elements, loc='upper right', fontsize=8)

        plt.tight_layout()
        return fig

    def buffer_frame(self, trace: "TraceResult", upto: int) -> None:
        """Store frame for GIF generation."""
        fig = self._create_figure(trace, upto=upto)

        # Convert to PIL Image
        buf = io.BytesIO()
        fig.savefig(buf, format='png', dpi=80)
        buf.seek(0)
        img = Image.open(buf).copy()
        self.frames.append(img)
        buf.close()
        plt.close(fig)

    def buffer_trace(self, trace: "TraceResult", every: int = 1) -> None:
        """Buffer frames for a whole trace, keeping every Nth state."""
        every = max(1, every)
        total = len(trace.trajectory)
        for upto in range(1, total + 1, every):
            self.buffer_frame(trace, upto)
        if (total - 1) % every != 0:
            self.buffer_frame(trace, total)

    def save_snapshot(self, trace: "TraceResult", output_path: Path,
                      loop_positions: Sequence["Position"] = ()) -> None:
        """Save single PNG image of a finished trace."""
        output_path = Path(output_path)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        fig = self._create_figure(trace, loop_positions=loop_positions)
        fig.savefig(output_path, dpi=150, bbox_inches='tight')
        plt.close(fig)

    def generate_gif(self, output_path: Path, fps: int = 10) -> None:
        """Compile buffered frames into animated GIF."""
        if not self.frames:
            return

        output_path = Path(output_path)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        duration = int(1000 / fps)  # milliseconds per frame

        self.frames[0].save(
            output_path,
            save_all=True,
            append_images=self.frames[1:],
            duration=duration,
            loop=0
        )

    def clear_frames(self) -> None:
        """Clear buffered frames."""
        self.frames.clear()
