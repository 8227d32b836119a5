"""
Scene data structure for managing sampling parameters, seed events, and display styling.
"""
import json
from typing import List, Dict, Optional


def _as_point(value, key: str) -> Optional[List[float]]:
    if value is None:
        return None
    try:
        x, y = value
        return [float(x), float(y)]
    except (TypeError, ValueError):
        raise ValueError(f"{key} must be a pair [x, y] or null, got {value!r}")


class SeedEvent:
    """Represents an extra seed point added at a specific frame."""
    def __init__(self, frame: int, point: Optional[List[float]] = None):
        self.frame = frame
        # None means a random point in the domain
        self.point = point


class Scene:
    """Scene data structure containing sampling parameters and events."""

    def __init__(self, width: float = 1000.0, height: float = 1000.0,
                 radius: float = 50.0, k: int = 30,
                 seed: Optional[int] = None,
                 start: Optional[List[float]] = None,
                 loop_size: int = 20,
                 draw_dots: bool = True,
                 draw_lines: bool = True,
                 draw_active: bool = False,
                 colormap: str = "rainbow",
                 dot_radius: float = 3.0,
                 line_color: Optional[List[float]] = None,
                 line_radius: float = 0.5,
                 active_color: Optional[List[float]] = None):
        """
        Initialize a scene.

        Args:
            width: Domain width
            height: Domain height
            radius: Minimum distance between sampled points
            k: Candidates tried per active point before it is retired
            seed: Random seed (None for a nondeterministic run)
            start: Initial point [x, y]; None picks a random point in the domain
            loop_size: Sampler steps per frame (0 = run to completion in one frame)
            draw_dots: Show the sampled points
            draw_lines: Connect points in acceptance order
            draw_active: Highlight the points that are still active
            colormap: Polyscope colormap used to colour points by acceptance order
            dot_radius: Point radius in domain units
            line_color: RGB colour of the connecting lines
            line_radius: Line radius in domain units
            active_color: RGB colour of active points
        """
        self.width = width
        self.height = height
        self.radius = radius
        self.k = k
        self.seed = seed
        self.start = start
        self.loop_size = loop_size

        # Display styling
        self.draw_dots = draw_dots
        self.draw_lines = draw_lines
        self.draw_active = draw_active
        self.colormap = colormap
        self.dot_radius = dot_radius
        self.line_color = line_color if line_color is not None else [0.0, 1.0, 0.0]
        self.line_radius = line_radius
        self.active_color = active_color if active_color is not None else [1.0, 0.0, 0.0]

        # Extra seed events
        self.seed_events: List[SeedEvent] = []

    def add_seed_event(self, frame: int, point: Optional[List[float]] = None):
        """Add an extra seed point at a specific frame."""
        if frame < 0:
            raise ValueError(f"seed event frame must be non-negative, got {frame}")
        self.seed_events.append(SeedEvent(frame, point))
        # Sort by frame
        self.seed_events.sort(key=lambda e: e.frame)

    def get_seed_events_at_frame(self, frame: int) -> List[SeedEvent]:
        """Get all seed events scheduled for a specific frame."""
        return [event for event in self.seed_events if event.frame == frame]

    def to_dict(self) -> Dict:
        """Convert scene to dictionary for JSON serialization."""
        return {
            "width": self.width,
            "height": self.height,
            "radius": self.radius,
            "k": self.k,
            "seed": self.seed,
            "start": self.start,
            "loop_size": self.loop_size,
            "draw_dots": self.draw_dots,
            "draw_lines": self.draw_lines,
            "draw_active": self.draw_active,
            "colormap": self.colormap,
            "dot_radius": self.dot_radius,
            "line_color": self.line_color,
            "line_radius": self.line_radius,
            "active_color": self.active_color,
            "seed_events": [
                {"frame": e.frame, "point": e.point}
                for e in self.seed_events
            ]
        }

    @classmethod
    def from_dict(cls, data: Dict) -> 'Scene':
        """Create scene from dictionary."""
        loop_size = int(data.get("loop_size", 20))
        if loop_size < 0:
            raise ValueError(f"loop_size must be non-negative, got {loop_size}")

        scene = cls(
            width=data.get("width", 1000.0),
            height=data.get("height", 1000.0),
            radius=data.get("radius", 50.0),
            k=data.get("k", 30),
            seed=data.get("seed", None),
            start=_as_point(data.get("start", None), "start"),
            loop_size=loop_size,
            draw_dots=data.get("draw_dots", True),
            draw_lines=data.get("draw_lines", True),
            draw_active=data.get("draw_active", False),
            colormap=data.get("colormap", "rainbow"),
            dot_radius=data.get("dot_radius", 3.0),
            line_color=data.get("line_color", None),
            line_radius=data.get("line_radius", 0.5),
            active_color=data.get("active_color", None)
        )

        # Add seed events
        for event_data in data.get("seed_events", []):
            scene.add_seed_event(
                frame=int(event_data["frame"]),
                point=_as_point(event_data.get("point", None), "seed_events.point")
            )

        return scene

    @classmethod
    def from_json(cls, filepath: str) -> 'Scene':
        """Load scene from JSON file."""
        with open(filepath, 'r') as f:
            data = json.load(f)
        return cls.from_dict(data)

    def to_json(self, filepath: str):
        """Save scene to JSON file."""
        with open(filepath, 'w') as f:
            json.dump(self.to_dict(), f, indent=2)
