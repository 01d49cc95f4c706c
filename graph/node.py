"""
node.py — City identifiers & canvas layout
===========================================
A city has no object of its own: its normalised label IS its identity.
`NodeId` is a NewType over str so signatures say what they carry, while
staying a plain string at runtime (dict keys, JSON, equality).

Normalisation (strip + upper-case) is done once by the input layer
(`ui.forms.normalize_city`).  Nothing in here touches the text.

The Layout keeps the renderer's (x, y) for each city.  Positions are
random inside the canvas margins and assigned the first time a city is
seen, so adding a path never moves cities that already exist.
"""

import random
from typing import Dict, List, NewType, Optional, Tuple

NodeId = NewType("NodeId", str)


# ---------------------------------------------------------------------------
# Layout
# ---------------------------------------------------------------------------
class Layout:
    """
    Attributes:
        width, height : Canvas size in pixels.
        margin        : Minimum distance from a canvas border.
        positions     : {node_id: (x, y)}
    """

    def __init__(
        self,
        width: float = 900,
        height: float = 600,
        margin: float = 50,
        seed: Optional[int] = None,
    ):
        self.width:     float = width
        self.height:    float = height
        self.margin:    float = margin
        self.positions: Dict[NodeId, Tuple[float, float]] = {}
        self._rng = random.Random(seed)

    def place(self, node_id: NodeId) -> Tuple[float, float]:
        """Position of `node_id`, picking a random one on first sight."""
        if node_id not in self.positions:
            x = self._rng.random() * (self.width - 2 * self.margin) + self.margin
            y = self._rng.random() * (self.height - 2 * self.margin) + self.margin
            self.positions[node_id] = (round(x, 1), round(y, 1))
        return self.positions[node_id]

    def position(self, node_id: NodeId) -> Optional[Tuple[float, float]]:
        return self.positions.get(node_id)

    def node_ids(self) -> List[NodeId]:
        return list(self.positions.keys())

    def clear(self) -> None:
        self.positions.clear()

    def __len__(self) -> int:
        return len(self.positions)

    def __repr__(self) -> str:
        return f"Layout(nodes={len(self.positions)}, size={self.width}x{self.height})"
