"""
Draw records and the sink interface the engine renders into.

A sink receives one frame as clear -> draw_batch -> present. Depth is
carried by order alone: records earlier in the batch sit behind later ones.
"""

from dataclasses import dataclass
from typing import Protocol, Sequence, runtime_checkable

from rain.colors import Color


@dataclass(frozen=True)
class RenderChar:
    character: str
    x: float  # pixels
    y: float  # pixels
    color: Color
    font_size: float


@runtime_checkable
class Renderer(Protocol):
    def clear(self, color: Color) -> None: ...

    def draw_batch(self, chars: Sequence[RenderChar]) -> None: ...

    def present(self) -> None: ...

    def surface_width(self) -> int: ...

    def surface_height(self) -> int: ...
