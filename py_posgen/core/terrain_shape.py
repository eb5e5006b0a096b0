"""
Read-only views over the terrain buffers produced by the image pipeline.

The mask and edge images arrive as pixel buffers; the algorithms only ever
read one channel of one pixel at a time, so both are wrapped in TerrainGrid,
which hides the channel selection and bounds handling.
"""

import numpy as np
from dataclasses import dataclass
from typing import Optional


class TerrainGrid:
    """Single-channel, read-only 2-D grid indexed as (x, y)."""

    def __init__(self, data: np.ndarray, channel: Optional[int] = None):
        """
        Wrap a pixel buffer.

        Args:
            data: Array of shape (height, width) or (height, width, channels)
            channel: Channel to read when data has a channel axis
        """
        data = np.asarray(data)
        if data.ndim == 3:
            if channel is None:
                raise ValueError("channel is required for multi-channel buffers")
            if not 0 <= channel < data.shape[2]:
                raise ValueError(
                    f"channel {channel} out of range for buffer with {data.shape[2]} channels"
                )
            data = data[:, :, channel]
        elif data.ndim != 2:
            raise ValueError(f"Expected a 2-D or 3-D buffer, got shape {data.shape}")

        plane = np.array(data, dtype=np.int32)
        plane.setflags(write=False)
        self._plane = plane

    @property
    def plane(self) -> np.ndarray:
        """Read-only (height, width) array of channel values."""
        return self._plane

    @property
    def width(self) -> int:
        return self._plane.shape[1]

    @property
    def height(self) -> int:
        return self._plane.shape[0]

    def contains(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def channel_at(self, x: int, y: int) -> int:
        """Channel value of pixel (x, y)."""
        if not self.contains(x, y):
            raise IndexError(f"Pixel ({x}, {y}) outside {self.width}x{self.height} grid")
        return int(self._plane[y, x])


@dataclass(frozen=True)
class TerrainShape:
    """Terrain mask plus its vertical edge map, both on the same pixel grid."""

    mask: TerrainGrid
    edges_y: TerrainGrid

    def __post_init__(self):
        if (self.mask.width, self.mask.height) != (self.edges_y.width, self.edges_y.height):
            raise ValueError(
                f"Mask is {self.mask.width}x{self.mask.height} but edges are "
                f"{self.edges_y.width}x{self.edges_y.height}"
            )

    @property
    def width(self) -> int:
        return self.mask.width

    @property
    def height(self) -> int:
        return self.mask.height

    @classmethod
    def from_arrays(cls, mask: np.ndarray, edges_y: np.ndarray) -> "TerrainShape":
        """Build from two single-channel (height, width) arrays."""
        return cls(mask=TerrainGrid(mask), edges_y=TerrainGrid(edges_y))

    @classmethod
    def from_rgba(
        cls,
        mask_rgba: np.ndarray,
        edges_rgba: np.ndarray,
        mask_channel: int = 3,
        edges_channel: int = 0,
    ) -> "TerrainShape":
        """
        Build from RGBA image buffers of shape (height, width, 4).

        The mask is read from its alpha channel and the edge map from its red
        channel unless told otherwise.
        """
        return cls(
            mask=TerrainGrid(mask_rgba, channel=mask_channel),
            edges_y=TerrainGrid(edges_rgba, channel=edges_channel),
        )
