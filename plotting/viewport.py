"""plotting/viewport.py"""
import numpy as np

from config.config import GRAPH_CONFIG


class Viewport:
    """画布坐标 <-> 图形坐标，平移和缩放"""

    def __init__(self, width=None, height=None, scale=None, offset_x=0.0, offset_y=0.0,
                 zoom_intensity=None):
        self.width = int(GRAPH_CONFIG["width"] if width is None else width)
        self.height = int(GRAPH_CONFIG["height"] if height is None else height)
        self.scale = float(GRAPH_CONFIG["scale"] if scale is None else scale)
        self.offset_x = float(offset_x)
        self.offset_y = float(offset_y)
        self.zoom_intensity = GRAPH_CONFIG["zoom_intensity"] if zoom_intensity is None else zoom_intensity

    @property
    def center_x(self):
        return self.width / 2 + self.offset_x

    @property
    def center_y(self):
        return self.height / 2 + self.offset_y

    def to_graph_x(self, px):
        return (px - self.center_x) / self.scale

    def to_graph_y(self, py):
        return (self.center_y - py) / self.scale

    def to_pixel_x(self, x):
        return self.center_x + x * self.scale

    def to_pixel_y(self, y):
        return self.center_y - y * self.scale

    def column_coordinates(self):
        """每个像素列对应的图形 x 坐标"""
        return self.to_graph_x(np.arange(self.width, dtype=float))

    def pan(self, dx, dy):
        """拖拽：按像素位移移动原点"""
        self.offset_x += dx
        self.offset_y += dy

    def zoom(self, direction):
        """direction: +1 放大（滚轮向上），-1 缩小；以画布中心为基准"""
        self.scale *= np.exp(np.sign(direction) * self.zoom_intensity)

    def resize(self, width, height):
        self.width = int(width)
        self.height = int(height)

    def grid_lines(self):
        """
        Returns:
            (竖线像素 x 数组, 横线像素 y 数组)，间隔为一个单位
        """
        cx, cy = self.center_x, self.center_y
        start_col = int(np.floor(-cx / self.scale))
        end_col = int(np.floor((self.width - cx) / self.scale))
        start_row = int(np.floor(-cy / self.scale))
        end_row = int(np.floor((self.height - cy) / self.scale))
        xs = cx + np.arange(start_col, end_col + 1) * self.scale
        ys = cy + np.arange(start_row, end_row + 1) * self.scale
        return xs, ys

    def axes(self):
        """x 轴的像素 y 和 y 轴的像素 x"""
        return self.center_y, self.center_x

    def __repr__(self):
        return (f"Viewport({self.width}x{self.height}, scale={self.scale:.3f}, "
                f"offset=({self.offset_x:.1f}, {self.offset_y:.1f}))")
