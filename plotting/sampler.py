"""曲线采样 - 编译一次，每个像素列求值一次，遇到失败点断开折线"""
import logging

import numpy as np
import pandas as pd

from config.config import GRAPH_CONFIG
from core import Calculator, EvalError
from plotting.viewport import Viewport

logger = logging.getLogger(__name__)


def parse_plot_input(text):
    """'y = x^2' 或 'f(x)=x^2' -> 'x^2'"""
    expr = text
    if '=' in expr:
        expr = expr.split('=')[1]
    return expr.strip()


class CurveSampler:

    def __init__(self, calculator=None, viewport=None, variable=None):
        # 绘图使用独立的计算器实例
        self.calculator = calculator or Calculator()
        self.viewport = viewport or Viewport()
        self.variable = variable or GRAPH_CONFIG["variable"]
        self.max_overshoot = GRAPH_CONFIG["max_overshoot"]

    def _in_range(self, py):
        h = self.viewport.height
        k = self.max_overshoot
        return -h * k <= py <= h * (1 + k)

    def _sample_columns(self, compiled):
        """
        Returns:
            (xs, ys, pys)；不可绘制的采样点 y/py 为 nan
        """
        vp = self.viewport
        xs = vp.column_coordinates()
        ys = np.full(len(xs), np.nan)
        pys = np.full(len(xs), np.nan)
        failures = 0

        for px, x in enumerate(xs):
            try:
                y = compiled({self.variable: float(x)})
            except EvalError as e:
                failures += 1
                logger.debug(f"Sample at x={x:.4f} failed: {e}")
                continue

            if not np.isfinite(y):
                continue
            py = vp.to_pixel_y(y)
            # 避免画到无穷远
            if not self._in_range(py):
                continue
            ys[px] = y
            pys[px] = py

        if failures:
            logger.debug(f"{failures} of {len(xs)} samples failed for '{compiled.expression}'")
        return xs, ys, pys

    def sample(self, expression):
        """
        Args:
            expression: 绘图输入（可带 'y =' 前缀）
        Returns:
            折线段列表，每段是 shape (n, 2) 的数组 [像素x, 像素y]
        """
        compiled = self.calculator.compile(parse_plot_input(expression))
        if compiled is None:
            return []

        _, _, pys = self._sample_columns(compiled)
        segments = []
        current = []
        for px, py in enumerate(pys):
            if np.isnan(py):
                if current:
                    segments.append(np.array(current))
                    current = []
                continue
            current.append((float(px), py))
        if current:
            segments.append(np.array(current))

        logger.debug(f"Sampled '{expression}' into {len(segments)} segment(s)")
        return segments

    def sample_frame(self, expression):
        """每个像素列一行：x, y, px, py, segment（断开处 segment 为 -1）"""
        columns = ['x', 'y', 'px', 'py', 'segment']
        compiled = self.calculator.compile(parse_plot_input(expression))
        if compiled is None:
            return pd.DataFrame(columns=columns)

        xs, ys, pys = self._sample_columns(compiled)
        valid = ~np.isnan(pys)
        # 每个有效段的起点处编号递增
        starts = valid & ~np.concatenate(([False], valid))[:-1]
        segment = np.where(valid, np.cumsum(starts) - 1, -1)

        return pd.DataFrame({
            'x': xs,
            'y': ys,
            'px': np.arange(len(xs), dtype=float),
            'py': pys,
            'segment': segment,
        }, columns=columns)
