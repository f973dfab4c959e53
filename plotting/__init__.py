"""绘图模块"""
from .viewport import Viewport
from .sampler import CurveSampler, parse_plot_input

__all__ = ['Viewport', 'CurveSampler', 'parse_plot_input']
