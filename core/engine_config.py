"""引擎配置 - 角度模式和常量表"""
from collections.abc import MutableMapping
from enum import Enum

import numpy as np

from config.config import ENGINE_CONFIG


class AngleMode(Enum):
    DEGREES = "deg"
    RADIANS = "rad"


class ConstantTable(MutableMapping):
    """键不区分大小写的常量表（内部统一存大写键）"""

    def __init__(self, values=None):
        self._data = {}
        self.update(values or {})

    def __setitem__(self, name, value):
        self._data[name.upper()] = float(value)

    def __getitem__(self, name):
        return self._data[name.upper()]

    def __contains__(self, name):
        return isinstance(name, str) and name.upper() in self._data

    def __delitem__(self, name):
        del self._data[name.upper()]

    def __iter__(self):
        return iter(self._data)

    def __len__(self):
        return len(self._data)

    def copy(self):
        return ConstantTable(self._data)

    def __repr__(self):
        return f"ConstantTable({self._data!r})"


class EngineConfig:
    """
    求值期间只读；在两次求值之间可修改。
    CompiledExpression 持有同一个实例，因此修改角度模式会影响已编译的表达式。
    """

    def __init__(self, angle_mode=AngleMode.DEGREES, constants=None):
        self.angle_mode = angle_mode
        if constants is None:
            constants = {'PI': np.pi, 'E': np.e}
        self.constants = ConstantTable(constants)

    @property
    def angle_mode(self):
        return self._angle_mode

    @angle_mode.setter
    def angle_mode(self, mode):
        self._angle_mode = AngleMode(mode)

    @property
    def degrees(self):
        return self._angle_mode == AngleMode.DEGREES

    @classmethod
    def from_dict(cls, cfg=None):
        cfg = ENGINE_CONFIG if cfg is None else cfg
        return cls(
            angle_mode=cfg.get('angle_mode', AngleMode.DEGREES.value),
            constants=cfg.get('constants'),
        )

    def __repr__(self):
        return f"EngineConfig(angle_mode={self._angle_mode.value!r}, constants={dict(self.constants)!r})"
