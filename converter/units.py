"""converter/units.py"""
import logging

import numpy as np

from config.config import CONVERTER_CONFIG

logger = logging.getLogger(__name__)

# 相对基准单位的换算系数（第一个单位为基准）
UNIT_FACTORS = {
    'length': {
        'm': 1,
        'cm': 0.01,
        'mm': 0.001,
        'km': 1000,
        'in': 0.0254,
        'ft': 0.3048,
        'yd': 0.9144,
        'mi': 1609.34,
    },
    'mass': {
        'kg': 1,
        'g': 0.001,
        'mg': 0.000001,
        'lb': 0.453592,
        'oz': 0.0283495,
    },
    'data': {
        'B': 1,
        'KB': 1024,
        'MB': 1048576,
        'GB': 1073741824,
        'TB': 1099511627776,
    },
}

# 温度不是线性比例，统一经摄氏度换算
TEMPERATURE_UNITS = ('C', 'F', 'K')

_TO_CELSIUS = {
    'C': lambda v: v,
    'F': lambda v: (v - 32) * 5 / 9,
    'K': lambda v: v - 273.15,
}

_FROM_CELSIUS = {
    'C': lambda c: c,
    'F': lambda c: (c * 9 / 5) + 32,
    'K': lambda c: c + 273.15,
}


def list_categories():
    return list(UNIT_FACTORS) + ['temp']


def list_units(category):
    if category == 'temp':
        return list(TEMPERATURE_UNITS)
    if category not in UNIT_FACTORS:
        raise ValueError(f"Unknown unit category: {category}")
    return list(UNIT_FACTORS[category])


def default_pair(category):
    """界面默认选项：第一个单位 -> 第二个单位"""
    units = list_units(category)
    return units[0], units[1] if len(units) > 1 else units[0]


def convert(value, category, from_unit, to_unit, precision=None):
    """
    Args:
        value: 待换算数值
        category: length / mass / data / temp
    Returns:
        换算结果，保留 precision 位小数；value 为 nan 时返回 nan
    """
    precision = CONVERTER_CONFIG["precision"] if precision is None else precision
    units = list_units(category)
    for unit in (from_unit, to_unit):
        if unit not in units:
            raise ValueError(f"Unknown unit '{unit}' for category '{category}'")

    value = float(value)
    if np.isnan(value):
        return float('nan')

    if category == 'temp':
        result = _FROM_CELSIUS[to_unit](_TO_CELSIUS[from_unit](value))
    else:
        factors = UNIT_FACTORS[category]
        result = value * factors[from_unit] / factors[to_unit]

    logger.debug(f"{value} {from_unit} -> {result} {to_unit}")
    return float(np.round(result, precision))
