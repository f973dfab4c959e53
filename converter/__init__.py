"""单位换算模块"""
from .units import UNIT_FACTORS, TEMPERATURE_UNITS, convert, list_units, list_categories, default_pair

__all__ = ['UNIT_FACTORS', 'TEMPERATURE_UNITS', 'convert', 'list_units', 'list_categories', 'default_pair']
