"""core/operators.py"""
import numpy as np

DEG_TO_RAD = np.pi / 180
RAD_TO_DEG = 180 / np.pi


def _f(x):
    return np.float64(x)


class Operators:
    """所有操作符和函数的静态方法集合

    统一在 np.errstate(all='ignore') 下计算：除零得到 inf/nan，
    定义域之外得到 nan，溢出得到 inf，都不抛异常。
    """

    # 二元操作符========================================
    @staticmethod
    def add(a, b):
        """加法"""
        with np.errstate(all='ignore'):
            return float(_f(a) + _f(b))

    @staticmethod
    def sub(a, b):
        """减法"""
        with np.errstate(all='ignore'):
            return float(_f(a) - _f(b))

    @staticmethod
    def mul(a, b):
        """乘法"""
        with np.errstate(all='ignore'):
            return float(_f(a) * _f(b))

    @staticmethod
    def div(a, b):
        """除法：1/0 -> inf，0/0 -> nan"""
        with np.errstate(all='ignore'):
            return float(np.divide(_f(a), _f(b)))

    @staticmethod
    def mod(a, b):
        """截断取模，结果符号跟随被除数：-7 % 3 -> -1"""
        with np.errstate(all='ignore'):
            return float(np.fmod(_f(a), _f(b)))

    @staticmethod
    def pow(a, b):
        """幂运算：负数的分数次幂 -> nan"""
        with np.errstate(all='ignore'):
            return float(np.power(_f(a), _f(b)))

    # 一元操作符========================================
    @staticmethod
    def neg(a):
        return float(-_f(a))

    # 函数==============================================
    # 三角函数的输入按角度模式换算
    @staticmethod
    def sin(arg, degrees=False):
        with np.errstate(all='ignore'):
            return float(np.sin(_f(arg) * DEG_TO_RAD if degrees else _f(arg)))

    @staticmethod
    def cos(arg, degrees=False):
        with np.errstate(all='ignore'):
            return float(np.cos(_f(arg) * DEG_TO_RAD if degrees else _f(arg)))

    @staticmethod
    def tan(arg, degrees=False):
        with np.errstate(all='ignore'):
            return float(np.tan(_f(arg) * DEG_TO_RAD if degrees else _f(arg)))

    # 反三角函数的输出按角度模式换算
    @staticmethod
    def asin(arg, degrees=False):
        with np.errstate(all='ignore'):
            val = np.arcsin(_f(arg))
            return float(val * RAD_TO_DEG if degrees else val)

    @staticmethod
    def acos(arg, degrees=False):
        with np.errstate(all='ignore'):
            val = np.arccos(_f(arg))
            return float(val * RAD_TO_DEG if degrees else val)

    @staticmethod
    def atan(arg, degrees=False):
        with np.errstate(all='ignore'):
            val = np.arctan(_f(arg))
            return float(val * RAD_TO_DEG if degrees else val)

    @staticmethod
    def log(arg, degrees=False):
        """以10为底"""
        with np.errstate(all='ignore'):
            return float(np.log10(_f(arg)))

    @staticmethod
    def ln(arg, degrees=False):
        with np.errstate(all='ignore'):
            return float(np.log(_f(arg)))

    @staticmethod
    def sqrt(arg, degrees=False):
        """负数 -> nan"""
        with np.errstate(all='ignore'):
            return float(np.sqrt(_f(arg)))

    @staticmethod
    def abs(arg, degrees=False):
        return float(np.abs(_f(arg)))


BINARY_KERNELS = {
    '+': Operators.add,
    '-': Operators.sub,
    '*': Operators.mul,
    '/': Operators.div,
    '%': Operators.mod,
    '^': Operators.pow,
}
