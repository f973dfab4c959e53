"""配置文件"""
import logging
import math

logger = logging.getLogger(__name__)

# 引擎参数
ENGINE_CONFIG = {
    "angle_mode": "deg",  # 'deg' 或 'rad'，界面按钮切换
    "constants": {
        "PI": math.pi,
        "E": math.e,
    },
    "history_limit": None,  # None 表示不限制
}

# 绘图参数
GRAPH_CONFIG = {
    "scale": 40.0,  # 每个单位对应的像素数
    "zoom_intensity": 0.1,  # 滚轮一格：scale *= exp(±0.1)
    "width": 800,
    "height": 600,
    "max_overshoot": 1.0,  # 像素 y 超出 [-h*k, h*(1+k)] 时断开曲线
    "variable": "x",
}

# 单位换算参数
CONVERTER_CONFIG = {
    "precision": 6,  # 结果保留的小数位
}


# 验证配置
def validate_config():
    """验证配置的合理性"""
    assert ENGINE_CONFIG["angle_mode"] in ("deg", "rad"), "angle_mode 只能是 deg 或 rad"
    assert {"PI", "E"} <= {k.upper() for k in ENGINE_CONFIG["constants"]}, "常量表必须包含 PI 和 E"
    limit = ENGINE_CONFIG["history_limit"]
    assert limit is None or limit > 0, "history_limit 必须为正数或 None"
    assert GRAPH_CONFIG["scale"] > 0, "scale 必须为正数"
    assert GRAPH_CONFIG["width"] > 0 and GRAPH_CONFIG["height"] > 0, "画布尺寸必须为正数"
    assert CONVERTER_CONFIG["precision"] >= 0, "precision 不能为负数"
    logger.info("Configuration validated successfully!")
