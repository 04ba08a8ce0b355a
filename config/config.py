"""配置文件"""

# 分词参数
TOKENIZER_CONFIG = {
    "strict": False,  # False: 无法识别的字符跳过并警告；True: 直接抛出异常
}

# 数值积分参数
INTEGRATION_CONFIG = {
    "default_rule": "simpson",
    "default_strips": 100,
    "max_strips": 10_000_000,  # 外层调用者的最坏耗时上限
    "zero_width_tolerance": 1e-7,  # |upper - lower| 小于此值直接返回0
    "require_even_simpson_strips": False,  # True: Simpson法则下奇数strips报错
}

# 精度评估参数（与 scipy.integrate.quad 参考值比较）
METRICS_CONFIG = {
    "quad_limit": 200,
    "convergence_strips": [2, 4, 8, 16, 32, 64, 128],
}

# 命令行输出
CLI_CONFIG = {
    "log_level": "INFO",
    "table_strips": 10,  # --table 打印的采样网格份数
    "results_path": "integration_results.txt",
}


# 验证配置
def validate_config():
    """验证配置的合理性"""
    assert INTEGRATION_CONFIG["default_rule"] in ("simpson", "trapezoidal"), "未知的积分法则"
    assert INTEGRATION_CONFIG["default_strips"] >= 1, "strips 至少为1"
    assert INTEGRATION_CONFIG["max_strips"] >= INTEGRATION_CONFIG["default_strips"], "默认strips超过上限"
    assert INTEGRATION_CONFIG["zero_width_tolerance"] > 0, "零宽阈值必须为正"
    assert all(n >= 1 for n in METRICS_CONFIG["convergence_strips"]), "收敛表的strips至少为1"
    assert CLI_CONFIG["table_strips"] >= 1, "采样表至少1份"
