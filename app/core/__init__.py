"""
核心工具模块 (配置、日志、安全、号码校验)
"""
