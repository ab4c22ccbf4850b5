"""
业务服务模块
"""
