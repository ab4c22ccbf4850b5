"""
结构化日志配置模块
JSON 格式输出，支持上下文注入 (RequestID, UserID)
"""
import sys
import os
import logging
import json
import contextvars
from logging.handlers import TimedRotatingFileHandler
from typing import Union
from datetime import datetime

# 上下文变量
request_id_ctx = contextvars.ContextVar("request_id", default="-")
user_id_ctx = contextvars.ContextVar("user_id", default="-")


class StructuredJsonFormatter(logging.Formatter):
    """
    将日志记录转化为结构化 JSON 字符串
    """
    def format(self, record):
        log_record = {
            "timestamp": datetime.fromtimestamp(record.created).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "line": record.lineno,
            "message": record.getMessage(),
            "request_id": getattr(record, "request_id", "-"),
            "user_id": getattr(record, "user_id", "-"),
        }
        if record.exc_info:
            log_record["exception"] = self.formatException(record.exc_info)
        return json.dumps(log_record, ensure_ascii=False)


class ContextFilter(logging.Filter):
    """
    将 ContextVars 中的变量注入到每一条日志记录中
    """
    def filter(self, record):
        record.request_id = request_id_ctx.get()
        record.user_id = user_id_ctx.get()
        return True


def bind_context(
    user_id: Union[str, int, None] = None,
    request_id: Union[str, None] = None
):
    if user_id is not None:
        user_id_ctx.set(str(user_id))
    if request_id is not None:
        request_id_ctx.set(request_id)


def setup_logging(level: str = "INFO", log_dir: str = "logs", to_file: bool = True):
    """
    全局日志初始化配置
    """
    formatter = StructuredJsonFormatter()
    ctx_filter = ContextFilter()

    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    # 清除旧处理器
    for handler in list(root_logger.handlers):
        root_logger.removeHandler(handler)

    # 控制台输出
    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(formatter)
    console_handler.addFilter(ctx_filter)
    root_logger.addHandler(console_handler)

    # 文件输出 (按天切割)
    if to_file:
        if not os.path.exists(log_dir):
            os.makedirs(log_dir)
        file_handler = TimedRotatingFileHandler(
            filename=os.path.join(log_dir, "app.log"),
            when="midnight",
            interval=1,
            backupCount=30,
            encoding="utf-8"
        )
        file_handler.setFormatter(formatter)
        file_handler.addFilter(ctx_filter)
        root_logger.addHandler(file_handler)

    # 屏蔽第三方库冗余日志
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)


def get_logger(name: str) -> logging.Logger:
    logger = logging.getLogger(name)
    if not any(isinstance(f, ContextFilter) for f in logger.filters):
        logger.addFilter(ContextFilter())
    return logger
