"""
日志配置
"""
import sys
from typing import Optional

from loguru import logger

from model_catalog.core.config import Settings, get_settings


def setup_logging(settings: Optional[Settings] = None) -> int:
    """
    配置日志输出并启用 model_catalog 的日志

    Args:
        settings: 配置对象，默认使用全局配置

    Returns:
        int: 新增处理器的 ID
    """
    settings = settings or get_settings()
    level = "DEBUG" if settings.debug else settings.log_level.upper()

    logger.remove()  # 移除默认处理器
    handler_id = logger.add(sys.stderr, level=level, format=settings.log_format)
    logger.enable("model_catalog")
    logger.debug(f"{settings.app_name} v{settings.app_version} 日志级别: {level}")
    return handler_id
