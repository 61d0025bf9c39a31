"""
模型目录 - 模型列表接口的记录类型
"""
from loguru import logger

from model_catalog.core.exceptions import (
    CatalogError,
    InvalidArgumentError,
    ModelNotFoundError,
    ModelParseError,
)
from model_catalog.schemas import Model, ModelListResponse
from model_catalog.services.model_service import ModelService, model_service

# 作为库使用时默认不输出日志，调用 setup_logging() 后启用
logger.disable(__name__)

__all__ = [
    "CatalogError",
    "InvalidArgumentError",
    "ModelNotFoundError",
    "ModelParseError",
    "Model",
    "ModelListResponse",
    "ModelService",
    "model_service",
]
