from typing import Any, List, Mapping

from loguru import logger

from model_catalog.core.exceptions import InvalidArgumentError, ModelParseError
from model_catalog.schemas.model import Model, ModelListResponse


class ModelService:
    """模型记录构建服务，将已解码的接口数据转换为模型记录"""

    def parse_model(self, payload: Mapping[str, Any]) -> Model:
        """
        根据单个模型数据构建 Model

        Args:
            payload: 已解码的模型对象，例如 {"id": "...", "owned_by": "...", ...}

        Returns:
            Model: 校验通过的模型记录

        Raises:
            ModelParseError: 数据格式或字段取值不合法
        """
        if not isinstance(payload, Mapping):
            raise ModelParseError(f"模型数据格式错误: {type(payload).__name__}")

        try:
            return Model(**payload)
        except InvalidArgumentError as e:
            logger.warning(f"模型数据校验失败: {e}")
            raise ModelParseError(f"模型数据解析失败: {e}") from e

    def parse_model_list(self, payload: Mapping[str, Any]) -> ModelListResponse:
        """
        根据模型列表数据构建 ModelListResponse

        Args:
            payload: 已解码的列表对象，包含 object 和 data

        Returns:
            ModelListResponse: 保持原始顺序的模型列表

        Raises:
            ModelParseError: 列表或其中任一模型不合法
        """
        if not isinstance(payload, Mapping):
            raise ModelParseError(f"模型列表数据格式错误: {type(payload).__name__}")

        entries = payload.get("data")
        if entries is None:
            raise ModelParseError("模型列表缺少 data 字段")
        if not isinstance(entries, list):
            raise ModelParseError(f"data 字段必须是列表: {type(entries).__name__}")

        models: List[Model] = []
        for index, entry in enumerate(entries):
            try:
                models.append(self.parse_model(entry))
            except ModelParseError as e:
                raise ModelParseError(f"第 {index} 个模型解析失败: {e}", index=index) from e

        try:
            response = ModelListResponse(object=payload.get("object"), data=models)
        except InvalidArgumentError as e:
            raise ModelParseError(f"模型列表解析失败: {e}") from e

        logger.debug(f"解析模型列表: {response.model_count} 个模型")
        return response


model_service = ModelService()
