"""
模型目录异常定义
"""
from typing import Any, Optional

from pydantic import ValidationError


class CatalogError(Exception):
    """模型目录异常基类"""

    pass


class InvalidArgumentError(CatalogError, ValueError):
    """构造参数不合法"""

    def __init__(
        self,
        message: str,
        field: Optional[str] = None,
        value: Any = None,
        reason: Optional[str] = None,
    ):
        super().__init__(message)
        self.field = field
        self.value = value
        self.reason = reason

    @classmethod
    def required_field_missing(cls, field: str) -> "InvalidArgumentError":
        """缺少必填字段"""
        return cls(f"缺少必填字段: {field}", field=field, reason="missing")

    @classmethod
    def invalid_field_value(
        cls, field: str, value: Any, reason: str
    ) -> "InvalidArgumentError":
        """字段取值不合法"""
        return cls(
            f"字段 '{field}' 的值无效: {value!r}，原因: {reason}",
            field=field,
            value=value,
            reason=reason,
        )

    @classmethod
    def from_validation_error(cls, exc: ValidationError) -> "InvalidArgumentError":
        """
        将 pydantic 校验错误转换为 InvalidArgumentError

        只取第一条错误；错误位置拼接为字段路径，例如 data.0.id

        Args:
            exc: pydantic 抛出的校验错误

        Returns:
            InvalidArgumentError: 转换后的异常
        """
        errors = exc.errors()
        if not errors:
            return cls(str(exc))

        error = errors[0]
        field = ".".join(str(part) for part in error.get("loc", ())) or exc.title
        value = error.get("input")

        if error.get("type") == "missing" or value is None:
            return cls.required_field_missing(field)
        return cls.invalid_field_value(field, value, error.get("msg", ""))


class ModelNotFoundError(CatalogError, LookupError):
    """模型不存在"""

    def __init__(self, model_id: str):
        super().__init__(f"模型不存在: {model_id}")
        self.model_id = model_id


class ModelParseError(CatalogError):
    """模型数据无法转换为记录"""

    def __init__(self, message: str, index: Optional[int] = None):
        super().__init__(message)
        self.index = index
