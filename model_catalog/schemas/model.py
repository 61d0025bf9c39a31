import time
from contextlib import contextmanager
from contextvars import ContextVar
from typing import Any, Dict, List, Optional, Sequence, Tuple

from pydantic import BaseModel, Field, ValidationError, ValidationInfo, field_validator

from model_catalog.core.exceptions import InvalidArgumentError, ModelNotFoundError


WHISPER_KEYWORD = "whisper"
TTS_KEYWORDS = ("tts", "speech")

# 外层构造进行中时为 True，嵌套记录的校验错误交由外层统一转换
_validating: ContextVar[bool] = ContextVar("catalog_model_validating", default=False)


@contextmanager
def _invalid_argument_on_error():
    """最外层调用时将 pydantic 校验错误转换为 InvalidArgumentError"""
    if _validating.get():
        yield
        return

    token = _validating.set(True)
    try:
        yield
    except ValidationError as e:
        raise InvalidArgumentError.from_validation_error(e) from e
    finally:
        _validating.reset(token)


class CatalogModel(BaseModel):
    """不可变记录基类，校验失败统一抛出 InvalidArgumentError"""

    model_config = {"frozen": True}

    def __init__(self, **data: Any):
        with _invalid_argument_on_error():
            super().__init__(**data)

    @classmethod
    def model_validate(cls, obj: Any, **kwargs: Any):
        with _invalid_argument_on_error():
            return super().model_validate(obj, **kwargs)

    @classmethod
    def model_validate_json(cls, json_data: Any, **kwargs: Any):
        with _invalid_argument_on_error():
            return super().model_validate_json(json_data, **kwargs)

    def model_copy(self, *, update: Optional[Dict[str, Any]] = None, deep: bool = False):
        """复制记录，带 update 时按新值重新构造并校验"""
        copied = super().model_copy(deep=deep)
        if not update:
            return copied
        return type(self)(**{**dict(copied), **update})


class Model(CatalogModel):
    """模型信息"""

    id: str = Field(..., description="模型 ID")
    object: str = Field(..., description="对象类型，固定为 model")
    created: int = Field(..., ge=0, strict=True, description="创建时间 (Unix 秒)")
    owned_by: str = Field(..., description="所属方")
    active: bool = Field(..., strict=True, description="是否可用")
    context_window: int = Field(..., ge=0, strict=True, description="上下文窗口 (token)")
    public_apps: Optional[Any] = Field(default=None, description="公开应用信息")
    max_completion_tokens: Optional[int] = Field(
        default=None, ge=1, strict=True, description="单次最大生成 token 数"
    )

    @field_validator("id", "object", "owned_by")
    @classmethod
    def _not_blank(cls, value: str, info: ValidationInfo) -> str:
        if not value.strip():
            raise ValueError(f"{info.field_name} 不能为空")
        return value

    def __hash__(self) -> int:
        # public_apps 可能是列表或字典，不参与哈希
        return hash((self.id, self.object, self.created, self.owned_by))

    @property
    def is_active(self) -> bool:
        return self.active

    @property
    def has_max_completion_tokens(self) -> bool:
        return self.max_completion_tokens is not None

    @property
    def has_public_apps(self) -> bool:
        return self.public_apps is not None

    @property
    def effective_max_tokens(self) -> int:
        """有生成上限时取上限，否则取上下文窗口"""
        if self.max_completion_tokens is not None:
            return self.max_completion_tokens
        return self.context_window

    @property
    def display_name(self) -> str:
        return self.id.replace("-", " ").upper()

    @property
    def is_whisper_model(self) -> bool:
        return WHISPER_KEYWORD in self.id.lower()

    @property
    def is_tts_model(self) -> bool:
        model_id = self.id.lower()
        return any(keyword in model_id for keyword in TTS_KEYWORDS)

    @property
    def is_chat_model(self) -> bool:
        # 只排除含 tts 的 ID，含 speech 的 ID 同时算作语音合成和对话模型
        return not self.is_whisper_model and "tts" not in self.id.lower()

    @classmethod
    def simple(
        cls, model_id: str, owned_by: str, active: bool, context_window: int
    ) -> "Model":
        """以当前时间创建一个只含必填信息的模型"""
        return cls(
            id=model_id,
            object="model",
            created=int(time.time()),
            owned_by=owned_by,
            active=active,
            context_window=context_window,
        )


class ModelListResponse(CatalogModel):
    """模型列表响应"""

    object: str = Field(..., description="对象类型，固定为 list")
    data: Tuple[Model, ...] = Field(..., description="模型列表，保持接口返回顺序")

    @field_validator("object")
    @classmethod
    def _object_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("object 不能为空")
        return value

    def __hash__(self) -> int:
        return hash((self.object, self.data))

    @classmethod
    def of(cls, models: Sequence[Model]) -> "ModelListResponse":
        return cls(object="list", data=models)

    @property
    def model_count(self) -> int:
        return len(self.data)

    @property
    def is_empty(self) -> bool:
        return not self.data

    def get_active_models(self) -> List[Model]:
        """获取可用模型"""
        return [m for m in self.data if m.is_active]

    def get_chat_models(self) -> List[Model]:
        """获取可用的对话模型"""
        return [m for m in self.data if m.is_chat_model and m.is_active]

    def get_whisper_models(self) -> List[Model]:
        """获取可用的 Whisper 语音识别模型"""
        return [m for m in self.data if m.is_whisper_model and m.is_active]

    def get_tts_models(self) -> List[Model]:
        """获取可用的语音合成模型"""
        return [m for m in self.data if m.is_tts_model and m.is_active]

    def get_model_ids(self) -> List[str]:
        return [m.id for m in self.data]

    def has_model(self, model_id: str) -> bool:
        return any(m.id == model_id for m in self.data)

    def find_model(self, model_id: str) -> Model:
        """根据 ID 获取模型，重复 ID 时返回第一个"""
        for model in self.data:
            if model.id == model_id:
                return model
        raise ModelNotFoundError(model_id)
