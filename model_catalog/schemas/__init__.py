from model_catalog.schemas.model import Model, ModelListResponse

__all__ = [
    "Model",
    "ModelListResponse",
]
