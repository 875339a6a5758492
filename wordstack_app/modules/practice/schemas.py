from typing import Any, Dict, List, Optional, Type, TypeVar

from pydantic import BaseModel, Field, StrictInt, StrictStr, ValidationError, model_validator

from wordstack_app.core.error_handlers import InvalidArgumentError

from .config import PracticeModuleDefaultConfig

ModelT = TypeVar('ModelT', bound=BaseModel)


class LoadCorpusRequest(BaseModel):
    """Either explicit rows or raw tab-separated text (header line first)."""
    rows: Optional[List[List[StrictStr]]] = None
    text: Optional[StrictStr] = None

    class Config:
        extra = "ignore"

    @model_validator(mode='after')
    def _one_source(self):
        if (self.rows is None) == (self.text is None):
            raise ValueError("provide exactly one of 'rows' or 'text'")
        return self


class MasteryIdsRequest(BaseModel):
    ids: List[StrictInt]

    class Config:
        extra = "ignore"


class ListeningStartRequest(BaseModel):
    level: StrictInt = Field(default=0, ge=0)

    class Config:
        extra = "ignore"


class QuizStartRequest(BaseModel):
    level: StrictInt = Field(default=0, ge=0)
    options_count: StrictInt = Field(
        default=PracticeModuleDefaultConfig.PRACTICE_DEFAULT_QUIZ_OPTIONS, ge=1
    )

    class Config:
        extra = "ignore"


class QuizAnswerRequest(BaseModel):
    choice_id: StrictInt

    class Config:
        extra = "ignore"


class KeystrokeRequest(BaseModel):
    input: StrictStr
    index: StrictInt = Field(ge=0)
    mode: StrictInt = Field(ge=1, le=2)

    class Config:
        extra = "ignore"


def parse_payload(model: Type[ModelT], data: Optional[Dict[str, Any]]) -> ModelT:
    """Validate a request body, converting pydantic errors to ``InvalidArgumentError``."""
    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise InvalidArgumentError('Request body must be a JSON object')
    try:
        return model.model_validate(data)
    except ValidationError as exc:
        errors = {
            '.'.join(str(part) for part in err['loc']) or '__root__': err['msg']
            for err in exc.errors()
        }
        raise InvalidArgumentError('Invalid request payload', errors=errors) from exc
