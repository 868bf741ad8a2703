"""Field validation.

pydantic 스키마로 요청 값을 검증하고, 실패한 필드마다 FieldError 하나를 만듭니다.
전송 계층과 무관합니다.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any, Literal, Mapping, TypeVar

from pydantic import BaseModel, ConfigDict, ValidationError

from schools.application.common.exceptions import SchoolValidationError

Location = Literal["body", "query"]
SchemaT = TypeVar("SchemaT", bound="PayloadSchema")


@dataclass(frozen=True)
class FieldError:
    """필드 하나의 검증 오류."""

    path: str
    msg: str
    location: Location
    value: Any = None
    type: str = "field"

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


class PayloadSchema(BaseModel):
    """요청 검증 스키마 기반 클래스.

    문자열은 앞뒤 공백을 제거하고, float 는 유한한 값만 허용합니다.
    """

    model_config = ConfigDict(str_strip_whitespace=True, allow_inf_nan=False)


def coerce_number(value: Any) -> Any:
    """float 필드 입력을 pydantic 에 넘기기 전에 정리합니다.

    bool 과 float 범위를 넘는 정수는 거부합니다.
    """
    if isinstance(value, bool):
        raise ValueError("boolean is not a number")
    if isinstance(value, int):
        try:
            return float(value)
        except OverflowError as exc:
            raise ValueError("number is out of float range") from exc
    if isinstance(value, str):
        return value.strip()
    return value


def _as_mapping(payload: Any) -> Mapping[str, Any]:
    # 객체가 아닌 본문은 모든 필드 누락으로 처리
    return payload if isinstance(payload, Mapping) else {}


def field_errors(
    exc: ValidationError,
    payload: Mapping[str, Any],
    schema: type[PayloadSchema],
    messages: Mapping[str, str],
    location: Location,
) -> list[FieldError]:
    """pydantic 오류를 스키마 필드 순서의 FieldError 목록으로 바꿉니다."""
    failed = {str(item["loc"][0]) for item in exc.errors() if item["loc"]}
    return [
        FieldError(path=field, msg=messages[field], location=location, value=payload.get(field))
        for field in schema.model_fields
        if field in failed
    ]


def parse(
    payload: Any,
    schema: type[SchemaT],
    messages: Mapping[str, str],
    location: Location,
) -> SchemaT:
    """payload 를 검증해 스키마 인스턴스를 반환합니다.

    Raises:
        SchoolValidationError: 하나 이상의 필드가 유효하지 않음
    """
    data = _as_mapping(payload)
    try:
        return schema.model_validate(dict(data))
    except ValidationError as exc:
        errors = field_errors(exc, data, schema, messages, location)
        raise SchoolValidationError(errors) from exc


def validate(
    payload: Any,
    schema: type[PayloadSchema],
    messages: Mapping[str, str],
    location: Location,
) -> list[FieldError]:
    """실패한 필드의 오류 목록을 반환합니다. 통과하면 빈 목록입니다."""
    try:
        parse(payload, schema, messages, location)
    except SchoolValidationError as exc:
        return exc.errors
    return []
