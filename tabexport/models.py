"""
@file models.py
@description 레코드/데이터셋 데이터 모델 정의

이 모듈은 JSON 배열을 표 형태로 변환하기 위한 Pydantic 모델과 파싱 함수를 제공합니다.

주요 기능:
1. Record 데이터 모델 - 필드 순서가 보존되는 (이름, 값) 목록
2. Dataset 데이터 모델 - 비어 있지 않은 Record 목록과 헤더
3. JSON 배열 파싱 및 형식 오류 검출
4. 셀 값 문자열 변환

핵심 구현 로직:
- 필드 순서가 곧 열 순서이므로 (이름, 값) 튜플로 순서를 명시적으로 보관
- 첫 번째 레코드의 필드 이름이 헤더가 됨
- 파싱 실패는 모두 FormatError로 변환

@dependencies
- pydantic: 데이터 모델링
- json: JSON 파싱
"""

import json
from typing import Any, List, Mapping, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field

from .errors import FormatError

CONTENT_SUMMARY_LENGTH = 200


def summarize_content(content: Any, limit: int = CONTENT_SUMMARY_LENGTH) -> str:
    """로그용으로 입력 내용을 잘라서 반환합니다."""
    text = content if isinstance(content, str) else repr(content)
    if len(text) > limit:
        return text[:limit] + "..."
    return text


def load_json_array(content: str) -> List[Any]:
    """
    JSON 문자열을 파싱하여 비어 있지 않은 배열을 반환합니다.

    Args:
        content (str): JSON 문자열

    Returns:
        List[Any]: 파싱된 배열 (객체는 필드 순서가 보존된 dict)

    Raises:
        FormatError: JSON 형식 오류, 배열이 아님, 빈 배열
    """
    try:
        data = json.loads(content)
    except (TypeError, ValueError, RecursionError) as e:
        raise FormatError(f"JSON 형식이 올바르지 않습니다: {summarize_content(content)}") from e

    if not isinstance(data, list):
        raise FormatError(f"JSON 배열이 아닙니다: {summarize_content(content)}")
    if not data:
        raise FormatError("내보낼 레코드가 없습니다 (no records to export)")
    return data


def derive_header(first: Any) -> List[str]:
    """첫 번째 요소의 필드 이름으로 헤더를 만듭니다."""
    if not isinstance(first, Mapping):
        raise FormatError(f"첫 번째 요소가 JSON 객체가 아닙니다: {summarize_content(first)}")
    header = list(first.keys())
    if not header:
        raise FormatError("첫 번째 레코드에 필드가 없어 헤더를 만들 수 없습니다")
    return header


def to_text(value: Any, null: str = "") -> str:
    """
    셀 값을 문자열로 변환합니다.

    Args:
        value: JSON에서 읽은 값
        null (str): null 값을 대신할 문자열

    Returns:
        str: 문자열 표현 (불리언은 true/false, 중첩 값은 압축 JSON)
    """
    if value is None:
        return null
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, str):
        return value
    if isinstance(value, (list, dict)):
        return json.dumps(value, ensure_ascii=False, separators=(",", ":"))
    return str(value)


class Record(BaseModel):
    """
    한 행에 해당하는 레코드

    Attributes:
        entries (Tuple[Tuple[str, Any], ...]): 입력 순서 그대로의 (필드 이름, 값) 목록
    """

    model_config = ConfigDict(frozen=True)

    entries: Tuple[Tuple[str, Any], ...]

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, Any]) -> "Record":
        return cls(entries=tuple(mapping.items()))

    def keys(self) -> List[str]:
        return [name for name, _ in self.entries]

    def values(self) -> List[Any]:
        return [value for _, value in self.entries]

    def get(self, name: str, default: Optional[Any] = None) -> Any:
        for key, value in self.entries:
            if key == name:
                return value
        return default

    def __len__(self) -> int:
        return len(self.entries)


class Dataset(BaseModel):
    """
    내보낼 레코드 묶음

    첫 번째 레코드의 필드 이름이 헤더(열 순서)가 됩니다.
    나머지 레코드도 같은 필드 구성을 가진다고 가정하며 별도로 검증하지 않습니다.
    """

    records: List[Record] = Field(min_length=1)

    @classmethod
    def from_json(cls, content: str) -> "Dataset":
        """
        JSON 문자열에서 데이터셋을 생성합니다.

        Raises:
            FormatError: 배열이 아니거나 비어 있거나 객체가 아닌 요소가 있는 경우
        """
        items = load_json_array(content)
        derive_header(items[0])

        records = []
        for index, item in enumerate(items):
            if not isinstance(item, Mapping):
                raise FormatError(
                    f"{index}번째 요소가 JSON 객체가 아닙니다: {summarize_content(item)}"
                )
            records.append(Record.from_mapping(item))
        return cls(records=records)

    @property
    def header(self) -> List[str]:
        return self.records[0].keys()

    def __len__(self) -> int:
        return len(self.records)
