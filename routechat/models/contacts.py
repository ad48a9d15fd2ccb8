"""연락처 모델

연락처 응답기에 주입되는 읽기 전용 연락처 목록.
실행 중에는 변경되지 않습니다.
"""
from __future__ import annotations

import json
from pathlib import Path
from typing import Iterator, List, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter


class Contact(BaseModel):
    """단일 연락처"""
    model_config = ConfigDict(frozen=True)

    name: str = Field(..., min_length=1, description="이름")
    phone: str = Field(..., min_length=1, description="전화번호")
    city: str = Field(default="", description="도시")


class ContactBook(BaseModel):
    """읽기 전용 연락처 목록"""
    model_config = ConfigDict(frozen=True)

    contacts: Tuple[Contact, ...] = Field(default_factory=tuple)

    def __len__(self) -> int:
        return len(self.contacts)

    def __iter__(self) -> Iterator[Contact]:  # type: ignore[override]
        return iter(self.contacts)

    def find_by_name(self, name: str) -> Optional[Contact]:
        """이름으로 연락처 조회 (대소문자/앞뒤 공백 무시)"""
        key = name.strip().casefold()
        for contact in self.contacts:
            if contact.name.casefold() == key:
                return contact
        return None

    def to_json(self, indent: int = 2) -> str:
        """프롬프트 삽입용 JSON 배열 문자열"""
        return json.dumps(
            [contact.model_dump() for contact in self.contacts],
            ensure_ascii=False,
            indent=indent,
        )

    @classmethod
    def from_list(cls, items: List[dict]) -> "ContactBook":
        contacts = TypeAdapter(List[Contact]).validate_python(items)
        return cls(contacts=tuple(contacts))

    @classmethod
    def from_json_file(cls, path: str | Path) -> "ContactBook":
        """JSON 파일에서 로드. 파일 최상위는 연락처 객체 배열이어야 합니다.

        Raises:
            FileNotFoundError: 파일이 없을 때
            pydantic.ValidationError: 형식이 맞지 않을 때
        """
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
        return cls.from_list(data)

    @classmethod
    def default(cls) -> "ContactBook":
        return cls(contacts=DEFAULT_CONTACTS)


DEFAULT_CONTACTS: Tuple[Contact, ...] = (
    Contact(name="Andi", phone="08123456789", city="Makassar"),
    Contact(name="Budi", phone="08987654321", city="Bone"),
)


def load_contact_book(path: str | Path | None = None) -> ContactBook:
    """설정된 경로가 있으면 파일에서, 없으면 기본 연락처로 ContactBook 생성"""
    if path:
        return ContactBook.from_json_file(path)
    return ContactBook.default()
