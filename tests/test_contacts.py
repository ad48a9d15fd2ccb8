"""연락처 모델 테스트"""

import json

import pytest
from pydantic import ValidationError

from routechat.models.contacts import DEFAULT_CONTACTS, Contact, ContactBook, load_contact_book


class TestContactBook:
    """ContactBook 테스트"""

    def test_default_contacts(self):
        book = ContactBook.default()
        assert len(book) == 2
        assert book.find_by_name("Andi").phone == "08123456789"
        assert book.find_by_name("Budi").city == "Bone"
        assert book.contacts == DEFAULT_CONTACTS

    def test_find_by_name_case_insensitive(self, contact_book):
        assert contact_book.find_by_name("  citra ").phone == "0811111111"
        assert contact_book.find_by_name("Eka") is None

    def test_read_only(self, contact_book):
        with pytest.raises(ValidationError):
            contact_book.contacts = ()
        with pytest.raises(ValidationError):
            contact_book.contacts[0].phone = "000"

    def test_to_json(self, contact_book):
        data = json.loads(contact_book.to_json())
        assert data == [
            {"name": "Citra", "phone": "0811111111", "city": "Parepare"},
            {"name": "Dewi", "phone": "0822222222", "city": "Gowa"},
        ]

    def test_iteration(self, contact_book):
        assert [c.name for c in contact_book] == ["Citra", "Dewi"]

    def test_invalid_contact(self):
        with pytest.raises(ValidationError):
            ContactBook.from_list([{"name": "", "phone": "1"}])
        with pytest.raises(ValidationError):
            Contact(name="Eka")


class TestLoadContactBook:
    def test_without_path_uses_defaults(self):
        assert load_contact_book(None) == ContactBook.default()

    def test_from_file(self, tmp_path):
        path = tmp_path / "contacts.json"
        path.write_text(
            json.dumps([{"name": "Fajar", "phone": "0833", "city": "Maros"}]),
            encoding="utf-8",
        )

        book = load_contact_book(path)

        assert len(book) == 1
        assert book.find_by_name("fajar").city == "Maros"

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_contact_book(tmp_path / "missing.json")
