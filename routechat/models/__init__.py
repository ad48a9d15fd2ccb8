from .contacts import DEFAULT_CONTACTS, Contact, ContactBook, load_contact_book

__all__ = ["Contact", "ContactBook", "DEFAULT_CONTACTS", "load_contact_book"]
