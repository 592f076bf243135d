from .contact_store import ContactStore

__all__ = ["ContactStore"]
