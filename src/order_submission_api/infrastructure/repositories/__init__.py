from .in_memory_order_store import InMemoryOrderStore

__all__ = ["InMemoryOrderStore"]
