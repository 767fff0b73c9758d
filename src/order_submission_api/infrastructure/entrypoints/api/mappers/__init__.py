from .order_payload_mapper import OrderPayloadMapper

__all__ = ["OrderPayloadMapper"]
