from .event_decoders import EVMEventDecoder

__all__ = ["EVMEventDecoder"]
