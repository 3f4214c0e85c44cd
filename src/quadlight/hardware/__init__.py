from .transport_interface import ITransport
from .virtual_transport import VirtualTransport

__all__ = [
    "ITransport",
    "VirtualTransport",
]
