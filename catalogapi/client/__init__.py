from .networking import Networking

__all__ = ["Networking"]
