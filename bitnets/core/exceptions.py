"""
The custom exceptions used throughout bitnets
"""
__all__ = ["DataEncodingError", "NetworkError", "NetworkCollisionError", "NetworkConfigError"]


class DataEncodingError(Exception):
    """
    For use in encoding/decoding algorithms
    """
    pass


class NetworkError(Exception):
    """
    Catchall for network registry errors
    """
    pass


class NetworkCollisionError(NetworkError):
    """
    For when a strict registry is asked to index a value already owned by another network
    """
    pass


class NetworkConfigError(NetworkError):
    """
    For use when loading network definitions from a config file
    """
    pass
