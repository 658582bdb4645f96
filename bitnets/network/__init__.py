"""
Network descriptors and the registry used to look them up
"""

# network/__init__.py
from bitnets.network.config import *
from bitnets.network.known_networks import *
from bitnets.network.network import *
from bitnets.network.registry import *
