"""
bitnets: a registry of blockchain network parameters

Networks:
    -Describes a network by its address prefixes, extended key versions, magic bytes, port and dns seeds
    -Resolves a network from any one of its identifying values
"""
# bitnets/__init__.py
from bitnets.core import *
from bitnets.data import *
from bitnets.network import *
